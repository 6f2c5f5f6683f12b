"""Screen background registry."""

from __future__ import annotations

from typing import Mapping

from credwallet.ui.themes.constants import DEFAULT_BACKGROUND_ID
from credwallet.ui.themes.defaults import default_background
from credwallet.ui.themes.models import BackgroundConfig


class BackgroundRegistry:
    """Stores background configs and a screen id to background id map.

    The built-in ``"default"`` entry can be replaced through ``set_default``
    but never removed.
    """

    def __init__(self) -> None:
        self._backgrounds: dict[str, BackgroundConfig] = {}
        self._screen_mapping: dict[str, str] = {}
        self._default = default_background()
        self._backgrounds[DEFAULT_BACKGROUND_ID] = self._default

    # -- registration --

    def register(self, config: BackgroundConfig) -> None:
        self._backgrounds[config.id] = config

    def unregister(self, background_id: str) -> None:
        if background_id != DEFAULT_BACKGROUND_ID:
            self._backgrounds.pop(background_id, None)

    def clear(self) -> None:
        self._backgrounds.clear()
        self._screen_mapping = {}
        self._default = default_background()
        self._backgrounds[DEFAULT_BACKGROUND_ID] = self._default

    # -- retrieval --

    def get(self, background_id: str) -> BackgroundConfig | None:
        return self._backgrounds.get(background_id)

    def get_for_screen(self, screen_id: str) -> BackgroundConfig:
        background_id = self._screen_mapping.get(screen_id)
        if background_id:
            background = self._backgrounds.get(background_id)
            if background is not None:
                return background
        return self._default

    def get_default(self) -> BackgroundConfig:
        return self._default

    def list(self) -> list[BackgroundConfig]:
        return list(self._backgrounds.values())

    # -- screen mapping --

    def set_screen_mapping(self, mapping: Mapping[str, str]) -> None:
        self._screen_mapping = dict(mapping)

    def get_screen_mapping(self) -> dict[str, str]:
        return dict(self._screen_mapping)

    # -- configuration --

    def set_default(self, config: BackgroundConfig) -> None:
        self._default = config
        self._backgrounds[DEFAULT_BACKGROUND_ID] = config
