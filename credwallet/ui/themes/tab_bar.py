"""Tab bar configuration registry."""

from __future__ import annotations

from credwallet.ui.themes.constants import DEFAULT_TAB_BAR_VARIANT
from credwallet.ui.themes.defaults import default_tab_bar_config
from credwallet.ui.themes.models import Style, TabBarConfig


class TabBarRegistry:
    """Holds one tab bar configuration and its active variant.

    Whenever ``variants`` has an entry for the current variant, ``style`` is
    that entry. ``set_variant`` with a name missing from ``variants`` changes
    the name only and leaves ``style`` as it was.
    """

    def __init__(self) -> None:
        self._config = default_tab_bar_config()

    # -- configuration --

    def set_config(self, config: TabBarConfig) -> None:
        self._config = config
        if config.variants and config.variant and config.variant in config.variants:
            self._config.style = config.variants[config.variant]

    def get_config(self) -> TabBarConfig:
        return self._config

    # -- variants --

    def set_variant(self, variant: str) -> None:
        self._config.variant = variant
        if self._config.variants and variant in self._config.variants:
            self._config.style = self._config.variants[variant]

    def get_variant(self) -> str:
        return self._config.variant

    def get_variant_style(self, variant: str) -> Style | None:
        if not self._config.variants:
            return None
        return self._config.variants.get(variant)

    def list_variants(self) -> list[str]:
        if self._config.variants:
            return list(self._config.variants.keys())
        return [DEFAULT_TAB_BAR_VARIANT]

    # -- active style --

    def get_active_style(self) -> Style:
        return self._config.style
