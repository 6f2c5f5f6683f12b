"""Bootstrap helper that pushes initial theme state into a registry."""

from __future__ import annotations

from typing import Mapping, Sequence

from credwallet.ui.themes.accessors import ThemeScope
from credwallet.ui.themes.models import BackgroundConfig, CardTheme, TabBarConfig, ThemeManifest
from credwallet.ui.themes.registry import ThemeRegistry


class ThemeRegistryProvider:
    """Owns the registry handed to consumers and seeds it on ``apply``.

    State is pushed in a fixed order: manifests, card themes, backgrounds,
    screen backgrounds, tab bar config, then the initial active theme.
    """

    def __init__(
        self,
        registry: ThemeRegistry,
        *,
        initial_theme_id: str | None = None,
        manifests: Sequence[ThemeManifest] | None = None,
        card_themes: Sequence[CardTheme] | None = None,
        backgrounds: Sequence[BackgroundConfig] | None = None,
        screen_backgrounds: Mapping[str, str] | None = None,
        tab_bar_config: TabBarConfig | None = None,
    ) -> None:
        self._registry = registry
        self._initial_theme_id = initial_theme_id
        self._manifests = manifests
        self._card_themes = card_themes
        self._backgrounds = backgrounds
        self._screen_backgrounds = screen_backgrounds
        self._tab_bar_config = tab_bar_config

    @property
    def registry(self) -> ThemeRegistry:
        return self._registry

    def apply(self) -> ThemeRegistry:
        registry = self._registry
        if self._manifests:
            registry.register_multiple(self._manifests)
        if self._card_themes:
            registry.set_card_themes(self._card_themes)
        if self._backgrounds:
            registry.set_backgrounds(self._backgrounds)
        if self._screen_backgrounds is not None:
            registry.set_screen_backgrounds(self._screen_backgrounds)
        if self._tab_bar_config is not None:
            registry.set_tab_bar_config(self._tab_bar_config)
        if self._initial_theme_id and registry.has(self._initial_theme_id):
            registry.set_active(self._initial_theme_id)
        return registry

    def scope(self) -> ThemeScope:
        return ThemeScope(self._registry)
