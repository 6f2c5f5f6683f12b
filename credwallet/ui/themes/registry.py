"""Theme manifest registry and resolved theme cache."""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from credwallet.ui.themes.backgrounds import BackgroundRegistry
from credwallet.ui.themes.card_themes import CardThemeRegistry
from credwallet.ui.themes.constants import WILDCARD_SCREEN_ID
from credwallet.ui.themes.defaults import default_resolved_tab_bar_config
from credwallet.ui.themes.models import (
    BackgroundConfig,
    CardTheme,
    OnboardingTheme,
    ResolvedTheme,
    TabBarConfig,
    ThemeInfo,
    ThemeManifest,
)
from credwallet.ui.themes.tab_bar import TabBarRegistry

logger = logging.getLogger(__name__)


class ThemeRegistry:
    """Registers theme manifests and keeps the sub-registries in step.

    Resolved themes are built lazily and cached by manifest id; registering
    or unregistering an id drops its cache entry. The first manifest
    registered while no theme is active becomes the active theme.

    Two sync paths feed the sub-registries and they are not symmetric:

    * ``set_active`` copies the resolved theme's card themes, backgrounds and
      screen map only when those collections are non-empty, then always
      pushes its tab bar config, and its onboarding theme when it has one.
    * ``set_card_themes`` / ``set_backgrounds`` / ``set_screen_backgrounds`` /
      ``set_tab_bar_config`` / ``set_onboarding_theme`` replace the stored
      content unconditionally and mirror the values onto the active resolved
      theme if it is cached.
    """

    def __init__(self) -> None:
        self._manifests: dict[str, ThemeManifest] = {}
        self._built_themes: dict[str, ResolvedTheme] = {}
        self._active_theme_id: str | None = None

        self._card_theme_registry = CardThemeRegistry()
        self._background_registry = BackgroundRegistry()
        self._tab_bar_registry = TabBarRegistry()
        self._onboarding_theme: OnboardingTheme | None = None

    # -- registration --

    def register(self, manifest: ThemeManifest) -> None:
        theme_id = manifest.id
        self._manifests[theme_id] = manifest
        self._built_themes.pop(theme_id, None)

        if not self._active_theme_id:
            self._active_theme_id = theme_id

    def register_multiple(self, manifests: Iterable[ThemeManifest]) -> None:
        for manifest in manifests:
            self.register(manifest)

    def unregister(self, theme_id: str) -> None:
        self._manifests.pop(theme_id, None)
        self._built_themes.pop(theme_id, None)

        if self._active_theme_id == theme_id:
            self._active_theme_id = None

    # -- retrieval --

    def get(self, theme_id: str) -> ResolvedTheme | None:
        if theme_id not in self._manifests:
            return None
        return self._build(theme_id)

    def get_manifest(self, theme_id: str) -> ThemeManifest | None:
        return self._manifests.get(theme_id)

    def list(self) -> list[ThemeInfo]:
        return [
            ThemeInfo(
                id=manifest.meta.id,
                name=manifest.meta.name,
                version=manifest.meta.version,
                description=manifest.meta.description,
            )
            for manifest in self._manifests.values()
        ]

    def has(self, theme_id: str) -> bool:
        return theme_id in self._manifests

    # -- active theme --

    def set_active(self, theme_id: str) -> None:
        if theme_id not in self._manifests:
            logger.warning("Theme not found: %s", theme_id)
            return
        self._active_theme_id = theme_id

        resolved = self._build(theme_id)
        if resolved is not None:
            self._update_sub_registries(resolved)

    def get_active(self) -> ResolvedTheme | None:
        if not self._active_theme_id:
            return None
        return self._build(self._active_theme_id)

    def get_active_id(self) -> str | None:
        return self._active_theme_id

    # -- sub-registries --

    def get_card_theme_registry(self) -> CardThemeRegistry:
        return self._card_theme_registry

    def get_background_registry(self) -> BackgroundRegistry:
        return self._background_registry

    def get_tab_bar_registry(self) -> TabBarRegistry:
        return self._tab_bar_registry

    def get_onboarding_theme(self) -> OnboardingTheme | None:
        return self._onboarding_theme

    # -- configuration injection --

    def set_card_themes(self, themes: Iterable[CardTheme]) -> None:
        themes = list(themes)
        self._card_theme_registry.clear()
        for theme in themes:
            self._card_theme_registry.register(theme)

        resolved = self._cached_active()
        if resolved is not None:
            resolved.card_themes = themes

    def set_backgrounds(self, backgrounds: Iterable[BackgroundConfig]) -> None:
        backgrounds = list(backgrounds)
        self._background_registry.clear()
        for background in backgrounds:
            self._background_registry.register(background)

        screen_mapping: dict[str, str] = {}
        for background in backgrounds:
            for screen_id in background.screen_ids or ():
                if screen_id != WILDCARD_SCREEN_ID:
                    screen_mapping[screen_id] = background.id
        self._background_registry.set_screen_mapping(screen_mapping)

        resolved = self._cached_active()
        if resolved is not None:
            resolved.backgrounds = backgrounds
            resolved.screen_backgrounds = screen_mapping

    def set_screen_backgrounds(self, mapping: Mapping[str, str]) -> None:
        self._background_registry.set_screen_mapping(mapping)

        resolved = self._cached_active()
        if resolved is not None:
            resolved.screen_backgrounds = dict(mapping)

    def set_tab_bar_config(self, config: TabBarConfig) -> None:
        self._tab_bar_registry.set_config(config)

        resolved = self._cached_active()
        if resolved is not None:
            resolved.tab_bar_config = config

    def set_onboarding_theme(self, theme: OnboardingTheme | None) -> None:
        self._onboarding_theme = theme

        resolved = self._cached_active()
        if resolved is not None:
            resolved.onboarding = theme

    # -- internals --

    def _build(self, theme_id: str) -> ResolvedTheme | None:
        cached = self._built_themes.get(theme_id)
        if cached is not None:
            return cached

        manifest = self._manifests.get(theme_id)
        if manifest is None:
            return None

        resolved = ResolvedTheme(
            id=manifest.meta.id,
            name=manifest.meta.name,
            manifest=manifest,
            tab_bar_config=default_resolved_tab_bar_config(),
        )
        self._built_themes[theme_id] = resolved
        return resolved

    def _cached_active(self) -> ResolvedTheme | None:
        if not self._active_theme_id:
            return None
        return self._built_themes.get(self._active_theme_id)

    def _update_sub_registries(self, resolved: ResolvedTheme) -> None:
        if resolved.card_themes:
            self._card_theme_registry.clear()
            for theme in resolved.card_themes:
                self._card_theme_registry.register(theme)

        if resolved.backgrounds:
            self._background_registry.clear()
            for background in resolved.backgrounds:
                self._background_registry.register(background)

        if resolved.screen_backgrounds:
            self._background_registry.set_screen_mapping(resolved.screen_backgrounds)

        if resolved.tab_bar_config is not None:
            self._tab_bar_registry.set_config(resolved.tab_bar_config)

        if resolved.onboarding is not None:
            self._onboarding_theme = resolved.onboarding
