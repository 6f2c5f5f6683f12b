"""Read-only lookups presentation code uses to pull resolved theme values.

Two entry points. ``use_theme_registry`` (and
``ThemeScope``) is for code that must run with a registry and fails loudly
otherwise. ``use_optional_theme_registry`` and the family accessors below
accept ``None`` and fall back to built-in defaults.
"""

from __future__ import annotations

from credwallet.ui.themes.constants import DEFAULT_TAB_BAR_VARIANT, THEME_SCOPE_ERROR_MESSAGE
from credwallet.ui.themes.defaults import (
    default_background,
    default_card_theme,
    default_onboarding_theme,
    fallback_tab_bar_config,
)
from credwallet.ui.themes.models import (
    BackgroundConfig,
    CardTheme,
    CredentialMatchInfo,
    OnboardingTheme,
    Style,
    TabBarConfig,
)
from credwallet.ui.themes.registry import ThemeRegistry


class ThemeScopeError(RuntimeError):
    """Raised when a required theme lookup runs without a registry."""


def use_theme_registry(registry: ThemeRegistry | None) -> ThemeRegistry:
    if registry is None:
        raise ThemeScopeError(THEME_SCOPE_ERROR_MESSAGE)
    return registry


def use_optional_theme_registry(registry: ThemeRegistry | None) -> ThemeRegistry | None:
    return registry


# -- card themes --


def card_theme_for(registry: ThemeRegistry | None, credential: CredentialMatchInfo) -> CardTheme:
    if registry is None:
        return default_card_theme()
    return registry.get_card_theme_registry().get_theme(credential)


def card_theme_by_id(registry: ThemeRegistry | None, theme_id: str) -> CardTheme:
    if registry is None:
        return default_card_theme()
    card_registry = registry.get_card_theme_registry()
    theme = card_registry.get_by_id(theme_id)
    return theme if theme is not None else card_registry.get_default()


def card_themes(registry: ThemeRegistry | None) -> list[CardTheme]:
    if registry is None:
        return [default_card_theme()]
    return registry.get_card_theme_registry().list()


# -- backgrounds --


def screen_background(registry: ThemeRegistry | None, screen_id: str) -> BackgroundConfig:
    if registry is None:
        return default_background()
    return registry.get_background_registry().get_for_screen(screen_id)


def background_by_id(registry: ThemeRegistry | None, background_id: str) -> BackgroundConfig:
    if registry is None:
        return default_background()
    background_registry = registry.get_background_registry()
    background = background_registry.get(background_id)
    return background if background is not None else background_registry.get_default()


def backgrounds(registry: ThemeRegistry | None) -> list[BackgroundConfig]:
    if registry is None:
        return [default_background()]
    return registry.get_background_registry().list()


# -- tab bar --


def tab_bar_config(registry: ThemeRegistry | None) -> TabBarConfig:
    if registry is None:
        return fallback_tab_bar_config()
    return registry.get_tab_bar_registry().get_config()


def tab_bar_style(registry: ThemeRegistry | None) -> Style:
    if registry is None:
        return fallback_tab_bar_config().style
    return registry.get_tab_bar_registry().get_active_style()


def tab_bar_variant(registry: ThemeRegistry | None) -> str:
    if registry is None:
        return DEFAULT_TAB_BAR_VARIANT
    return registry.get_tab_bar_registry().get_variant()


def tab_bar_variants(registry: ThemeRegistry | None) -> list[str]:
    if registry is None:
        return [DEFAULT_TAB_BAR_VARIANT]
    return registry.get_tab_bar_registry().list_variants()


# -- onboarding --


def onboarding_theme(registry: ThemeRegistry | None) -> OnboardingTheme:
    """Onboarding styles from the registry, else the built-in Teal Dark set."""
    theme = registry.get_onboarding_theme() if registry is not None else None
    return theme if theme is not None else default_onboarding_theme()


def is_modular_onboarding_active(registry: ThemeRegistry | None) -> bool:
    return registry is not None


class ThemeScope:
    """Lookups bound to a registry that must exist.

    Constructing a scope without a registry raises ``ThemeScopeError``.
    """

    def __init__(self, registry: ThemeRegistry | None) -> None:
        self._registry = use_theme_registry(registry)

    @property
    def registry(self) -> ThemeRegistry:
        return self._registry

    def card_theme(self, credential: CredentialMatchInfo) -> CardTheme:
        return card_theme_for(self._registry, credential)

    def card_theme_by_id(self, theme_id: str) -> CardTheme:
        return card_theme_by_id(self._registry, theme_id)

    def screen_background(self, screen_id: str) -> BackgroundConfig:
        return screen_background(self._registry, screen_id)

    def tab_bar_config(self) -> TabBarConfig:
        return tab_bar_config(self._registry)

    def tab_bar_style(self) -> Style:
        return tab_bar_style(self._registry)

    def onboarding_theme(self) -> OnboardingTheme:
        return onboarding_theme(self._registry)
