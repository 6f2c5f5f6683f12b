"""Theme resolution registry exports."""

from credwallet.ui.themes.accessors import ThemeScope, ThemeScopeError
from credwallet.ui.themes.backgrounds import BackgroundRegistry
from credwallet.ui.themes.card_themes import CardThemeRegistry
from credwallet.ui.themes.constants import DEFAULT_THEME_ID
from credwallet.ui.themes.models import (
    BackgroundConfig,
    CardTheme,
    CardThemeMatcher,
    CardThemePattern,
    CredentialMatchInfo,
    OnboardingTheme,
    ResolvedTheme,
    TabBarConfig,
    ThemeFeatures,
    ThemeInfo,
    ThemeManifest,
    ThemeMeta,
    ThemeValidationError,
)
from credwallet.ui.themes.provider import ThemeRegistryProvider
from credwallet.ui.themes.registry import ThemeRegistry
from credwallet.ui.themes.service import ThemeService
from credwallet.ui.themes.tab_bar import TabBarRegistry

__all__ = [
    "DEFAULT_THEME_ID",
    "BackgroundConfig",
    "BackgroundRegistry",
    "CardTheme",
    "CardThemeMatcher",
    "CardThemePattern",
    "CardThemeRegistry",
    "CredentialMatchInfo",
    "OnboardingTheme",
    "ResolvedTheme",
    "TabBarConfig",
    "TabBarRegistry",
    "ThemeFeatures",
    "ThemeInfo",
    "ThemeManifest",
    "ThemeMeta",
    "ThemeRegistry",
    "ThemeRegistryProvider",
    "ThemeScope",
    "ThemeScopeError",
    "ThemeService",
    "ThemeValidationError",
]
