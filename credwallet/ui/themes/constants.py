"""Theme framework constants."""

from __future__ import annotations

from typing import Literal

DEFAULT_THEME_ID = "teal-dark"
DEFAULT_BACKGROUND_ID = "default"
DEFAULT_CARD_THEME_ID = "default"
DEFAULT_TAB_BAR_VARIANT = "default"

# Screen id token meaning "every screen"; never written into a screen map.
WILDCARD_SCREEN_ID = "*"

THEME_SCOPE_ERROR_MESSAGE = "useThemeRegistry must be used within a ThemeRegistryProvider"

PatternType = Literal["credDefId", "issuerName", "schemaName", "connectionLabel"]
BackgroundType = Literal["solid", "gradient", "image"]

PATTERN_TYPES: tuple[str, ...] = (
    "credDefId",
    "issuerName",
    "schemaName",
    "connectionLabel",
)

BACKGROUND_TYPES: tuple[str, ...] = (
    "solid",
    "gradient",
    "image",
)

TAB_BAR_VARIANTS: tuple[str, ...] = (
    "default",
    "floating",
    "minimal",
    "attached",
)

# Well-known feature flags, keyed by their bundle (camelCase) names.
CORE_FEATURE_KEYS: dict[str, str] = {
    "useNewPINDesign": "use_new_pin_design",
    "enableGradientBackgrounds": "enable_gradient_backgrounds",
    "tabBarVariant": "tab_bar_variant",
    "showMenuButtonInChat": "show_menu_button_in_chat",
    "enableCardShadows": "enable_card_shadows",
}

BUNDLE_SUFFIXES: tuple[str, ...] = (".yaml", ".yml", ".json")
