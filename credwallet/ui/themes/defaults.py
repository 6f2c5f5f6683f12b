"""Built-in fallback objects used when nothing better is registered.

Every factory returns a fresh object so that registries never share mutable
state with each other or with callers.
"""

from __future__ import annotations

from credwallet.ui.themes.constants import (
    DEFAULT_BACKGROUND_ID,
    DEFAULT_CARD_THEME_ID,
    DEFAULT_TAB_BAR_VARIANT,
)
from credwallet.ui.themes.models import (
    BackgroundConfig,
    CardTheme,
    CardThemeMatcher,
    OnboardingTheme,
    Style,
    TabBarConfig,
)


def default_card_theme() -> CardTheme:
    return CardTheme(
        id=DEFAULT_CARD_THEME_ID,
        matcher=CardThemeMatcher(fallback=True),
        display_name="Default Credential",
        layout="default",
        colors={
            "primary": "#42803E",
            "secondary": "#FFFFFF",
            "background": "#FFFFFF",
            "text": "#1A1A1A",
            "textSecondary": "#666666",
            "bottomLine": "#42803E",
            "accent": "#FCBA19",
        },
        typography={
            "issuerName": {"fontSize": 12, "fontWeight": "600", "color": "#666666"},
            "credentialName": {"fontSize": 18, "fontWeight": "bold", "color": "#1A1A1A"},
            "attributeLabel": {"fontSize": 12, "fontWeight": "500", "color": "#666666"},
            "attributeValue": {"fontSize": 14, "fontWeight": "600", "color": "#1A1A1A"},
        },
        assets={},
        layout_config={
            "container": {"borderRadius": 12, "padding": 16, "aspectRatio": 1.6},
            "shadow": {
                "color": "#000000",
                "offset": {"width": 0, "height": 4},
                "radius": 12,
                "opacity": 0.15,
            },
            "logo": {
                "show": True,
                "position": "top-left",
                "size": 40,
                "borderRadius": 8,
                "margin": 16,
            },
            "bottomStripe": {"show": True, "height": 8, "borderRadius": [0, 0, 12, 12]},
            "showIssuerName": True,
            "showCredentialName": True,
            "showTimestamp": True,
            "showAttributes": True,
            "maxAttributes": 3,
        },
    )


def default_background() -> BackgroundConfig:
    return BackgroundConfig(id=DEFAULT_BACKGROUND_ID, type="solid", color="#000000")


def _default_style() -> Style:
    return {
        "position": "relative",
        "height": 80,
        "backgroundColor": "#313132",
        "paddingBottom": 20,
        "paddingTop": 10,
        "borderTopWidth": 0,
        "shadowColor": "#000000",
        "shadowOffset": {"width": 0, "height": -3},
        "shadowRadius": 6,
        "shadowOpacity": 0.1,
    }


def _floating_style() -> Style:
    return {
        "position": "absolute",
        "bottom": 20,
        "left": 16,
        "right": 16,
        "height": 64,
        "borderRadius": 32,
        "backgroundColor": "#0D2828",
        "paddingHorizontal": 8,
        "shadowColor": "#000000",
        "shadowOffset": {"width": 0, "height": -4},
        "shadowRadius": 12,
        "shadowOpacity": 0.3,
        "elevation": 8,
    }


def _minimal_style() -> Style:
    return {
        "position": "relative",
        "height": 56,
        "backgroundColor": "transparent",
        "borderTopWidth": 1,
        "borderTopColor": "#66666640",
    }


def _attached_style() -> Style:
    return {
        "position": "absolute",
        "bottom": 0,
        "left": 0,
        "right": 0,
        "height": 80,
        "backgroundColor": "#313132E6",
        "borderTopWidth": 0,
    }


def _badge() -> Style:
    return {
        "backgroundColor": "#EF4444",
        "textColor": "#FFFFFF",
        "size": 18,
        "fontSize": 11,
        "fontWeight": "bold",
        "borderRadius": 9,
        "minWidth": 18,
        "position": {"top": -2, "right": -6},
    }


def default_tab_bar_config() -> TabBarConfig:
    """Full tab bar configuration a fresh TabBarRegistry starts with."""
    return TabBarConfig(
        variant=DEFAULT_TAB_BAR_VARIANT,
        variants={
            "default": _default_style(),
            "floating": _floating_style(),
            "minimal": _minimal_style(),
            "attached": _attached_style(),
        },
        style=_default_style(),
        tab_item={
            "container": {
                "flex": 1,
                "justifyContent": "center",
                "alignItems": "center",
                "paddingVertical": 8,
            },
            "text": {"fontSize": 10, "fontWeight": "600", "marginTop": 4},
            "icon": {"size": 24},
        },
        colors={
            "activeTintColor": "#FFFFFF",
            "inactiveTintColor": "#FFFFFF66",
            "activeBackgroundColor": "transparent",
            "inactiveBackgroundColor": "transparent",
        },
        badge=_badge(),
        tabs=[
            {
                "id": "home",
                "label": "Home",
                "labelKey": "TabStack.Home",
                "icon": "home",
                "showBadge": True,
            },
            {
                "id": "credentials",
                "label": "Credentials",
                "labelKey": "TabStack.ListCredentials",
                "icon": "wallet",
            },
            {
                "id": "settings",
                "label": "Settings",
                "labelKey": "TabStack.Settings",
                "icon": "settings",
            },
        ],
    )


def default_resolved_tab_bar_config() -> TabBarConfig:
    """Smaller configuration carried by a freshly built ResolvedTheme."""
    return TabBarConfig(
        variant=DEFAULT_TAB_BAR_VARIANT,
        style={"height": 80, "backgroundColor": "#313132", "paddingBottom": 20},
        tab_item={
            "container": {"flex": 1, "justifyContent": "center", "alignItems": "center"},
            "text": {"fontSize": 10, "fontWeight": "bold"},
            "icon": {"size": 24},
        },
        colors={
            "activeTintColor": "#FFFFFF",
            "inactiveTintColor": "#666666",
            "activeBackgroundColor": "transparent",
            "inactiveBackgroundColor": "transparent",
        },
        badge=_badge(),
        tabs=[],
    )


def fallback_tab_bar_config() -> TabBarConfig:
    """Tab bar handed out when no registry is in scope: no variants, no tabs."""
    config = default_tab_bar_config()
    config.variants = None
    config.tabs = []
    return config


# -- onboarding --

_TEAL = "#0D7377"
_ACCENT = "#14FFEC"
_MUTED = "#6BA3A3"
_BODY = "#9CBBBB"
_VIOLET = "#6B5B95"
_WHITE = "#FFFFFF"


def _button(container: Style, disabled: Style) -> Style:
    return {
        "container": {
            "borderRadius": 24,
            "paddingVertical": 14,
            "paddingHorizontal": 32,
            "minHeight": 48,
            **container,
        },
        "text": {
            "color": _WHITE,
            "fontSize": 14,
            "fontWeight": "600",
            "textTransform": "uppercase",
        },
        "disabled": {"opacity": 0.5, **disabled},
    }


def _unlock_button(container: Style) -> Style:
    return {
        "container": {
            "borderRadius": 24,
            "paddingVertical": 14,
            "paddingHorizontal": 32,
            "alignItems": "center",
            "justifyContent": "center",
            **container,
        },
        "text": {
            "color": _WHITE,
            "fontSize": 13,
            "fontWeight": "600",
            "textTransform": "uppercase",
            "letterSpacing": 1,
        },
    }


def default_onboarding_theme() -> OnboardingTheme:
    """Teal Dark onboarding styles, used whatever the active theme is."""
    return OnboardingTheme(
        card={
            "container": {
                "backgroundColor": "rgba(30, 45, 45, 0.95)",
                "borderRadius": 24,
                "padding": 24,
                "paddingTop": 28,
                "paddingBottom": 28,
                "paddingHorizontal": 24,
                "marginHorizontal": 16,
                "marginBottom": 40,
                "position": "bottom",
                "maxHeightPercent": 70,
            },
            "shadow": {
                "color": "#000000",
                "offset": {"width": 0, "height": -4},
                "radius": 20,
                "opacity": 0.3,
                "elevation": 10,
            },
            "title": {"color": _WHITE, "fontSize": 22, "fontWeight": "600", "marginBottom": 12},
            "subtitle": {
                "color": _TEAL,
                "fontSize": 14,
                "fontWeight": "500",
                "marginBottom": 16,
                "lineHeight": 20,
            },
            "accentText": {"color": _ACCENT, "fontSize": 14, "fontWeight": "500", "lineHeight": 20},
            "bodyText": {"color": _BODY, "fontSize": 14, "fontWeight": "400", "lineHeight": 22},
            "scrollArea": {"maxHeight": 280, "paddingRight": 8, "scrollIndicatorColor": _TEAL},
            "button": {"marginTop": 24},
        },
        toggle={
            "track": {"onColor": _VIOLET, "offColor": "#3D4D4D"},
            "thumb": {"color": _WHITE},
            "label": {"color": _WHITE, "fontSize": 14, "fontWeight": "500", "marginLeft": 12},
            "container": {
                "marginTop": 20,
                "marginBottom": 8,
                "flexDirection": "row",
                "alignItems": "center",
            },
        },
        checkbox={
            "unchecked": {
                "borderColor": _MUTED,
                "borderWidth": 1.5,
                "backgroundColor": "transparent",
                "borderRadius": 4,
                "size": 22,
            },
            "checked": {"borderColor": _ACCENT, "backgroundColor": _TEAL, "checkColor": _WHITE},
            "label": {
                "color": _BODY,
                "fontSize": 13,
                "fontWeight": "400",
                "marginLeft": 12,
                "flex": 1,
                "lineHeight": 18,
            },
            "container": {"marginTop": 20, "flexDirection": "row", "alignItems": "center"},
        },
        bullet_list={
            "container": {"marginTop": 8, "marginBottom": 16},
            "item": {"marginBottom": 8, "flexDirection": "row"},
            "bullet": {
                "character": "•",
                "color": _MUTED,
                "fontSize": 16,
                "marginRight": 10,
                "lineHeight": 22,
            },
            "text": {
                "color": _BODY,
                "fontSize": 14,
                "fontWeight": "400",
                "lineHeight": 22,
                "flex": 1,
            },
        },
        unlock_screen={
            "logo": {"width": 180, "height": 140, "marginBottom": 16, "tintColor": _WHITE},
            "appName": {"color": _WHITE, "fontSize": 42, "fontWeight": "300", "marginBottom": 4},
            "tagline": {"color": _WHITE, "fontSize": 18, "fontWeight": "400", "marginBottom": 60},
            "buttonsContainer": {"marginTop": 40, "paddingHorizontal": 40, "width": "100%"},
            "primaryButton": _unlock_button(
                {"borderWidth": 1, "borderColor": _TEAL, "backgroundColor": "transparent"}
            ),
            "secondaryButton": _unlock_button({"backgroundColor": _VIOLET}),
            "divider": {
                "container": {"flexDirection": "row", "alignItems": "center", "marginVertical": 16},
                "line": {"flex": 1, "height": 1, "backgroundColor": "#3D5A5A"},
                "text": {
                    "color": _MUTED,
                    "fontSize": 12,
                    "fontWeight": "400",
                    "marginHorizontal": 16,
                },
            },
        },
        terms_content={
            "sectionHeader": {
                "color": _WHITE,
                "fontSize": 14,
                "fontWeight": "600",
                "marginTop": 16,
                "marginBottom": 8,
            },
            "paragraph": {
                "color": _BODY,
                "fontSize": 14,
                "fontWeight": "400",
                "lineHeight": 22,
                "marginBottom": 12,
            },
            "emphasis": {"color": "#B8E8E8", "fontWeight": "500"},
        },
        pin_text_field={
            "container": {
                "backgroundColor": "transparent",
                "borderRadius": 24,
                "borderWidth": 1,
                "borderColor": _TEAL,
                "paddingVertical": 14,
                "paddingHorizontal": 20,
                "marginBottom": 16,
            },
            "focused": {"borderColor": _ACCENT, "borderWidth": 1.5},
            "error": {"borderColor": "#FF6B6B"},
            "text": {"color": _WHITE, "fontSize": 16},
            "placeholder": {"color": _MUTED},
            "visibilityIcon": {"size": 22, "color": _MUTED, "activeColor": _ACCENT},
        },
        buttons={
            "primary": _button({"backgroundColor": _TEAL}, {"backgroundColor": _TEAL}),
            "secondary": _button(
                {"backgroundColor": "transparent", "borderWidth": 1, "borderColor": _TEAL},
                {"borderColor": _TEAL},
            ),
            "tertiary": _button({"backgroundColor": _VIOLET}, {"backgroundColor": _VIOLET}),
        },
        inputs={
            "rounded": {
                "container": {
                    "backgroundColor": "transparent",
                    "borderRadius": 24,
                    "borderWidth": 1,
                    "borderColor": _TEAL,
                    "paddingVertical": 14,
                    "paddingHorizontal": 20,
                    "minHeight": 52,
                },
                "text": {"color": _WHITE, "fontSize": 16},
                "placeholder": {"color": _MUTED},
                "focused": {"borderColor": _ACCENT, "borderWidth": 1.5},
                "error": {"borderColor": "#FF6B6B"},
                "icon": {"color": _MUTED, "size": 22},
            },
        },
        colors={
            "brand": {"primary": _TEAL, "secondary": "#0A2E2E", "accent": _ACCENT},
            "background": {
                "dark": "#0A2E2E",
                "darker": "#051616",
                "medium": "#0D3D3D",
                "light": "#1A5A5A",
            },
            "text": {
                "primary": _WHITE,
                "secondary": "#B8E8E8",
                "muted": _MUTED,
                "inverse": "#0A2E2E",
            },
            "ui": {"success": _ACCENT, "warning": "#FFD700", "error": "#FF6B6B", "info": _TEAL},
            "card": {"background": "#0D4D4D", "border": _ACCENT, "shadow": "#000000"},
        },
    )
