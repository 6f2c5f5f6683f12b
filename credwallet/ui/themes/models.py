"""Theme framework models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from credwallet.ui.themes.constants import BackgroundType, PatternType

Style = dict[str, Any]


class ThemeValidationError(ValueError):
    """Raised when a theme bundle fails validation."""


@dataclass(frozen=True, slots=True)
class ThemeMeta:
    """Theme identity parsed from the manifest ``meta`` section."""

    id: str
    name: str
    version: str
    description: str | None = None
    author: str | None = None
    extends: str | None = None


@dataclass(frozen=True, slots=True)
class ThemeFeatures:
    """Well-known feature flags plus an open map of theme-specific ones."""

    use_new_pin_design: bool | None = None
    enable_gradient_backgrounds: bool | None = None
    tab_bar_variant: str | None = None
    show_menu_button_in_chat: bool | None = None
    enable_card_shadows: bool | None = None
    extras: Mapping[str, bool | str] = field(default_factory=dict)

    def flag(self, name: str, default: bool | str | None = None) -> bool | str | None:
        """Look a flag up by attribute name first, then in ``extras``."""
        if name != "extras" and name in self.__dataclass_fields__:
            value = getattr(self, name)
            if value is not None:
                return value
        return self.extras.get(name, default)


@dataclass(frozen=True, slots=True)
class ThemeImports:
    """Optional import hints naming where sub-configurations come from."""

    colors: str | None = None
    typography: str | None = None
    spacing: str | None = None
    components: str | None = None
    screens: str | None = None
    navigation: str | None = None
    workflows: str | None = None
    extends_theme: str | None = None
    color_palette: str | None = None


@dataclass(frozen=True, slots=True)
class ThemeManifest:
    """A theme's identity and feature declaration, prior to resolution."""

    meta: ThemeMeta
    features: ThemeFeatures = field(default_factory=ThemeFeatures)
    imports: ThemeImports | None = None
    overrides: Mapping[str, Any] | None = None

    @property
    def id(self) -> str:
        return self.meta.id

    @property
    def name(self) -> str:
        return self.meta.name

    @property
    def version(self) -> str:
        return self.meta.version


@dataclass(frozen=True, slots=True)
class ThemeInfo:
    """Display-ready theme metadata."""

    id: str
    name: str
    version: str
    description: str | None = None


@dataclass(frozen=True, slots=True)
class CardThemePattern:
    """One credential field + regular expression pair."""

    type: PatternType
    regex: str


@dataclass(frozen=True, slots=True)
class CardThemeMatcher:
    """Either a fallback marker or an ordered list of patterns."""

    patterns: tuple[CardThemePattern, ...] | None = None
    fallback: bool = False


@dataclass(frozen=True, slots=True)
class CardTheme:
    """Credential card presentation selected by matcher rules."""

    id: str
    matcher: CardThemeMatcher
    display_name: str = ""
    layout: str = "default"
    colors: Style = field(default_factory=dict)
    typography: Style = field(default_factory=dict)
    assets: Style = field(default_factory=dict)
    layout_config: Style = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class CredentialMatchInfo:
    """The four credential strings card matching looks at."""

    cred_def_id: str | None = None
    issuer_name: str | None = None
    schema_name: str | None = None
    connection_label: str | None = None

    @classmethod
    def from_anoncreds_metadata(
        cls,
        metadata: Mapping[str, Any] | None,
        *,
        issuer_name: str | None = None,
        connection_label: str | None = None,
    ) -> CredentialMatchInfo:
        """Build match info from a credential's anoncreds metadata entry.

        ``schemaId`` has the form ``<issuer did>:2:<schema name>:<version>``;
        the schema name is taken from its third segment.
        """
        metadata = metadata or {}
        cred_def_id = metadata.get("credentialDefinitionId")
        schema_id = metadata.get("schemaId")
        schema_name = metadata.get("schemaName")
        if schema_name is None and isinstance(schema_id, str):
            parts = schema_id.split(":")
            if len(parts) >= 4:
                schema_name = parts[-2]
        return cls(
            cred_def_id=cred_def_id if isinstance(cred_def_id, str) else None,
            issuer_name=issuer_name,
            schema_name=schema_name if isinstance(schema_name, str) else None,
            connection_label=connection_label,
        )


@dataclass(frozen=True, slots=True)
class BackgroundConfig:
    """A solid, gradient or image screen background."""

    id: str
    type: BackgroundType
    color: str | None = None
    gradient: Style | None = None
    source: str | None = None
    resize_mode: str | None = None
    opacity: float | None = None
    overlay: Style | None = None
    screen_ids: tuple[str, ...] | None = None


@dataclass(slots=True)
class TabBarConfig:
    """Tab bar configuration with named variant styles.

    ``style`` is the resolved style of ``variant``; ``TabBarRegistry`` keeps it
    equal to ``variants[variant]`` whenever that entry exists.
    """

    variant: str
    style: Style
    variants: dict[str, Style] | None = None
    tab_item: Style = field(default_factory=dict)
    colors: Style = field(default_factory=dict)
    badge: Style = field(default_factory=dict)
    tabs: list[Style] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class OnboardingTheme:
    """Styles for the onboarding flow, unlock screen and PIN entry."""

    card: Style = field(default_factory=dict)
    toggle: Style = field(default_factory=dict)
    checkbox: Style = field(default_factory=dict)
    bullet_list: Style = field(default_factory=dict)
    unlock_screen: Style = field(default_factory=dict)
    terms_content: Style = field(default_factory=dict)
    pin_text_field: Style = field(default_factory=dict)
    buttons: Style = field(default_factory=dict)
    inputs: Style = field(default_factory=dict)
    colors: Style = field(default_factory=dict)


@dataclass(slots=True)
class ResolvedTheme:
    """Cached aggregate of a manifest and the collections pushed into it."""

    id: str
    name: str
    manifest: ThemeManifest
    tab_bar_config: TabBarConfig
    card_themes: list[CardTheme] = field(default_factory=list)
    backgrounds: list[BackgroundConfig] = field(default_factory=list)
    screen_backgrounds: dict[str, str] = field(default_factory=dict)
    screen_themes: dict[str, Style] = field(default_factory=dict)
    onboarding: OnboardingTheme | None = None
