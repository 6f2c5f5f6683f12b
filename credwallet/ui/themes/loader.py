"""Theme bundle parsing, validation and variable substitution."""

from __future__ import annotations

from dataclasses import dataclass, field
import json
import logging
from pathlib import Path
import re
from typing import Any, Mapping

import yaml

from credwallet.ui.themes.constants import (
    BACKGROUND_TYPES,
    BUNDLE_SUFFIXES,
    CORE_FEATURE_KEYS,
    PATTERN_TYPES,
)
from credwallet.ui.themes.models import (
    BackgroundConfig,
    CardTheme,
    CardThemeMatcher,
    CardThemePattern,
    OnboardingTheme,
    TabBarConfig,
    ThemeFeatures,
    ThemeImports,
    ThemeManifest,
    ThemeMeta,
    ThemeValidationError,
)

logger = logging.getLogger(__name__)

_VARIABLE_RE = re.compile(r"\$\{([^}]+)\}")

_MAX_BUNDLE_BYTES = 512 * 1024

_IMPORT_KEYS: dict[str, str] = {
    "colors": "colors",
    "typography": "typography",
    "spacing": "spacing",
    "components": "components",
    "screens": "screens",
    "navigation": "navigation",
    "workflows": "workflows",
    "extendsTheme": "extends_theme",
    "colorPalette": "color_palette",
}


@dataclass(slots=True)
class ThemeBundle:
    """Everything a theme file declares, parsed into models."""

    manifest: ThemeManifest
    card_themes: list[CardTheme] = field(default_factory=list)
    backgrounds: list[BackgroundConfig] = field(default_factory=list)
    tab_bar: TabBarConfig | None = None
    onboarding: OnboardingTheme | None = None


# -- variable substitution --


def resolve_variables(value: Any, context: Mapping[str, Any]) -> Any:
    """Replace ``${a.b.c}`` references in ``value`` using ``context``.

    Strings, lists and mappings are walked recursively; other values pass
    through. A reference whose path cannot be followed is left in place.
    """
    if isinstance(value, str):
        return _VARIABLE_RE.sub(lambda match: _lookup(match.group(1), context), value)
    if isinstance(value, list):
        return [resolve_variables(item, context) for item in value]
    if isinstance(value, Mapping):
        return {key: resolve_variables(item, context) for key, item in value.items()}
    return value


def _lookup(path: str, context: Mapping[str, Any]) -> str:
    result: Any = context
    for part in path.split("."):
        if isinstance(result, Mapping) and part in result:
            result = result[part]
        else:
            logger.warning("Variable not found: %s", path)
            return f"${{{path}}}"
    return str(result)


def create_variable_context(color_palette: Mapping[str, Mapping[str, str]]) -> dict[str, Any]:
    return {"colorPalette": color_palette}


# -- validation --


def validate_theme_manifest(data: object) -> bool:
    """Return True if ``data`` has the minimal manifest structure."""
    if not isinstance(data, Mapping):
        return False
    meta = data.get("meta")
    features = data.get("features")
    if not isinstance(meta, Mapping) or not isinstance(features, Mapping):
        return False
    return all(isinstance(meta.get(key), str) for key in ("id", "name", "version"))


# -- parsing --


def parse_manifest(data: Mapping[str, Any]) -> ThemeManifest:
    if not validate_theme_manifest(data):
        raise ThemeValidationError(
            "manifest must contain meta.id, meta.name, meta.version and a features mapping"
        )
    meta = data["meta"]
    theme_id = meta["id"].strip()
    if not theme_id:
        raise ThemeValidationError("manifest meta.id must be a non-empty string")

    imports = data.get("imports")
    if imports is not None and not isinstance(imports, Mapping):
        raise ThemeValidationError(f"{theme_id}: manifest imports must be a mapping")
    overrides = data.get("overrides")
    if overrides is not None and not isinstance(overrides, Mapping):
        raise ThemeValidationError(f"{theme_id}: manifest overrides must be a mapping")

    return ThemeManifest(
        meta=ThemeMeta(
            id=theme_id,
            name=meta["name"],
            version=meta["version"],
            description=_optional_str(meta, "description", theme_id),
            author=_optional_str(meta, "author", theme_id),
            extends=_optional_str(meta, "extends", theme_id),
        ),
        features=_parse_features(data["features"], theme_id),
        imports=_parse_imports(imports, theme_id) if imports is not None else None,
        overrides=dict(overrides) if overrides is not None else None,
    )


def _parse_features(data: Mapping[str, Any], theme_id: str) -> ThemeFeatures:
    core: dict[str, Any] = {}
    extras: dict[str, bool | str] = {}
    for key, value in data.items():
        if value is None:
            continue
        if not isinstance(value, (bool, str)):
            raise ThemeValidationError(
                f"{theme_id}: feature {key!r} must be a boolean or string"
            )
        attr = CORE_FEATURE_KEYS.get(key)
        if attr is None:
            extras[key] = value
            continue
        if attr == "tab_bar_variant":
            if not isinstance(value, str):
                raise ThemeValidationError(f"{theme_id}: feature {key!r} must be a string")
        elif not isinstance(value, bool):
            raise ThemeValidationError(f"{theme_id}: feature {key!r} must be a boolean")
        core[attr] = value
    return ThemeFeatures(extras=extras, **core)


def _parse_imports(data: Mapping[str, Any], theme_id: str) -> ThemeImports:
    values: dict[str, str] = {}
    for key, attr in _IMPORT_KEYS.items():
        value = _optional_str(data, key, theme_id)
        if value is not None:
            values[attr] = value
    return ThemeImports(**values)


def parse_card_theme(data: Mapping[str, Any]) -> CardTheme:
    theme_id = _required_str(data, "id", "card theme")
    matcher_data = data.get("matcher")
    if not isinstance(matcher_data, Mapping):
        raise ThemeValidationError(f"card theme {theme_id!r}: matcher must be a mapping")

    fallback = bool(matcher_data.get("fallback") or matcher_data.get("default"))
    patterns: tuple[CardThemePattern, ...] | None = None
    raw_patterns = matcher_data.get("patterns")
    if raw_patterns is not None:
        if not isinstance(raw_patterns, list):
            raise ThemeValidationError(f"card theme {theme_id!r}: patterns must be a list")
        patterns = tuple(_parse_pattern(item, theme_id) for item in raw_patterns)

    return CardTheme(
        id=theme_id,
        matcher=CardThemeMatcher(patterns=patterns, fallback=fallback),
        display_name=data.get("displayName") or theme_id,
        layout=data.get("layout") or "default",
        colors=_optional_mapping(data, "colors", theme_id),
        typography=_optional_mapping(data, "typography", theme_id),
        assets=_optional_mapping(data, "assets", theme_id),
        layout_config=_optional_mapping(data, "layoutConfig", theme_id),
    )


def _parse_pattern(data: object, theme_id: str) -> CardThemePattern:
    if not isinstance(data, Mapping):
        raise ThemeValidationError(f"card theme {theme_id!r}: each pattern must be a mapping")
    pattern_type = data.get("type")
    if pattern_type not in PATTERN_TYPES:
        joined = ", ".join(PATTERN_TYPES)
        raise ThemeValidationError(
            f"card theme {theme_id!r}: pattern type must be one of {joined}, got {pattern_type!r}"
        )
    regex = data.get("regex")
    if not isinstance(regex, str):
        raise ThemeValidationError(f"card theme {theme_id!r}: pattern regex must be a string")
    return CardThemePattern(type=pattern_type, regex=regex)


def parse_background(data: Mapping[str, Any]) -> BackgroundConfig:
    background_id = _required_str(data, "id", "background")
    background_type = data.get("type")
    if background_type not in BACKGROUND_TYPES:
        joined = ", ".join(BACKGROUND_TYPES)
        raise ThemeValidationError(
            f"background {background_id!r}: type must be one of {joined}, got {background_type!r}"
        )

    screen_ids = data.get("screenIds")
    if screen_ids is not None:
        if not isinstance(screen_ids, list) or not all(isinstance(s, str) for s in screen_ids):
            raise ThemeValidationError(
                f"background {background_id!r}: screenIds must be a list of strings"
            )
        screen_ids = tuple(screen_ids)

    opacity = data.get("opacity")
    if opacity is not None and not isinstance(opacity, (int, float)):
        raise ThemeValidationError(f"background {background_id!r}: opacity must be a number")

    gradient = data.get("gradient")
    overlay = data.get("overlay")
    return BackgroundConfig(
        id=background_id,
        type=background_type,
        color=_optional_str(data, "color", background_id),
        gradient=dict(gradient) if isinstance(gradient, Mapping) else None,
        source=_optional_str(data, "source", background_id),
        resize_mode=_optional_str(data, "resizeMode", background_id),
        opacity=float(opacity) if opacity is not None else None,
        overlay=dict(overlay) if isinstance(overlay, Mapping) else None,
        screen_ids=screen_ids,
    )


def parse_tab_bar_config(data: Mapping[str, Any]) -> TabBarConfig:
    variant = data.get("variant") or "default"
    if not isinstance(variant, str):
        raise ThemeValidationError("tab bar variant must be a string")

    variants = data.get("variants")
    if variants is not None:
        if not isinstance(variants, Mapping) or not all(
            isinstance(style, Mapping) for style in variants.values()
        ):
            raise ThemeValidationError("tab bar variants must map names to style mappings")
        variants = {name: dict(style) for name, style in variants.items()}

    style = data.get("style")
    if style is None and variants and variant in variants:
        style = variants[variant]
    if not isinstance(style, Mapping):
        raise ThemeValidationError("tab bar style must be a mapping")

    tabs = data.get("tabs") or []
    if not isinstance(tabs, list) or not all(isinstance(tab, Mapping) for tab in tabs):
        raise ThemeValidationError("tab bar tabs must be a list of mappings")

    return TabBarConfig(
        variant=variant,
        style=dict(style),
        variants=variants,
        tab_item=_optional_mapping(data, "tabItem", "tab bar"),
        colors=_optional_mapping(data, "colors", "tab bar"),
        badge=_optional_mapping(data, "badge", "tab bar"),
        tabs=[dict(tab) for tab in tabs],
    )


_ONBOARDING_KEYS: dict[str, str] = {
    "card": "card",
    "toggle": "toggle",
    "checkbox": "checkbox",
    "bulletList": "bullet_list",
    "unlockScreen": "unlock_screen",
    "termsContent": "terms_content",
    "pinTextField": "pin_text_field",
    "buttons": "buttons",
    "inputs": "inputs",
    "colors": "colors",
}


def parse_onboarding_theme(data: Mapping[str, Any]) -> OnboardingTheme:
    """Build an OnboardingTheme; missing sections are left empty."""
    values = {
        attr: _optional_mapping(data, key, "onboarding") for key, attr in _ONBOARDING_KEYS.items()
    }
    return OnboardingTheme(**values)


# -- bundles --


def load_theme_bundle(
    config: Mapping[str, Any],
    variable_context: Mapping[str, Any] | None = None,
) -> ThemeBundle:
    """Parse a bundle mapping, substituting variables first when a context is given."""
    resolved = resolve_variables(config, variable_context) if variable_context else config

    manifest_data = resolved.get("manifest")
    if not isinstance(manifest_data, Mapping):
        raise ThemeValidationError("theme bundle is missing a manifest section")
    manifest = parse_manifest(manifest_data)

    card_themes = resolved.get("cardThemes") or []
    backgrounds = resolved.get("backgrounds") or []
    if not isinstance(card_themes, list) or not isinstance(backgrounds, list):
        raise ThemeValidationError(f"{manifest.id}: cardThemes and backgrounds must be lists")
    for item in (*card_themes, *backgrounds):
        if not isinstance(item, Mapping):
            raise ThemeValidationError(f"{manifest.id}: theme entries must be mappings")

    tab_bar_data = resolved.get("tabBar")
    if tab_bar_data is not None and not isinstance(tab_bar_data, Mapping):
        raise ThemeValidationError(f"{manifest.id}: tabBar must be a mapping")

    onboarding_data = resolved.get("onboarding")
    if onboarding_data is not None and not isinstance(onboarding_data, Mapping):
        raise ThemeValidationError(f"{manifest.id}: onboarding must be a mapping")

    return ThemeBundle(
        manifest=manifest,
        card_themes=[parse_card_theme(item) for item in card_themes],
        backgrounds=[parse_background(item) for item in backgrounds],
        tab_bar=parse_tab_bar_config(tab_bar_data) if tab_bar_data is not None else None,
        onboarding=_bundle_onboarding(onboarding_data, resolved.get("colorPalette")),
    )


def _bundle_onboarding(
    data: Mapping[str, Any] | None, palette: object
) -> OnboardingTheme | None:
    """Onboarding section with the bundle palette as its colors unless it names its own."""
    if data is None:
        return None
    if "colors" not in data and isinstance(palette, Mapping):
        data = {**data, "colors": palette}
    return parse_onboarding_theme(data)


def parse_yaml_theme(content: str) -> dict[str, Any]:
    data = yaml.safe_load(content)
    if not isinstance(data, dict):
        raise ThemeValidationError("Expected a YAML mapping at the top level of the theme")
    return data


def load_theme_bundle_file(path: Path) -> ThemeBundle:
    """Read a ``.yaml``/``.yml``/``.json`` bundle file.

    An embedded top-level ``colorPalette`` becomes the variable context for
    ``${colorPalette...}`` references elsewhere in the file.
    """
    if path.suffix.lower() not in BUNDLE_SUFFIXES:
        raise ThemeValidationError(f"{path}: unsupported theme file type {path.suffix!r}")

    content = _read_text_limited(path, max_bytes=_MAX_BUNDLE_BYTES)
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(content)
            if not isinstance(data, dict):
                raise ThemeValidationError(f"Expected JSON object in {path}")
        else:
            data = parse_yaml_theme(content)

        palette = data.get("colorPalette")
        context = create_variable_context(palette) if isinstance(palette, Mapping) else None
        return load_theme_bundle(data, context)
    except (yaml.YAMLError, json.JSONDecodeError, RecursionError) as exc:
        raise ThemeValidationError(f"Unable to parse {path}: {exc}") from exc


# -- helpers --


def _required_str(data: Mapping[str, Any], key: str, context: str) -> str:
    value = data.get(key)
    if not isinstance(value, str) or not value.strip():
        raise ThemeValidationError(f"{context}: field {key!r} must be a non-empty string")
    return value.strip()


def _optional_str(data: Mapping[str, Any], key: str, context: str) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ThemeValidationError(f"{context}: field {key!r} must be a string")
    return value


def _optional_mapping(data: Mapping[str, Any], key: str, context: str) -> dict[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ThemeValidationError(f"{context}: field {key!r} must be a mapping")
    return dict(value)


def _read_text_limited(path: Path, *, max_bytes: int) -> str:
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise ThemeValidationError(f"Unable to stat {path}: {exc}") from exc
    if size > max_bytes:
        raise ThemeValidationError(f"{path}: file exceeds max size ({max_bytes} bytes)")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeValidationError(f"Unable to read {path}: {exc}") from exc
