"""Runtime theme loading, activation and persistence service."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from PySide6.QtCore import QObject, Signal
import yaml

from credwallet.errors import classify_exception, format_error_for_user
from credwallet.ui.themes.accessors import use_theme_registry
from credwallet.ui.themes.constants import DEFAULT_THEME_ID
from credwallet.ui.themes.loader import ThemeBundle, load_theme_bundle_file
from credwallet.ui.themes.models import ThemeInfo, ThemeValidationError
from credwallet.ui.themes.registry import ThemeRegistry

logger = logging.getLogger(__name__)


class ThemeService(QObject):
    """Load theme bundles into a registry, activate them and persist the choice."""

    theme_changed = Signal(str)
    tab_bar_variant_changed = Signal(str)

    def __init__(self, registry: ThemeRegistry | None, settings) -> None:
        super().__init__()
        self._registry = use_theme_registry(registry)
        self._settings = settings

    @property
    def registry(self) -> ThemeRegistry:
        return self._registry

    @property
    def active_theme_id(self) -> str:
        return self._registry.get_active_id() or ""

    def available_themes(self) -> list[ThemeInfo]:
        return self._registry.list()

    def load_bundle(self, bundle: ThemeBundle) -> str:
        """Register a bundle and store its collections on its resolved theme.

        The bundle's theme is activated before its collections are injected so
        that they land on the cached resolved theme and survive later
        ``set_active`` round trips. The bundle's theme stays active afterwards.
        """
        registry = self._registry
        theme_id = bundle.manifest.id
        registry.register(bundle.manifest)
        registry.set_active(theme_id)
        if bundle.card_themes:
            registry.set_card_themes(bundle.card_themes)
        if bundle.backgrounds:
            registry.set_backgrounds(bundle.backgrounds)
        if bundle.tab_bar is not None:
            registry.set_tab_bar_config(bundle.tab_bar)
        if bundle.onboarding is not None:
            registry.set_onboarding_theme(bundle.onboarding)
        logger.info(
            "loaded theme %s: %d card themes, %d backgrounds",
            theme_id,
            len(bundle.card_themes),
            len(bundle.backgrounds),
        )
        return theme_id

    def load_bundle_file(self, path: Path) -> tuple[bool, str]:
        try:
            bundle = load_theme_bundle_file(path)
        except (ThemeValidationError, yaml.YAMLError, json.JSONDecodeError) as exc:
            error = classify_exception(exc, path=path)
            logger.warning("theme bundle rejected %s: %s", path, error.to_dict())
            return False, format_error_for_user(error)
        theme_id = self.load_bundle(bundle)
        return True, f"Loaded theme: {bundle.manifest.name} ({theme_id})"

    def apply_theme(self, theme_id: str, *, persist: bool = True) -> tuple[bool, str]:
        if not self._registry.has(theme_id):
            return False, f"Theme not found: {theme_id}"

        self._registry.set_active(theme_id)
        self._apply_saved_tab_bar_variant()
        if persist:
            self._settings.theme_id = theme_id
        self._settings.theme_last_known_good_id = theme_id
        self.theme_changed.emit(theme_id)
        manifest = self._registry.get_manifest(theme_id)
        return True, f"Applied theme: {manifest.name if manifest else theme_id}"

    def apply_startup_theme(self) -> tuple[bool, str]:
        requested = self._settings.theme_id
        fallback = self._settings.theme_last_known_good_id
        candidates = [requested, fallback, DEFAULT_THEME_ID]
        seen: set[str] = set()

        for candidate in candidates:
            if not candidate or candidate in seen:
                continue
            seen.add(candidate)
            ok, message = self.apply_theme(candidate, persist=True)
            if ok:
                return True, message
        return False, "No registered theme could be applied; using built-in defaults."

    def set_tab_bar_variant(self, variant: str) -> None:
        self._registry.get_tab_bar_registry().set_variant(variant)
        self._settings.tab_bar_variant = variant
        self.tab_bar_variant_changed.emit(variant)

    def _apply_saved_tab_bar_variant(self) -> None:
        """Apply the saved variant, else the one the active manifest asks for."""
        variant = self._settings.tab_bar_variant
        if not variant:
            manifest = self._registry.get_manifest(self.active_theme_id)
            variant = manifest.features.flag("tab_bar_variant") if manifest else None
        if not isinstance(variant, str) or not variant:
            return
        tab_bar = self._registry.get_tab_bar_registry()
        if variant in tab_bar.list_variants():
            tab_bar.set_variant(variant)
