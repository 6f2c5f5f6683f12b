"""Persistent user preferences for theme selection."""

from __future__ import annotations

import os
from pathlib import Path

from PySide6.QtCore import QSettings

from credwallet.ui.themes.constants import DEFAULT_THEME_ID, TAB_BAR_VARIANTS

_THEME_KEY = "themes/selected"
_LAST_GOOD_KEY = "themes/last_known_good"
_VARIANT_KEY = "themes/tab_bar_variant"


class AppSettings:
    """QSettings-backed preferences.

    Only which theme and tab bar variant the user picked is stored; theme
    definitions are loaded from bundle files on every start.
    """

    def __init__(self, qsettings: QSettings | None = None) -> None:
        self._qs = qsettings if qsettings is not None else QSettings("CredWallet", "CredWallet")

    def _text(self, key: str, default: str) -> str:
        raw = self._qs.value(key, default, type=str)
        return (raw or "").strip() or default

    # -- theme selection --

    @property
    def theme_id(self) -> str:
        return self._text(_THEME_KEY, DEFAULT_THEME_ID)

    @theme_id.setter
    def theme_id(self, value: str) -> None:
        self._qs.setValue(_THEME_KEY, (value or "").strip() or DEFAULT_THEME_ID)

    @property
    def theme_last_known_good_id(self) -> str:
        return self._text(_LAST_GOOD_KEY, DEFAULT_THEME_ID)

    @theme_last_known_good_id.setter
    def theme_last_known_good_id(self, value: str) -> None:
        self._qs.setValue(_LAST_GOOD_KEY, (value or "").strip() or DEFAULT_THEME_ID)

    @property
    def tab_bar_variant(self) -> str:
        """Saved variant name, or "" when none was chosen."""
        return self._text(_VARIANT_KEY, "")

    @tab_bar_variant.setter
    def tab_bar_variant(self, value: str) -> None:
        variant = (value or "").strip()
        self._qs.setValue(_VARIANT_KEY, variant if variant in TAB_BAR_VARIANTS else "")

    # -- locations --

    @property
    def app_data_dir(self) -> Path:
        base = Path(os.environ.get("APPDATA", Path.home() / ".config"))
        path = base / "credwallet"
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def user_themes_dir(self) -> Path:
        """Directory scanned for user bundle files at startup."""
        path = self.app_data_dir / "themes"
        path.mkdir(parents=True, exist_ok=True)
        return path
