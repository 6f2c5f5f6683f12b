"""Locate theme bundles in source checkouts and PyInstaller builds."""

from __future__ import annotations

from pathlib import Path
import sys

from credwallet.ui.themes.constants import BUNDLE_SUFFIXES


def is_frozen() -> bool:
    return bool(getattr(sys, "frozen", False))


def package_root() -> Path:
    """Directory holding the `credwallet` package data.

    In a frozen build this is ``_MEIPASS/credwallet`` when present, otherwise
    ``_MEIPASS`` itself.
    """
    meipass = getattr(sys, "_MEIPASS", None) if is_frozen() else None
    if not meipass:
        return Path(__file__).resolve().parent
    extracted = Path(meipass)
    nested = extracted / "credwallet"
    return nested if nested.exists() else extracted


def builtin_themes_root() -> Path:
    return package_root() / "ui" / "themes" / "builtin"


def builtin_theme_files() -> list[Path]:
    """One ``theme.yaml`` per built-in theme directory, sorted by theme id."""
    root = builtin_themes_root()
    if not root.is_dir():
        return []
    return sorted(path for path in root.glob("*/theme.yaml") if path.is_file())


def theme_bundle_files(directory: Path) -> list[Path]:
    """Bundle files placed directly in ``directory``; other files are ignored."""
    if not directory.is_dir():
        return []
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in BUNDLE_SUFFIXES
    )
