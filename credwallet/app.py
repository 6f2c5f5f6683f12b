"""Application bootstrap for the theme engine."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import sys

from PySide6.QtCore import QCoreApplication

from credwallet.config.settings import AppSettings
from credwallet.runtime_paths import (
    builtin_theme_files,
    builtin_themes_root,
    is_frozen,
    package_root,
    theme_bundle_files,
)
from credwallet.ui.themes.registry import ThemeRegistry
from credwallet.ui.themes.service import ThemeService


def _configure_startup_logger(settings: AppSettings) -> logging.Logger:
    logger = logging.getLogger("credwallet.startup")
    if logger.handlers:
        return logger

    logger.setLevel(logging.INFO)
    log_dir = settings.app_data_dir / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_dir / "startup.log",
        maxBytes=512_000,
        backupCount=3,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger


def bootstrap_themes(settings, logger: logging.Logger | None = None) -> ThemeService:
    """Build the registry, load built-in and user bundles, apply the saved theme."""
    logger = logger or logging.getLogger("credwallet.startup")

    registry = ThemeRegistry()
    service = ThemeService(registry, settings)

    builtin_files = builtin_theme_files()
    if not builtin_files:
        logger.warning("builtin theme root missing or empty at %s", builtin_themes_root())

    user_files = theme_bundle_files(settings.user_themes_dir)

    errors: list[str] = []
    for path in [*builtin_files, *user_files]:
        ok, message = service.load_bundle_file(path)
        if not ok:
            errors.append(f"{path.name}: {message}")
    if errors:
        logger.warning("theme load warnings: %s", " | ".join(errors[:6]))

    ok, message = service.apply_startup_theme()
    if ok:
        logger.info(message)
    else:
        logger.warning(message)
    return service


def run_app() -> int:
    """Initialize the core application and theme engine."""
    app = QCoreApplication.instance() or QCoreApplication(sys.argv)
    app.setApplicationName("CredWallet")
    app.setOrganizationName("CredWallet")
    settings = AppSettings()
    logger = _configure_startup_logger(settings)
    logger.info("startup mode frozen=%s package_root=%s", is_frozen(), package_root())

    service = bootstrap_themes(settings, logger)
    for info in service.available_themes():
        marker = "*" if info.id == service.active_theme_id else " "
        print(f"{marker} {info.id:<20} {info.name} {info.version}")
    return 0
