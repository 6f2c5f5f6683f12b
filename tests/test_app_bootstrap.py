"""Tests for credwallet.app theme bootstrap."""

import json
import logging
from unittest.mock import MagicMock

import pytest

from credwallet import app
from credwallet.ui.themes.models import CredentialMatchInfo


@pytest.fixture
def mock_settings(tmp_path):
    settings = MagicMock()
    settings.theme_id = "teal-dark"
    settings.theme_last_known_good_id = "teal-dark"
    settings.tab_bar_variant = ""
    settings.user_themes_dir = tmp_path / "themes"
    settings.user_themes_dir.mkdir()
    return settings


def _user_bundle(theme_id):
    return {
        "manifest": {
            "meta": {"id": theme_id, "name": "Campus", "version": "2.0.0"},
            "features": {"tabBarVariant": "minimal"},
        },
        "cardThemes": [
            {"id": "campus", "matcher": {"patterns": [{"type": "issuerName", "regex": "campus"}]}},
        ],
    }


def test_bootstrap_loads_builtin_theme(mock_settings):
    service = app.bootstrap_themes(mock_settings)
    registry = service.registry

    assert service.active_theme_id == "teal-dark"
    cards = registry.get_card_theme_registry()
    assert cards.get_theme(CredentialMatchInfo(issuer_name="State University")).id == "education"
    assert registry.get_background_registry().get_for_screen("dashboard").id == "home"
    assert registry.get_tab_bar_registry().get_variant() == "floating"


def test_bootstrap_loads_user_themes(mock_settings):
    path = mock_settings.user_themes_dir / "campus.json"
    path.write_text(json.dumps(_user_bundle("campus")), encoding="utf-8")
    mock_settings.theme_id = "campus"

    service = app.bootstrap_themes(mock_settings)

    assert [info.id for info in service.available_themes()] == ["teal-dark", "campus"]
    assert service.active_theme_id == "campus"


def test_bootstrap_logs_rejected_bundles(mock_settings, caplog):
    (mock_settings.user_themes_dir / "broken.yaml").write_text("- not a mapping\n", encoding="utf-8")
    (mock_settings.user_themes_dir / "notes.txt").write_text("ignored", encoding="utf-8")
    logger = logging.getLogger("credwallet.test.bootstrap")

    with caplog.at_level(logging.WARNING, logger="credwallet.test.bootstrap"):
        service = app.bootstrap_themes(mock_settings, logger)

    assert "broken.yaml" in caplog.text
    assert "notes.txt" not in caplog.text
    assert service.active_theme_id == "teal-dark"
