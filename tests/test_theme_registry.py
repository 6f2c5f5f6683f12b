"""Tests for the theme manifest registry and its sub-registry sync."""

from __future__ import annotations

import logging

import pytest

from credwallet.ui.themes.models import (
    BackgroundConfig,
    CardTheme,
    CardThemeMatcher,
    CardThemePattern,
    CredentialMatchInfo,
    OnboardingTheme,
    TabBarConfig,
    ThemeManifest,
    ThemeMeta,
)
from credwallet.ui.themes.registry import ThemeRegistry


def _manifest(theme_id: str, name: str | None = None, version: str = "1.0.0") -> ThemeManifest:
    return ThemeManifest(
        meta=ThemeMeta(id=theme_id, name=name or theme_id.title(), version=version)
    )


def _card(theme_id: str, regex: str = "Test") -> CardTheme:
    return CardTheme(
        id=theme_id,
        matcher=CardThemeMatcher(patterns=(CardThemePattern(type="issuerName", regex=regex),)),
    )


def _tab_bar(variant: str = "floating") -> TabBarConfig:
    return TabBarConfig(
        variant=variant,
        variants={"floating": {"height": 64}, "minimal": {"height": 56}},
        style={"height": 0},
    )


@pytest.fixture
def registry() -> ThemeRegistry:
    return ThemeRegistry()


class TestRegistration:
    def test_first_registration_activates(self, registry: ThemeRegistry) -> None:
        registry.register(_manifest("one"))
        registry.register(_manifest("two"))
        assert registry.get_active_id() == "one"

    def test_register_multiple_keeps_first_active(self, registry: ThemeRegistry) -> None:
        registry.register_multiple([_manifest("a"), _manifest("b"), _manifest("c")])
        assert registry.get_active_id() == "a"
        assert [info.id for info in registry.list()] == ["a", "b", "c"]

    def test_register_does_not_sync_sub_registries(self, registry: ThemeRegistry) -> None:
        tab_bar_config = registry.get_tab_bar_registry().get_config()
        registry.register(_manifest("one"))
        assert registry.get_tab_bar_registry().get_config() is tab_bar_config

    def test_unregister_active_clears_active(self, registry: ThemeRegistry) -> None:
        registry.register_multiple([_manifest("a"), _manifest("b")])
        registry.unregister("a")
        assert registry.get_active_id() is None
        assert registry.get_active() is None
        assert registry.has("b")

    def test_unregister_missing_is_noop(self, registry: ThemeRegistry) -> None:
        registry.register(_manifest("a"))
        resolved = registry.get("a")
        registry.unregister("zzz")
        assert registry.get_active_id() == "a"
        assert registry.get("a") is resolved

    def test_list_projects_theme_info(self, registry: ThemeRegistry) -> None:
        registry.register(
            ThemeManifest(
                meta=ThemeMeta(id="x", name="X", version="2.0.0", description="desc")
            )
        )
        info = registry.list()[0]
        assert (info.id, info.name, info.version, info.description) == ("x", "X", "2.0.0", "desc")

    def test_get_manifest_and_has(self, registry: ThemeRegistry) -> None:
        manifest = _manifest("x")
        registry.register(manifest)
        assert registry.get_manifest("x") is manifest
        assert registry.has("x")
        assert not registry.has("y")
        assert registry.get_manifest("y") is None


class TestResolvedCache:
    def test_get_unknown_returns_none(self, registry: ThemeRegistry) -> None:
        assert registry.get("missing") is None

    def test_get_builds_empty_resolved_theme(self, registry: ThemeRegistry) -> None:
        manifest = _manifest("university", "University")
        registry.register(manifest)
        resolved = registry.get("university")
        assert resolved.id == "university"
        assert resolved.name == "University"
        assert resolved.manifest is manifest
        assert resolved.card_themes == []
        assert resolved.backgrounds == []
        assert resolved.screen_backgrounds == {}
        assert resolved.screen_themes == {}
        assert resolved.tab_bar_config.variant == "default"
        assert resolved.tab_bar_config.tabs == []
        assert resolved.onboarding is None

    def test_get_is_cached(self, registry: ThemeRegistry) -> None:
        registry.register(_manifest("a"))
        assert registry.get("a") is registry.get("a")

    def test_reregister_invalidates_cache(self, registry: ThemeRegistry) -> None:
        registry.register(_manifest("a", "Old"))
        first = registry.get("a")
        registry.register(_manifest("a", "New"))
        second = registry.get("a")
        assert second is not first
        assert second.name == "New"

    def test_unrelated_mutation_keeps_cache(self, registry: ThemeRegistry) -> None:
        registry.register_multiple([_manifest("a"), _manifest("b")])
        first = registry.get("a")
        registry.register(_manifest("b", "Changed"))
        registry.unregister("b")
        assert registry.get("a") is first

    def test_unregister_drops_cache(self, registry: ThemeRegistry) -> None:
        registry.register(_manifest("a"))
        first = registry.get("a")
        registry.unregister("a")
        assert registry.get("a") is None
        registry.register(_manifest("a"))
        assert registry.get("a") is not first


class TestSetActive:
    def test_unknown_id_warns_and_keeps_active(self, registry, caplog) -> None:
        registry.register(_manifest("a"))
        with caplog.at_level(logging.WARNING, logger="credwallet.ui.themes.registry"):
            registry.set_active("missing")
        assert registry.get_active_id() == "a"
        assert "Theme not found: missing" in caplog.text

    def test_set_active_builds_and_caches(self, registry: ThemeRegistry) -> None:
        registry.register_multiple([_manifest("a"), _manifest("b")])
        registry.set_active("b")
        assert registry.get_active_id() == "b"
        assert registry.get_active() is registry.get("b")

    def test_empty_collections_do_not_clear_sub_registries(self, registry) -> None:
        registry.set_card_themes([_card("c1")])
        registry.set_backgrounds([BackgroundConfig(id="bg", type="solid", screen_ids=("home",))])
        registry.register(_manifest("a"))
        registry.set_active("a")

        assert [t.id for t in registry.get_card_theme_registry().list()] == ["c1"]
        assert registry.get_background_registry().get("bg") is not None
        assert registry.get_background_registry().get_screen_mapping() == {"home": "bg"}

    def test_set_active_always_pushes_tab_bar(self, registry: ThemeRegistry) -> None:
        registry.register(_manifest("a"))
        registry.set_tab_bar_config(_tab_bar())
        registry.set_active("a")
        assert registry.get_tab_bar_registry().get_config() is registry.get("a").tab_bar_config
        assert registry.get_tab_bar_registry().get_variant() == "default"

    def test_switching_restores_stored_collections(self, registry: ThemeRegistry) -> None:
        registry.register_multiple([_manifest("a"), _manifest("b")])
        registry.set_active("a")
        registry.set_card_themes([_card("a-card")])
        registry.set_active("b")
        registry.set_card_themes([_card("b-card")])

        registry.set_active("a")
        assert [t.id for t in registry.get_card_theme_registry().list()] == ["a-card"]
        registry.set_active("b")
        assert [t.id for t in registry.get_card_theme_registry().list()] == ["b-card"]


class TestConfigurationInjection:
    def test_set_card_themes_replaces(self, registry: ThemeRegistry) -> None:
        registry.set_card_themes([_card("old")])
        registry.set_card_themes([_card("new")])
        assert [t.id for t in registry.get_card_theme_registry().list()] == ["new"]

    def test_set_card_themes_mirrors_onto_cached_active(self, registry) -> None:
        registry.register(_manifest("a"))
        resolved = registry.get("a")
        themes = [_card("c1"), _card("c2")]
        registry.set_card_themes(themes)
        assert resolved.card_themes == themes
        assert registry.get("a") is resolved

    def test_setters_skip_uncached_active(self, registry: ThemeRegistry) -> None:
        registry.register(_manifest("a"))
        registry.set_card_themes([_card("c1")])
        assert registry.get("a").card_themes == []

    def test_set_backgrounds_derives_screen_map(self, registry: ThemeRegistry) -> None:
        registry.register(_manifest("a"))
        resolved = registry.get("a")
        backgrounds = [
            BackgroundConfig(id="default", type="solid", color="#111111", screen_ids=("*",)),
            BackgroundConfig(id="home", type="solid", screen_ids=("home", "dashboard")),
            BackgroundConfig(id="modal", type="solid"),
        ]
        registry.set_backgrounds(backgrounds)

        expected = {"home": "home", "dashboard": "home"}
        background_registry = registry.get_background_registry()
        assert background_registry.get_screen_mapping() == expected
        assert background_registry.get_for_screen("dashboard").id == "home"
        assert resolved.backgrounds == backgrounds
        assert resolved.screen_backgrounds == expected

    def test_set_backgrounds_clears_previous(self, registry: ThemeRegistry) -> None:
        registry.set_backgrounds([BackgroundConfig(id="old", type="solid", screen_ids=("x",))])
        registry.set_backgrounds([BackgroundConfig(id="new", type="solid")])
        background_registry = registry.get_background_registry()
        assert background_registry.get("old") is None
        assert background_registry.get_screen_mapping() == {}

    def test_set_screen_backgrounds(self, registry: ThemeRegistry) -> None:
        registry.register(_manifest("a"))
        resolved = registry.get("a")
        mapping = {"home": "bg"}
        registry.set_screen_backgrounds(mapping)
        mapping["other"] = "x"
        assert registry.get_background_registry().get_screen_mapping() == {"home": "bg"}
        assert resolved.screen_backgrounds == {"home": "bg"}

    def test_set_tab_bar_config(self, registry: ThemeRegistry) -> None:
        registry.register(_manifest("a"))
        resolved = registry.get("a")
        config = _tab_bar("minimal")
        registry.set_tab_bar_config(config)
        tab_bar = registry.get_tab_bar_registry()
        assert tab_bar.get_active_style() == {"height": 56}
        assert resolved.tab_bar_config is config

    def test_set_onboarding_theme_mirrors_and_syncs(self, registry: ThemeRegistry) -> None:
        registry.register_multiple([_manifest("a"), _manifest("b")])
        assert registry.get_onboarding_theme() is None
        registry.set_active("a")
        onboarding_a = OnboardingTheme(colors={"brand": {"primary": "#0D7377"}})
        registry.set_onboarding_theme(onboarding_a)
        assert registry.get("a").onboarding is onboarding_a

        registry.set_active("b")
        assert registry.get_onboarding_theme() is onboarding_a
        onboarding_b = OnboardingTheme()
        registry.set_onboarding_theme(onboarding_b)

        registry.set_active("a")
        assert registry.get_onboarding_theme() is onboarding_a


def test_end_to_end_university() -> None:
    registry = ThemeRegistry()
    registry.register(_manifest("university", "University"))
    registry.set_active("university")
    registry.set_card_themes(
        [
            _card("u-theme", "University.*"),
            CardTheme(id="fallback", matcher=CardThemeMatcher(fallback=True)),
        ]
    )

    cards = registry.get_card_theme_registry()
    assert cards.get_theme(CredentialMatchInfo(issuer_name="University of Test")).id == "u-theme"
    assert cards.get_theme(CredentialMatchInfo(issuer_name="Unknown Org")).id == "fallback"
    assert [t.id for t in registry.get_active().card_themes] == ["u-theme", "fallback"]
