"""Tests for tab bar configuration and variant handling."""

from __future__ import annotations

import pytest

from credwallet.ui.themes.models import TabBarConfig
from credwallet.ui.themes.tab_bar import TabBarRegistry


def _config(variant: str = "compact", with_variants: bool = True) -> TabBarConfig:
    variants = None
    if with_variants:
        variants = {
            "compact": {"height": 48, "backgroundColor": "#000000"},
            "tall": {"height": 96, "backgroundColor": "#FFFFFF"},
        }
    return TabBarConfig(
        variant=variant,
        variants=variants,
        style={"height": 1, "backgroundColor": "#123456"},
        tabs=[{"id": "home", "label": "Home"}],
    )


@pytest.fixture
def registry() -> TabBarRegistry:
    return TabBarRegistry()


class TestInitialState:
    def test_default_variant(self, registry: TabBarRegistry) -> None:
        assert registry.get_variant() == "default"

    def test_builtin_variants(self, registry: TabBarRegistry) -> None:
        assert registry.list_variants() == ["default", "floating", "minimal", "attached"]

    def test_default_tabs(self, registry: TabBarRegistry) -> None:
        assert [tab["id"] for tab in registry.get_config().tabs] == ["home", "credentials", "settings"]

    def test_style_matches_default_variant(self, registry: TabBarRegistry) -> None:
        assert registry.get_active_style() == registry.get_variant_style("default")


class TestSetConfig:
    def test_style_forced_to_variant(self, registry: TabBarRegistry) -> None:
        registry.set_config(_config("tall"))
        assert registry.get_active_style() == {"height": 96, "backgroundColor": "#FFFFFF"}
        assert registry.get_active_style() is registry.get_variant_style("tall")

    def test_style_trusted_without_variants(self, registry: TabBarRegistry) -> None:
        registry.set_config(_config("whatever", with_variants=False))
        assert registry.get_active_style() == {"height": 1, "backgroundColor": "#123456"}
        assert registry.list_variants() == ["default"]
        assert registry.get_variant_style("whatever") is None

    def test_style_kept_when_variant_missing_from_variants(self, registry) -> None:
        registry.set_config(_config("unknown"))
        assert registry.get_active_style() == {"height": 1, "backgroundColor": "#123456"}

    def test_get_config_returns_current(self, registry: TabBarRegistry) -> None:
        config = _config()
        registry.set_config(config)
        assert registry.get_config() is config


class TestVariants:
    def test_set_variant_updates_style(self, registry: TabBarRegistry) -> None:
        registry.set_variant("floating")
        assert registry.get_variant() == "floating"
        assert registry.get_active_style() is registry.get_variant_style("floating")

    @pytest.mark.parametrize("variant", ["default", "floating", "minimal", "attached"])
    def test_switch_between_builtin_variants(self, registry, variant: str) -> None:
        registry.set_variant(variant)
        assert registry.get_active_style() == registry.get_variant_style(variant)

    def test_unknown_variant_changes_name_only(self, registry: TabBarRegistry) -> None:
        style_before = registry.get_active_style()
        registry.set_variant("nonexistent")
        assert registry.get_variant() == "nonexistent"
        assert registry.get_active_style() is style_before

    def test_variant_style_lookup(self, registry: TabBarRegistry) -> None:
        assert registry.get_variant_style("minimal")["height"] == 56
        assert registry.get_variant_style("floating")["borderRadius"] == 32
        assert registry.get_variant_style("missing") is None

    def test_coherence_after_each_mutation(self, registry: TabBarRegistry) -> None:
        registry.set_config(_config("compact"))
        assert registry.get_active_style() == registry.get_variant_style(registry.get_variant())
        registry.set_variant("tall")
        assert registry.get_active_style() == registry.get_variant_style(registry.get_variant())
