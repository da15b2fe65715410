"""Tests for CalloutRegistry — suggestion filtering, toggles, insertion."""

import pytest

import callout_picker.app.registry
from callout_picker.app.registry import UnknownCalloutError
from callout_picker.core.catalog import CATALOG, CalloutType
from tests.harness import FakeEditor, FakePluginData

DEMO_CATALOG = (
    CalloutType("note"),
    CalloutType("warning"),
    CalloutType("warfare-demo"),
)


def make_registry(data=None, catalog=DEMO_CATALOG, notifier=None):
    plugin_data = FakePluginData(data)
    registry = callout_picker.app.registry.create(plugin_data, catalog, notifier=notifier)
    return registry, plugin_data


def ids(callouts):
    return [c.identifier for c in callouts]


class TestInit:
    def test_fresh_install_enables_every_callout(self):
        registry, _ = make_registry(catalog=CATALOG)
        assert all(registry.is_enabled(c.identifier) for c in CATALOG)

    def test_duplicate_identifiers_rejected(self):
        with pytest.raises(ValueError):
            make_registry(catalog=(CalloutType("tip"), CalloutType("tip")))

    def test_load_does_not_write(self):
        _, plugin_data = make_registry()
        assert plugin_data.writes == []


class TestSuggest:
    def test_substring_match_in_catalog_order(self):
        registry, _ = make_registry()
        assert ids(registry.suggest("war")) == ["warning", "warfare-demo"]

    def test_disabled_callout_is_excluded(self):
        registry, _ = make_registry({"warning": False})
        assert ids(registry.suggest("war")) == ["warfare-demo"]

    def test_empty_query_returns_enabled_catalog(self):
        registry, _ = make_registry({"note": False})
        assert ids(registry.suggest("")) == ["warning", "warfare-demo"]

    def test_empty_query_full_catalog_order(self):
        registry, _ = make_registry(catalog=CATALOG)
        assert registry.suggest("") == list(CATALOG)

    def test_no_match_returns_empty_list(self):
        registry, _ = make_registry()
        assert registry.suggest("zzz") == []

    def test_case_insensitive(self):
        registry, _ = make_registry(catalog=CATALOG)
        assert registry.suggest("WARN") == registry.suggest("warn")
        assert ids(registry.suggest("WaRn")) == ["warning"]

    def test_match_anywhere_in_identifier(self):
        registry, _ = make_registry(catalog=CATALOG)
        assert ids(registry.suggest("ail")) == ["failure", "fail"]

    def test_idempotent(self):
        registry, plugin_data = make_registry(catalog=CATALOG)
        first = registry.suggest("i")
        second = registry.suggest("i")
        assert first == second
        assert plugin_data.writes == []


class TestSetEnabled:
    def test_disable_then_suggest_excludes(self):
        registry, _ = make_registry()
        registry.set_enabled("warning", False)
        assert not registry.is_enabled("warning")
        assert ids(registry.suggest("war")) == ["warfare-demo"]

    def test_reenable_restores(self):
        registry, _ = make_registry({"warning": False})
        registry.set_enabled("warning", True)
        assert ids(registry.suggest("war")) == ["warning", "warfare-demo"]

    def test_every_toggle_persists_full_configuration(self):
        registry, plugin_data = make_registry()
        registry.set_enabled("note", False)
        registry.set_enabled("warning", False)
        assert len(plugin_data.writes) == 2
        assert plugin_data.writes[0] == {"note": False, "warning": True, "warfare-demo": True}
        assert plugin_data.data == {"note": False, "warning": False, "warfare-demo": True}

    def test_unknown_persisted_keys_survive_write_through(self):
        registry, plugin_data = make_registry({"legacy": "kept"})
        registry.set_enabled("note", False)
        assert plugin_data.data["legacy"] == "kept"

    def test_unknown_identifier_raises(self):
        registry, plugin_data = make_registry()
        with pytest.raises(UnknownCalloutError):
            registry.set_enabled("nope", False)
        assert plugin_data.writes == []

    def test_write_failure_keeps_in_memory_value(self):
        registry, plugin_data = make_registry()
        plugin_data.write_error = OSError("read-only")
        registry.set_enabled("note", False)
        assert not registry.is_enabled("note")

    def test_reload_sees_persisted_toggle(self):
        registry, plugin_data = make_registry()
        registry.set_enabled("warning", False)
        reloaded = callout_picker.app.registry.create(plugin_data, DEMO_CATALOG)
        assert ids(reloaded.suggest("war")) == ["warfare-demo"]


class TestLookup:
    def test_get_returns_catalog_entry(self):
        registry, _ = make_registry()
        assert registry.get("note") is DEMO_CATALOG[0]

    def test_get_unknown_raises_key_error(self):
        registry, _ = make_registry()
        with pytest.raises(KeyError):
            registry.get("nope")

    def test_configuration_snapshot_is_read_only(self):
        registry, _ = make_registry()
        config = registry.configuration
        with pytest.raises(TypeError):
            config["note"] = False


class TestChoose:
    def test_acknowledges_and_inserts(self):
        notices = []
        registry, _ = make_registry(catalog=CATALOG, notifier=notices.append)
        editor = FakeEditor()
        registry.choose(registry.get("tip"), editor)
        assert notices == ["Selected tip"]
        assert editor.inserted == ["> [!tip]\n> "]

    def test_selection_becomes_body(self):
        registry, _ = make_registry(catalog=CATALOG)
        editor = FakeEditor(selection="Back up first.")
        registry.choose(registry.get("warning"), editor)
        assert editor.inserted == ["> [!warning]\n> Back up first."]

    def test_without_notifier_still_inserts(self):
        registry, _ = make_registry()
        editor = FakeEditor()
        registry.choose(registry.get("note"), editor)
        assert editor.inserted == ["> [!note]\n> "]
