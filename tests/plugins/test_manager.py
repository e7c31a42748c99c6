"""Tests for PluginManager — registration, hook dispatch and type registration."""

from __future__ import annotations

import logging

import pytest

from valuetypes.domain.manager import ValueTypeManager
from valuetypes.domain.options import ValueTypeOptions
from valuetypes.plugins import PluginManager, hookimpl


class ZipPlugin:
    @hookimpl
    def register_value_types(self, manager: ValueTypeManager) -> None:
        manager.register("Zip", ValueTypeOptions(checker=r"^\d{5}$", description="Zip code"))


class StrictStringPlugin:
    @hookimpl
    def register_value_types(self, manager: ValueTypeManager) -> None:
        manager.register("String", ValueTypeOptions(checker=lambda v, p: v == "strict"))


class BrokenPlugin:
    @hookimpl
    def register_value_types(self, manager: ValueTypeManager) -> None:
        raise RuntimeError("plugin exploded")


class NoHooks:
    def hello(self) -> str:
        return "world"


class TestRegistration:
    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        pm.register_plugin(ZipPlugin())
        assert pm.list_plugin_names() == ["ZipPlugin"]

    def test_register_plugin_custom_name(self) -> None:
        pm = PluginManager()
        plugin = ZipPlugin()
        pm.register_plugin(plugin, name="zip")
        assert pm.list_plugin_names() == ["zip"]

    def test_discover_sets_loaded(self) -> None:
        pm = PluginManager()
        assert pm.is_loaded is False
        pm.discover_and_load(entry_points=False)
        assert pm.is_loaded is True

    def test_entry_point_discovery_without_plugins(self) -> None:
        pm = PluginManager()
        assert pm.discover_and_load() == []


class TestApply:
    def test_plugin_registers_types(self) -> None:
        pm = PluginManager()
        pm.register_plugin(ZipPlugin())
        manager = ValueTypeManager()
        assert pm.apply(manager) == ["ZipPlugin"]
        assert manager.value("Zip", "12345").ok is True
        assert manager.value("Zip", "1234").ok is False
        assert manager.value("NullableZip", None).ok is True

    def test_plugin_can_override_builtin(self) -> None:
        pm = PluginManager()
        pm.register_plugin(StrictStringPlugin())
        manager = ValueTypeManager()
        pm.apply(manager)
        assert manager.value("String", "loose").ok is False

    def test_later_plugin_wins(self) -> None:
        class LooseStringPlugin:
            @hookimpl
            def register_value_types(self, manager: ValueTypeManager) -> None:
                manager.register("String", ValueTypeOptions())

        pm = PluginManager()
        pm.register_plugin(StrictStringPlugin())
        pm.register_plugin(LooseStringPlugin())
        manager = ValueTypeManager()
        pm.apply(manager)
        assert manager.value("String", "anything").ok is True

    def test_failing_plugin_is_skipped(self, caplog: pytest.LogCaptureFixture) -> None:
        pm = PluginManager()
        pm.register_plugin(BrokenPlugin())
        pm.register_plugin(ZipPlugin())
        manager = ValueTypeManager(disable_builtin_types=True)
        with caplog.at_level(logging.WARNING, logger="valuetypes"):
            applied = pm.apply(manager)
        assert applied == ["ZipPlugin"]
        assert manager.has("Zip")
        assert "BrokenPlugin" in caplog.text


class TestHookImplDetection:
    def test_detects_hookimpl(self) -> None:
        assert PluginManager._has_hook_impls(ZipPlugin) is True

    def test_plain_class(self) -> None:
        assert PluginManager._has_hook_impls(NoHooks) is False
