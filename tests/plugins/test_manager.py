"""Tests for PluginManager: registration, discovery, and hook relay."""

from __future__ import annotations

import types
from typing import Any

import pluggy
import pytest

from offspring.plugins.manager import PluginManager

hookimpl = pluggy.HookimplMarker("offspring")


class _EnumAuditPlugin:
    def __init__(self) -> None:
        self.seen: list[str] = []

    @hookimpl
    def enum_defined(self, name: str, members: Any) -> None:
        self.seen.append(name)


def _no_entry_points(pm: PluginManager, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(pm._pm, "load_setuptools_entrypoints", lambda group: 0)


class TestPluginManager:
    @pytest.mark.parametrize("hook_name", ["class_created", "enum_defined"])
    def test_hookspecs_registered(self, hook_name: str) -> None:
        assert hasattr(PluginManager().hook, hook_name)

    def test_register_plugin(self) -> None:
        pm = PluginManager()
        plugin = _EnumAuditPlugin()
        pm.register_plugin(plugin, name="audit")
        assert "audit" in pm.list_plugin_names()
        assert plugin in pm.get_plugins()

    def test_register_plugin_default_name(self) -> None:
        pm = PluginManager()
        assert pm.register_plugin(_EnumAuditPlugin()) == "_EnumAuditPlugin"
        assert "_EnumAuditPlugin" in pm.list_plugin_names()

    def test_unregister_plugin(self) -> None:
        pm = PluginManager()
        plugin = _EnumAuditPlugin()
        pm.register_plugin(plugin, name="audit")
        pm.unregister(plugin)
        assert "audit" not in pm.list_plugin_names()

    def test_hook_dispatch(self) -> None:
        pm = PluginManager()
        plugin = _EnumAuditPlugin()
        pm.register_plugin(plugin)
        pm.hook.enum_defined(name="Color", members={})
        assert plugin.seen == ["Color"]

    def test_is_loaded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pm = PluginManager()
        _no_entry_points(pm, monkeypatch)
        assert pm.is_loaded is False
        assert pm.discover_and_load() == []
        assert pm.is_loaded is True

    def test_discover_uses_offspring_group(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pm = PluginManager()
        groups: list[str] = []
        monkeypatch.setattr(
            pm._pm, "load_setuptools_entrypoints", lambda group: groups.append(group) or 0
        )
        pm.discover_and_load()
        assert groups == ["offspring.plugins"]

    def test_entry_point_failure_is_logged(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        pm = PluginManager()

        def _boom(group: str) -> int:
            raise ImportError("broken plugin")

        monkeypatch.setattr(pm._pm, "load_setuptools_entrypoints", _boom)
        with caplog.at_level("WARNING", logger="offspring"):
            pm.discover_and_load()
        assert pm.is_loaded is True
        assert "Failed to load offspring.plugins entry points" in caplog.text

    def test_module_plugin(self) -> None:
        created: list[str] = []
        module = types.ModuleType("offspring_audit")

        @hookimpl
        def class_created(descriptor: Any, parents: Any) -> None:
            created.append(descriptor)

        module.class_created = class_created  # type: ignore[attr-defined]
        pm = PluginManager()
        assert pm.register_plugin(module) == "offspring_audit"
        pm.hook.class_created(descriptor="Shape", parents=())
        assert created == ["Shape"]

    def test_no_plugins_is_a_no_op(self) -> None:
        pm = PluginManager()
        assert pm.hook.class_created(descriptor="Shape", parents=()) == []
        assert pm.hook.enum_defined(name="Color", members={}) == []
