"""Tests for building a manager from settings."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from valuetypes.config.settings import ValueTypesSettings
from valuetypes.loader import build_manager, build_plugin_manager

_OVERRIDE_PLUGIN_SRC = """\
from valuetypes.domain.options import ValueTypeOptions
from valuetypes.plugins import hookimpl


class OverridePlugin:
    @hookimpl
    def register_value_types(self, manager):
        manager.register("Zip", ValueTypeOptions(checker=r"^\\d{5}(-\\d{4})?$"))
"""


class TestBuildManager:
    def test_defaults(self, project_root: Path) -> None:
        manager = build_manager(ValueTypesSettings.from_cli(project_root=project_root))
        assert len(manager) == 48

    def test_config_types_added(
        self, project_root: Path, write_config: Callable[[str], Path]
    ) -> None:
        write_config('[types.Zip]\npattern = "^[0-9]{5}$"\nswagger_type = "string"\n')
        manager = build_manager(ValueTypesSettings.from_cli(project_root=project_root))
        assert manager.has("Zip")
        assert manager.has("NullableZip")
        assert len(manager) == 50

    def test_builtins_disabled(
        self, project_root: Path, write_config: Callable[[str], Path]
    ) -> None:
        write_config('[manager]\ndisable_builtin_types = true\n[types.Zip]\npattern = "x"\n')
        manager = build_manager(ValueTypesSettings.from_cli(project_root=project_root))
        assert manager.names() == ["Zip", "NullableZip"]

    def test_plugins_run_after_config_types(
        self,
        project_root: Path,
        write_config: Callable[[str], Path],
        write_local_plugin: Callable[[str, str], Path],
    ) -> None:
        write_config('[types.Zip]\npattern = "^[0-9]{5}$"\n')
        write_local_plugin("override.py", _OVERRIDE_PLUGIN_SRC)
        manager = build_manager(ValueTypesSettings.from_cli(project_root=project_root))
        assert manager.value("Zip", "12345-6789").ok is True

    def test_custom_local_dir(
        self, project_root: Path, write_config: Callable[[str], Path]
    ) -> None:
        write_config('[plugins]\nlocal_dir = "extras"\n')
        extras = project_root / "extras"
        extras.mkdir()
        (extras / "override.py").write_text(_OVERRIDE_PLUGIN_SRC, encoding="utf-8")
        manager = build_manager(ValueTypesSettings.from_cli(project_root=project_root))
        assert manager.has("Zip")


class TestBuildPluginManager:
    def test_pattern_types_plugin_always_registered(self, project_root: Path) -> None:
        settings = ValueTypesSettings.from_cli(project_root=project_root)
        plugins = build_plugin_manager(settings)
        assert plugins.list_plugin_names()[0] == "pattern_types"
        assert plugins.is_loaded is True

    def test_discovery_skipped_when_disabled(
        self, project_root: Path, write_config: Callable[[str], Path]
    ) -> None:
        write_config("[plugins]\nenabled = false\n")
        plugins = build_plugin_manager(ValueTypesSettings.from_cli(project_root=project_root))
        assert plugins.list_plugin_names() == ["pattern_types"]
        assert plugins.is_loaded is False
