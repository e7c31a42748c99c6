"""Shared pytest fixtures and test helpers for valuetypes tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from valuetypes.config.discovery import CONFIG_ENV_VAR
from valuetypes.domain.manager import ValueTypeManager


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def manager() -> ValueTypeManager:
    """Manager seeded with the built-in catalog."""
    return ValueTypeManager()


@pytest.fixture
def bare_manager() -> ValueTypeManager:
    """Manager with no types registered."""
    return ValueTypeManager(disable_builtin_types=True)


@pytest.fixture
def project_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary project directory with config discovery isolated to it."""
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    return tmp_path


@pytest.fixture
def _isolated_project(project_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the temp project so the CLI never sees a stray valuetypes.toml.

    Use via ``@pytest.mark.usefixtures("_isolated_project")`` on command test
    classes.
    """
    monkeypatch.chdir(project_root)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Restore root logger state after CLI invocations reconfigure it."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    vt = logging.getLogger("valuetypes")
    vt_level = vt.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    vt.setLevel(vt_level)


@pytest.fixture
def write_config(project_root: Path) -> Callable[[str], Path]:
    """Return a helper writing valuetypes.toml into the temp project."""

    def _write(body: str) -> Path:
        path = project_root / "valuetypes.toml"
        path.write_text(body, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def write_local_plugin(project_root: Path) -> Callable[[str, str], Path]:
    """Return a helper writing a single-file plugin into ``.valuetypes/plugins/``."""

    def _write(filename: str, source: str) -> Path:
        plugin_dir = project_root / ".valuetypes" / "plugins"
        plugin_dir.mkdir(parents=True, exist_ok=True)
        path = plugin_dir / filename
        path.write_text(source, encoding="utf-8")
        return path

    return _write
