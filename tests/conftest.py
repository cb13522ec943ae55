"""Shared pytest fixtures for offspring tests."""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
from click.testing import CliRunner

from offspring.config.settings import OffspringSettings
from offspring.plugins.manager import PluginManager
from offspring.system import TypeSystem


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def plugins() -> PluginManager:
    """A fresh plugin manager with no plugins registered."""
    return PluginManager()


@pytest.fixture
def system(plugins: PluginManager, monkeypatch: pytest.MonkeyPatch) -> TypeSystem:
    """An isolated type system, so tests never touch the process-wide registry."""
    for var in ("OFFSPRING_TYPES__UNION_DELIMITER", "OFFSPRING_PLUGINS__AUTOLOAD"):
        monkeypatch.delenv(var, raising=False)
    return TypeSystem(OffspringSettings(), plugins=plugins)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    offspring_logger = logging.getLogger("offspring")
    offspring_level = offspring_logger.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    offspring_logger.setLevel(offspring_level)
