"""Shared pytest fixtures for lenstr tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from lenstr.config.settings import LenstrSettings
from lenstr.services.telemetry import disable_telemetry


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no LENSTR_* variables.

    Keeps a developer's own lenstr.toml or environment out of the results.
    """
    for name in list(os.environ):
        if name.startswith("LENSTR_"):
            monkeypatch.delenv(name)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_global_state() -> Generator[None]:
    """Undo logging and telemetry changes made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    lenstr_level = logging.getLogger("lenstr").level
    yield
    disable_telemetry()
    root.handlers = handlers
    root.setLevel(level)
    logging.getLogger("lenstr").setLevel(lenstr_level)


@pytest.fixture
def settings() -> LenstrSettings:
    """Default settings (no TOML, no env overrides)."""
    return LenstrSettings.from_cli()
