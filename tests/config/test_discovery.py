"""Tests for lenstr.toml walk-up discovery."""

from __future__ import annotations

from pathlib import Path

import pytest

from lenstr.config.discovery import CONFIG_ENV_VAR, CONFIG_FILENAME, find_config, resolve_config


class TestFindConfig:
    def test_none_when_absent(self, tmp_path: Path) -> None:
        assert find_config(tmp_path) is None

    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("")
        assert find_config(tmp_path) == config.resolve()

    def test_walks_up(self, tmp_path: Path) -> None:
        config = tmp_path / CONFIG_FILENAME
        config.write_text("")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == config.resolve()

    def test_defaults_to_cwd(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert find_config() == (tmp_path / CONFIG_FILENAME).resolve()

    def test_env_var_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        other = tmp_path / "elsewhere.toml"
        other.write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(other))
        assert find_config(tmp_path) == other

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.toml"))
        assert find_config(tmp_path) is None


class TestResolveConfig:
    def test_explicit_file_wins(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        explicit = tmp_path / "custom.toml"
        explicit.write_text("")
        assert resolve_config(str(explicit), tmp_path) == explicit

    def test_explicit_missing_file_skips_discovery(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert resolve_config(str(tmp_path / "missing.toml"), tmp_path) is None

    def test_falls_back_to_discovery(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert resolve_config(None, tmp_path) == (tmp_path / CONFIG_FILENAME).resolve()
