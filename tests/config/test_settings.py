"""Tests for LenstrSettings — unified settings with TOML source."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from lenstr.config.settings import LenstrSettings


class TestDefaults:
    def test_all_defaults(self) -> None:
        settings = LenstrSettings.from_cli()
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.format.buffer_size == 100
        assert settings.memory.max_length is None
        assert settings.output.encoding == "utf-8"

    def test_frozen(self) -> None:
        settings = LenstrSettings.from_cli()
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "lenstr.toml").write_text("[format]\nbuffer_size = 16\n")
        settings = LenstrSettings.from_cli(start=tmp_path)
        assert settings.format.buffer_size == 16
        assert settings.prompt.buffer_size == 100  # default preserved
        assert settings.config_path == (tmp_path / "lenstr.toml").resolve()

    def test_empty_toml_uses_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "lenstr.toml").write_text("")
        settings = LenstrSettings.from_cli(start=tmp_path)
        assert settings.format.buffer_size == 100

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text("[memory]\nmax_length = 8\n")
        settings = LenstrSettings.from_cli(config_path=str(custom))
        assert settings.memory.max_length == 8
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = LenstrSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.memory.max_length is None

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "lenstr.toml").write_text("[format\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            LenstrSettings.from_cli(start=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "lenstr.toml").write_text("[output]\nencoding = 'ascii'\n")
        monkeypatch.setenv("LENSTR_OUTPUT__ENCODING", "latin-1")
        settings = LenstrSettings.from_cli(start=tmp_path)
        assert settings.output.encoding == "latin-1"

    def test_env_nested_section(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LENSTR_MEMORY__MAX_LENGTH", "32")
        assert LenstrSettings.from_cli().memory.max_length == 32

    def test_cli_flags_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LENSTR_QUIET", "false")
        assert LenstrSettings.from_cli(quiet=True).quiet is True
