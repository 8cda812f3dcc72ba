"""Tests for the slice and trim commands."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from lenstr.cli import cli


class TestSliceCommand:
    def test_rest_of_string(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "slice", "test.file.name.txt", "--start", "13"])
        assert result.exit_code == 0
        assert result.output == ".txt\n"

    @pytest.mark.parametrize(
        "args,expected",
        [
            (["--start=-3", "--length", "2"], "de"),
            (["-s", "-3", "-n", "2"], "de"),
            (["--start=-99", "--length", "2"], "ab"),
            (["--start", "1", "--length=-1"], "bcdef"),
            (["--start", "4", "--length", "50"], "ef"),
        ],
    )
    def test_clamping(self, cli_runner: CliRunner, args: list[str], expected: str) -> None:
        result = cli_runner.invoke(cli, ["-q", "slice", "abcdef", *args])
        assert result.exit_code == 0, result.output
        assert result.output == f"{expected}\n"

    def test_past_end_is_empty(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "slice", "abc", "--start", "9"])
        assert json.loads(result.output)["data"] == {"content": "", "length": 0}

    def test_defaults_are_identity(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "slice", "whole"])
        assert result.output == "whole\n"


class TestTrimCommand:
    def test_trim(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["trim", "  hi  "])
        assert result.output.splitlines()[-1] == '"hi" has 2 characters length'

    def test_only_whitespace(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "trim", "   "])
        assert json.loads(result.output)["data"]["length"] == 0
