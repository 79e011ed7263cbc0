"""Tests for the interactive shell command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from bookstock.cli import cli


@pytest.mark.usefixtures("_isolated_dir")
class TestShellCommand:
    def test_default_command_is_shell(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--offline"], input="get --order-by=title\n")
        assert result.exit_code == 0
        assert "Enter command:" in result.output
        lines = [line for line in result.output.splitlines() if line.startswith("Id: ")]
        assert lines == [
            "Id: 2, Author: George Orwell, Title: 1984, Year: 1948, Count: 999999",
            "Id: 1, Author: George Orwell, Title: Animal Farm, Year: 1945, Count: 999999",
        ]

    def test_session(self, cli_runner: CliRunner) -> None:
        script = "\n".join(
            [
                "",
                "buy --id=1",
                "restock --id=2 --count=3",
                "get --date=notadate",
                "dance",
                "get --title=Animal",
            ]
        )
        result = cli_runner.invoke(cli, ["--offline", "shell"], input=script + "\n")
        assert result.exit_code == 0
        out = result.output
        assert "You didn't enter a command." in out
        assert "Bought Animal Farm. Remaining count: 999998" in out
        assert "Restocked 3 copies of 1984. New count: 1000002" in out
        assert "Wrong date format" in out
        assert "Invalid command: dance" in out
        assert "Title: Animal Farm, Year: 1945, Count: 999998" in out

    def test_end_of_input_exits_cleanly(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--offline", "shell"], input="")
        assert result.exit_code == 0
        assert result.output.count("Enter command:") == 1

    def test_state_persists_between_sessions(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["--offline"], input="buy --id=2\n")
        result = cli_runner.invoke(cli, ["--offline"], input="get --title=1984\n")
        assert "Count: 999998" in result.output
