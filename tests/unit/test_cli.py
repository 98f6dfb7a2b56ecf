"""Tests for CLI commands."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from minicalc import __version__
from minicalc._version import get_version
from minicalc.cli import app


@pytest.fixture
def cli_runner() -> CliRunner:
    """Return a CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run every command where no minicalc.toml exists."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


class TestEvalCommand:
    def test_prints_value(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1 + 2 * 3"])
        assert result.exit_code == 0
        assert result.stdout.strip() == "7"

    def test_left_associative(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "10 - 2 - 3"])
        assert result.stdout.strip() == "5"

    def test_diagnostics_exit_code(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "1 +"])
        assert result.exit_code == 1
        assert "ERROR: Unexpected token <EndOfFileToken>, expected <NumberToken>" in result.output

    def test_division_by_zero_exit_code(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "5 / 0"])
        assert result.exit_code == 2
        assert "Division by zero" in result.output

    def test_expression_starting_with_minus(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--", "-1"])
        assert result.exit_code == 1
        assert "ERROR: Unexpected token <MinusToken>, expected <NumberToken>" in result.output

    def test_show_tree(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["eval", "--show-tree", "(1 + 2) * 3"])
        assert result.exit_code == 0
        assert "ParenthesizedExpression" in result.stdout
        assert result.stdout.strip().splitlines()[-1] == "9"


class TestTokensCommand:
    def test_lists_tokens(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tokens", "12+3"])
        assert result.exit_code == 0
        assert "NumberToken" in result.stdout
        assert "PlusToken" in result.stdout
        assert "EndOfFileToken" in result.stdout

    def test_reports_bad_characters(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["tokens", "1 & 2"])
        assert result.exit_code == 0
        assert "BadToken" in result.stdout
        assert "ERROR: bad character input: '&'" in result.stdout


class TestRepl:
    def test_default_command_runs_repl(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, [], input="1 + 2\n\n")
        assert result.exit_code == 0
        assert "3" in result.stdout

    def test_repl_command_with_tree(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl", "--show-tree"], input="4\n\n")
        assert result.exit_code == 0
        assert "NumberToken 4" in result.stdout

    def test_repl_stops_at_end_of_input(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["repl"], input="6 / 3\n")
        assert result.exit_code == 0
        assert "2" in result.stdout


class TestGlobalOptions:
    def test_version(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "minicalc version" in result.stdout
        assert get_version() in result.stdout

    def test_version_from_metadata(self) -> None:
        assert get_version()
        assert get_version() == __version__

    def test_missing_config(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(app, ["--config", str(tmp_path / "missing.toml"), "eval", "1"])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_config_prompt(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        config = tmp_path / "custom.toml"
        config.write_text('[repl]\nprompt = "calc> "\n')
        result = cli_runner.invoke(app, ["--config", str(config), "repl"], input="2 * 21\n\n")
        assert result.exit_code == 0
        assert "calc> " in result.stdout
        assert "42" in result.stdout
