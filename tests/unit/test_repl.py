"""Tests for the interactive read-evaluate-print loop."""

from __future__ import annotations

import io
from collections.abc import Callable

import pytest
from rich.console import Console

from minicalc.core.config import ReplConfig
from minicalc.repl import DIVISION_BY_ZERO_MESSAGE, Repl, evaluate_line


def _scripted(lines: list[str]) -> Callable[[str], str]:
    remaining = list(lines)

    def read_line(prompt: str) -> str:
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    return read_line


def _run(lines: list[str], config: ReplConfig | None = None) -> str:
    buffer = io.StringIO()
    console = Console(file=buffer, width=120, color_system=None)
    Repl(config=config, console=console, read_line=_scripted(lines)).run()
    return buffer.getvalue()


class TestEvaluateLine:
    """Single-line evaluation."""

    def test_value(self) -> None:
        result = evaluate_line("1 + 2 * 3")
        assert result.ok
        assert result.value == 7
        assert result.diagnostics == []

    def test_zero_is_a_value(self) -> None:
        result = evaluate_line("1 - 1")
        assert result.ok
        assert result.value == 0

    def test_diagnostics_skip_evaluation(self) -> None:
        result = evaluate_line("1 +")
        assert not result.ok
        assert result.value is None
        assert result.diagnostics == [
            "ERROR: Unexpected token <EndOfFileToken>, expected <NumberToken>"
        ]

    def test_division_by_zero_is_a_fault(self) -> None:
        result = evaluate_line("5 / 0")
        assert not result.ok
        assert result.fault == DIVISION_BY_ZERO_MESSAGE
        assert result.diagnostics == []


class TestRepl:
    """The loop prints one line of output per input line."""

    def test_prints_results(self) -> None:
        output = _run(["1 + 2", "(1 + 2) * 3", ""])
        assert output.splitlines() == ["3", "9"]

    def test_empty_line_stops(self) -> None:
        output = _run(["", "1 + 1"])
        assert output == ""

    def test_whitespace_line_stops(self) -> None:
        output = _run(["   ", "1 + 1"])
        assert output == ""

    def test_end_of_input_stops(self) -> None:
        output = _run(["4"])
        assert output.splitlines()[0] == "4"

    def test_prints_diagnostics(self) -> None:
        output = _run(["1 & 2", ""])
        assert "ERROR: bad character input: '&'" in output
        assert "ERROR: Unexpected token <NumberToken>, expected <EndOfFileToken>" in output

    def test_division_by_zero_continues(self) -> None:
        output = _run(["5 / 0", "6 / 3", ""])
        assert output.splitlines() == [DIVISION_BY_ZERO_MESSAGE, "2"]

    def test_show_tree_toggle(self) -> None:
        output = _run(["#showTree", "1", "#showTree", "2", ""])
        lines = output.splitlines()
        assert lines[0] == "SyntaxTree visualization enabled"
        assert "└──NumberExpression" in lines
        assert "SyntaxTree visualization disabled" in lines
        assert lines[-1] == "2"

    def test_show_tree_from_config(self) -> None:
        output = _run(["5", ""], config=ReplConfig(show_tree=True))
        assert "    └──NumberToken 5" in output.splitlines()

    def test_clear_command(self, monkeypatch: pytest.MonkeyPatch) -> None:
        cleared: list[bool] = []
        monkeypatch.setattr(Console, "clear", lambda self, home=True: cleared.append(True))
        _run(["#cls", ""])
        assert cleared == [True]

    def test_prompt_is_passed_to_reader(self) -> None:
        prompts: list[str] = []

        def read_line(prompt: str) -> str:
            prompts.append(prompt)
            return ""

        console = Console(file=io.StringIO(), color_system=None)
        Repl(config=ReplConfig(prompt="calc> "), console=console, read_line=read_line).run()
        assert prompts == ["calc> "]
