"""
Interactive read-evaluate-print loop.

Each line is handled on its own: parse, optionally print the tree, then
either print the diagnostics or evaluate and print the result. Commands:

    #showTree   toggle syntax tree printing
    #cls        clear the screen

An empty line or end of input ends the session.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from rich.console import Console
from rich.style import Style
from rich.text import Text

from minicalc.core.config import ReplConfig
from minicalc.core.evaluator import evaluate
from minicalc.core.syntax.tree import SyntaxTree
from minicalc.printer import print_tree

logger = logging.getLogger(__name__)

SHOW_TREE_COMMAND = "#showTree"
CLEAR_COMMAND = "#cls"

DIVISION_BY_ZERO_MESSAGE = "ERROR: Division by zero"

ERROR_STYLE = Style(color="dark_red")


@dataclass
class LineResult:
    """Outcome of evaluating one line."""

    tree: SyntaxTree
    value: int | None = None
    diagnostics: list[str] = field(default_factory=list)
    fault: str | None = None

    @property
    def ok(self) -> bool:
        return self.value is not None


def evaluate_line(text: str) -> LineResult:
    """Parse ``text`` and evaluate it when it has no diagnostics.

    A division by zero is reported in ``fault`` instead of propagating; any
    other exception from the evaluator propagates.
    """
    tree = SyntaxTree.parse(text)
    if not tree.is_evaluable:
        return LineResult(tree=tree, diagnostics=list(tree.diagnostics))

    try:
        value = evaluate(tree.root)
    except ZeroDivisionError:
        logger.info("Evaluation fault for %r: division by zero", text)
        return LineResult(tree=tree, fault=DIVISION_BY_ZERO_MESSAGE)
    return LineResult(tree=tree, value=value)


class Repl:
    """Read-evaluate-print loop over a rich console."""

    def __init__(
        self,
        config: ReplConfig | None = None,
        console: Console | None = None,
        read_line: Callable[[str], str] | None = None,
    ) -> None:
        self.config = config or ReplConfig()
        self.console = console or Console(no_color=not self.config.color, highlight=False)
        self._read_line = read_line or self.console.input
        self.show_tree = self.config.show_tree

    def run(self) -> None:
        """Loop until an empty line or end of input."""
        while True:
            try:
                line = self._read_line(self.config.prompt)
            except (EOFError, KeyboardInterrupt):
                self.console.print()
                return

            if not line.strip():
                return

            self.handle_line(line)

    def handle_line(self, line: str) -> None:
        if line == SHOW_TREE_COMMAND:
            self.show_tree = not self.show_tree
            self.console.print(
                "SyntaxTree visualization enabled"
                if self.show_tree
                else "SyntaxTree visualization disabled"
            )
            return
        if line == CLEAR_COMMAND:
            self.console.clear()
            return

        result = evaluate_line(line)

        if self.show_tree:
            print_tree(result.tree.root, self.console)

        if result.ok:
            self.console.print(Text(str(result.value)))
        elif result.fault:
            self.console.print(Text(result.fault, style=ERROR_STYLE))
        else:
            for diagnostic in result.diagnostics:
                self.console.print(Text(diagnostic, style=ERROR_STYLE))
