"""
minicalc - an interactive integer calculator.

Text is lexed into tokens, parsed into a syntax tree and reduced to an Int32
value.

Usage:
    from minicalc import evaluate, parse

    tree = parse("(1 + 2) * 3")
    if not tree.diagnostics:
        result = evaluate(tree.root)
        # result == 9
"""

from __future__ import annotations

from ._version import __version__
from .core.errors import ConfigError, InvariantViolation, MinicalcError, UnreachableNodeError
from .core.evaluator import Evaluator, evaluate
from .core.syntax.tree import SyntaxTree


def parse(text: str) -> SyntaxTree:
    """Parse a line of text into a syntax tree. Never raises for bad input."""
    return SyntaxTree.parse(text)


__all__ = [
    "__version__",
    "ConfigError",
    "Evaluator",
    "InvariantViolation",
    "MinicalcError",
    "SyntaxTree",
    "UnreachableNodeError",
    "evaluate",
    "parse",
]
