"""
Diagnostics collector shared by the lexer and the parser.

Diagnostics are plain, human readable strings. Their wording is part of the
observable behaviour, so every message is produced here.
"""

from __future__ import annotations

from collections.abc import Iterator

from minicalc.core.syntax.kinds import SyntaxKind


class DiagnosticBag:
    """Ordered, append-only log of error messages."""

    def __init__(self) -> None:
        self._messages: list[str] = []

    def __iter__(self) -> Iterator[str]:
        return iter(self._messages)

    def __len__(self) -> int:
        return len(self._messages)

    def __bool__(self) -> bool:
        return bool(self._messages)

    def __repr__(self) -> str:
        return f"DiagnosticBag({self._messages!r})"

    def freeze(self) -> tuple[str, ...]:
        """Read-only snapshot of the messages collected so far."""
        return tuple(self._messages)

    def report_bad_character(self, character: str) -> None:
        self._messages.append(f"ERROR: bad character input: '{character}'")

    def report_invalid_number(self, text: str) -> None:
        self._messages.append(f"ERROR: The number {text} is not a valid Int32")

    def report_unexpected_token(self, actual: SyntaxKind, expected: SyntaxKind) -> None:
        self._messages.append(f"ERROR: Unexpected token <{actual}>, expected <{expected}>")

    def report_nesting_too_deep(self, limit: int) -> None:
        self._messages.append(f"ERROR: Parentheses nested deeper than {limit} levels")
