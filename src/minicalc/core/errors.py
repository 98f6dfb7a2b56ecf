"""
Error types for minicalc.

Lexing and parsing problems are never raised: they are reported as
diagnostics on the syntax tree. The exceptions here cover programming errors
and configuration problems.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from minicalc.core.syntax.kinds import SyntaxKind


class MinicalcError(Exception):
    """Base exception for all minicalc errors."""

    def __init__(self, message: str, kind: SyntaxKind | None = None):
        self.message = message
        self.kind = kind
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with the offending syntax kind if available."""
        if self.kind is not None:
            return f"{self.message} ({self.kind})"
        return self.message


class InvariantViolation(MinicalcError):
    """
    Raised when an internal invariant does not hold.

    This always indicates a bug (for example a parser/evaluator grammar
    mismatch), never bad user input.
    """

    pass


class UnreachableNodeError(InvariantViolation):
    """
    Raised when the evaluator meets a node or operator it has no rule for.

    Examples:
    - A reserved UnaryExpression node
    - A binary operator token that is not + - * /
    - A number token whose value failed to parse
    """

    pass


class ConfigError(MinicalcError):
    """
    Raised when a configuration file cannot be used.

    Examples:
    - An explicitly requested file does not exist
    - Invalid TOML syntax
    - Unknown or mistyped settings
    """

    pass
