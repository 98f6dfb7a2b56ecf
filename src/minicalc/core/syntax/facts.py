"""Operator precedence table."""

from __future__ import annotations

from minicalc.core.syntax.kinds import SyntaxKind

TERM_PRECEDENCE = 1
FACTOR_PRECEDENCE = 2

_BINARY_PRECEDENCE: dict[SyntaxKind, int] = {
    SyntaxKind.STAR_TOKEN: FACTOR_PRECEDENCE,
    SyntaxKind.SLASH_TOKEN: FACTOR_PRECEDENCE,
    SyntaxKind.PLUS_TOKEN: TERM_PRECEDENCE,
    SyntaxKind.MINUS_TOKEN: TERM_PRECEDENCE,
}

# Unary operators bind tighter than any binary operator. The grammar does not
# use this yet: primary only accepts a number or a parenthesized expression.
_UNARY_PRECEDENCE: dict[SyntaxKind, int] = {
    SyntaxKind.PLUS_TOKEN: 3,
    SyntaxKind.MINUS_TOKEN: 3,
}


def binary_operator_precedence(kind: SyntaxKind) -> int:
    """Binding strength of ``kind`` as a binary operator, 0 if it is not one."""
    return _BINARY_PRECEDENCE.get(kind, 0)


def unary_operator_precedence(kind: SyntaxKind) -> int:
    """Binding strength of ``kind`` as a unary operator, 0 if it is not one."""
    return _UNARY_PRECEDENCE.get(kind, 0)
