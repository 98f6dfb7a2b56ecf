"""
Expression evaluator for minicalc.

Walks a syntax tree and reduces it to an Int32. The caller must only pass
trees whose diagnostics are empty; the evaluator does not check.
"""

from __future__ import annotations

from minicalc.core.errors import UnreachableNodeError
from minicalc.core.syntax.kinds import SyntaxKind
from minicalc.core.syntax.nodes import (
    BinaryExpression,
    ExpressionSyntax,
    NumberExpression,
    ParenthesizedExpression,
)

_INT32_MODULUS = 2**32
_INT32_SIGN_BIT = 2**31


def wrap_int32(value: int) -> int:
    """Wrap an integer into the signed 32-bit range (two's complement)."""
    value %= _INT32_MODULUS
    if value >= _INT32_SIGN_BIT:
        value -= _INT32_MODULUS
    return value


def truncating_divide(left: int, right: int) -> int:
    """Integer division rounding toward zero. Raises ZeroDivisionError for right == 0."""
    quotient = abs(left) // abs(right)
    if (left < 0) != (right < 0):
        return -quotient
    return quotient


class Evaluator:
    """Reduces an expression tree to a value."""

    def __init__(self, root: ExpressionSyntax) -> None:
        self._root = root

    def evaluate(self) -> int:
        """Evaluate the tree.

        Raises:
            ZeroDivisionError: If a division has a zero divisor.
            UnreachableNodeError: If the tree holds a node or operator with no
                evaluation rule.
        """
        # Post-order walk over an explicit stack; recursion depth stays constant.
        values: list[int] = []
        stack: list[tuple[ExpressionSyntax, bool]] = [(self._root, False)]

        while stack:
            node, children_done = stack.pop()

            if isinstance(node, NumberExpression):
                values.append(self._number_value(node))
            elif isinstance(node, ParenthesizedExpression):
                stack.append((node.expression, False))
            elif isinstance(node, BinaryExpression):
                if children_done:
                    right = values.pop()
                    left = values.pop()
                    values.append(self._apply_binary(node.operator_token.kind, left, right))
                else:
                    stack.append((node, True))
                    stack.append((node.right, False))
                    stack.append((node.left, False))
            else:
                raise UnreachableNodeError("Unexpected node found", getattr(node, "kind", None))

        return values.pop()

    @staticmethod
    def _number_value(node: NumberExpression) -> int:
        value = node.number_token.value
        if value is None:
            raise UnreachableNodeError(
                f"Number token {node.number_token.text!r} has no value",
                node.number_token.kind,
            )
        return value

    @staticmethod
    def _apply_binary(op: SyntaxKind, left: int, right: int) -> int:
        if op == SyntaxKind.PLUS_TOKEN:
            return wrap_int32(left + right)
        if op == SyntaxKind.MINUS_TOKEN:
            return wrap_int32(left - right)
        if op == SyntaxKind.STAR_TOKEN:
            return wrap_int32(left * right)
        if op == SyntaxKind.SLASH_TOKEN:
            return wrap_int32(truncating_divide(left, right))

        raise UnreachableNodeError("Unexpected binary operator found", op)


def evaluate(root: ExpressionSyntax) -> int:
    """Evaluate an expression tree. See ``Evaluator.evaluate``."""
    return Evaluator(root).evaluate()
