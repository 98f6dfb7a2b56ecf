"""
Expression node types for the minicalc syntax tree.

The node set is closed: ``ExpressionSyntax`` is the union of every node the
evaluator and the tree printer have to handle. Children are fixed in number
and order:

- NumberExpression: the number token
- ParenthesizedExpression: "(", inner expression, ")"
- BinaryExpression: left expression, operator token, right expression
- UnaryExpression: operator token, operand (reserved; the parser does not
  produce it yet)
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from minicalc.core.syntax.kinds import SyntaxKind
from minicalc.core.syntax.token import SyntaxToken


class NumberExpression(BaseModel):
    """An integer literal."""

    number_token: SyntaxToken

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.NUMBER_EXPRESSION

    def children(self) -> list[SyntaxNode]:
        return [self.number_token]

    def __str__(self) -> str:
        return str(self.number_token)


class ParenthesizedExpression(BaseModel):
    """An expression wrapped in parentheses."""

    open_parenthesis_token: SyntaxToken
    expression: ExpressionSyntax
    close_parenthesis_token: SyntaxToken

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.PARENTHESIZED_EXPRESSION

    def children(self) -> list[SyntaxNode]:
        return [self.open_parenthesis_token, self.expression, self.close_parenthesis_token]

    def __str__(self) -> str:
        return f"({self.expression})"


class BinaryExpression(BaseModel):
    """Binary operation: left op right."""

    left: ExpressionSyntax
    operator_token: SyntaxToken
    right: ExpressionSyntax

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.BINARY_EXPRESSION

    def children(self) -> list[SyntaxNode]:
        return [self.left, self.operator_token, self.right]

    def __str__(self) -> str:
        return f"{self.left} {self.operator_token} {self.right}"


class UnaryExpression(BaseModel):
    """Unary operation: op operand."""

    operator_token: SyntaxToken
    operand: ExpressionSyntax = Field(description="Expression the operator applies to")

    model_config = ConfigDict(frozen=True)

    @property
    def kind(self) -> SyntaxKind:
        return SyntaxKind.UNARY_EXPRESSION

    def children(self) -> list[SyntaxNode]:
        return [self.operator_token, self.operand]

    def __str__(self) -> str:
        return f"{self.operator_token}{self.operand}"


# ---------------------------------------------------------------------------
# Union types
# ---------------------------------------------------------------------------

ExpressionSyntax = NumberExpression | ParenthesizedExpression | BinaryExpression | UnaryExpression

SyntaxNode = SyntaxToken | ExpressionSyntax

# Rebuild models for recursive forward references
NumberExpression.model_rebuild()
ParenthesizedExpression.model_rebuild()
BinaryExpression.model_rebuild()
UnaryExpression.model_rebuild()
