"""
Syntax layer: tokens, lexer, syntax nodes, parser and the syntax tree.

Usage:
    from minicalc.core.syntax import SyntaxTree

    tree = SyntaxTree.parse("1 + 2 * 3")
    tree.diagnostics  # ()
"""

from minicalc.core.syntax.diagnostics import DiagnosticBag
from minicalc.core.syntax.kinds import SyntaxKind
from minicalc.core.syntax.lexer import Lexer, tokenize
from minicalc.core.syntax.nodes import (
    BinaryExpression,
    ExpressionSyntax,
    NumberExpression,
    ParenthesizedExpression,
    SyntaxNode,
    UnaryExpression,
)
from minicalc.core.syntax.parser import Parser
from minicalc.core.syntax.token import SyntaxToken
from minicalc.core.syntax.tree import SyntaxTree

__all__ = [
    "BinaryExpression",
    "DiagnosticBag",
    "ExpressionSyntax",
    "Lexer",
    "NumberExpression",
    "ParenthesizedExpression",
    "Parser",
    "SyntaxKind",
    "SyntaxNode",
    "SyntaxToken",
    "SyntaxTree",
    "UnaryExpression",
    "tokenize",
]
