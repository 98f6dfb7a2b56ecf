"""
Recursive descent parser for minicalc.

Grammar (precedence low to high):
    expression → term
    term       → factor (("+" | "-") factor)*
    factor     → primary (("*" | "/") primary)*
    primary    → "(" expression ")" | NUMBER

Operators of equal precedence are left-associative: the term and factor rules
loop instead of recursing. The parser never raises on bad input. When a token
does not match, a diagnostic is reported and a placeholder token is
synthesized so that parsing always completes with a best-effort tree. Parentheses
nested deeper than MAX_NESTING_DEPTH are reported and skipped.
"""

from __future__ import annotations

import logging

from minicalc.core.syntax.diagnostics import DiagnosticBag
from minicalc.core.syntax.facts import (
    FACTOR_PRECEDENCE,
    TERM_PRECEDENCE,
    binary_operator_precedence,
)
from minicalc.core.syntax.kinds import SyntaxKind
from minicalc.core.syntax.lexer import Lexer
from minicalc.core.syntax.nodes import (
    BinaryExpression,
    ExpressionSyntax,
    NumberExpression,
    ParenthesizedExpression,
)
from minicalc.core.syntax.token import SyntaxToken
from minicalc.core.syntax.tree import SyntaxTree

logger = logging.getLogger(__name__)

_SKIPPED_KINDS = (SyntaxKind.WHITESPACE_TOKEN, SyntaxKind.BAD_TOKEN)

MAX_NESTING_DEPTH = 100


class Parser:
    """Parses one line of text into a ``SyntaxTree``."""

    def __init__(self, text: str, diagnostics: DiagnosticBag | None = None) -> None:
        self._diagnostics = diagnostics if diagnostics is not None else DiagnosticBag()

        # Lex eagerly; whitespace and bad tokens never reach the grammar, but
        # the diagnostics for bad tokens stay in the bag.
        lexer = Lexer(text, self._diagnostics)
        self._tokens: list[SyntaxToken] = [t for t in lexer if t.kind not in _SKIPPED_KINDS]
        self._position = 0
        self._depth = 0
        self._tree: SyntaxTree | None = None
        logger.debug("Parser received %d tokens for %r", len(self._tokens), text)

    @property
    def diagnostics(self) -> DiagnosticBag:
        return self._diagnostics

    @property
    def tokens(self) -> tuple[SyntaxToken, ...]:
        return tuple(self._tokens)

    # -- Token cursor --

    def peek(self, offset: int = 0) -> SyntaxToken:
        idx = self._position + offset
        if idx < len(self._tokens):
            return self._tokens[idx]
        return self._tokens[-1]  # EOF

    @property
    def current(self) -> SyntaxToken:
        return self.peek(0)

    def next_token(self) -> SyntaxToken:
        tok = self.current
        self._position += 1
        return tok

    def match(self, kind: SyntaxKind) -> SyntaxToken:
        """Consume a token of ``kind``, or report it missing and synthesize one."""
        if self.current.kind == kind:
            return self.next_token()

        self._diagnostics.report_unexpected_token(self.current.kind, kind)
        return SyntaxToken(kind=kind, position=self.current.position)

    # -- Grammar rules --

    def parse(self) -> SyntaxTree:
        """Parse the whole input. Repeated calls return the same tree."""
        if self._tree is None:
            expression = self.parse_expression()
            end_of_file_token = self.match(SyntaxKind.END_OF_FILE_TOKEN)
            self._tree = SyntaxTree(
                diagnostics=self._diagnostics.freeze(),
                root=expression,
                end_of_file_token=end_of_file_token,
            )
            logger.debug("Parsed tree with %d diagnostics", len(self._diagnostics))
        return self._tree

    def parse_expression(self) -> ExpressionSyntax:
        return self.parse_term()

    def parse_term(self) -> ExpressionSyntax:
        """factor (('+' | '-') factor)*"""
        left = self.parse_factor()
        while binary_operator_precedence(self.current.kind) == TERM_PRECEDENCE:
            operator_token = self.next_token()
            right = self.parse_factor()
            left = BinaryExpression(left=left, operator_token=operator_token, right=right)
        return left

    def parse_factor(self) -> ExpressionSyntax:
        """primary (('*' | '/') primary)*"""
        left = self.parse_primary()
        while binary_operator_precedence(self.current.kind) == FACTOR_PRECEDENCE:
            operator_token = self.next_token()
            right = self.parse_primary()
            left = BinaryExpression(left=left, operator_token=operator_token, right=right)
        return left

    def parse_primary(self) -> ExpressionSyntax:
        """'(' expression ')' | NUMBER"""
        if self.current.kind == SyntaxKind.OPEN_PARENTHESIS_TOKEN:
            if self._depth >= MAX_NESTING_DEPTH:
                return self._skip_nested_group()

            open_token = self.next_token()
            self._depth += 1
            try:
                expression = self.parse_expression()
            finally:
                self._depth -= 1
            close_token = self.match(SyntaxKind.CLOSE_PARENTHESIS_TOKEN)
            return ParenthesizedExpression(
                open_parenthesis_token=open_token,
                expression=expression,
                close_parenthesis_token=close_token,
            )

        number_token = self.match(SyntaxKind.NUMBER_TOKEN)
        return NumberExpression(number_token=number_token)

    def _skip_nested_group(self) -> ExpressionSyntax:
        """Report a group nested past MAX_NESTING_DEPTH and skip to its closing parenthesis.

        Returns a placeholder number so the enclosing rules can continue.
        """
        open_token = self.next_token()
        self._diagnostics.report_nesting_too_deep(MAX_NESTING_DEPTH)

        balance = 1
        while balance and self.current.kind != SyntaxKind.END_OF_FILE_TOKEN:
            kind = self.next_token().kind
            if kind == SyntaxKind.OPEN_PARENTHESIS_TOKEN:
                balance += 1
            elif kind == SyntaxKind.CLOSE_PARENTHESIS_TOKEN:
                balance -= 1

        placeholder = SyntaxToken(kind=SyntaxKind.NUMBER_TOKEN, position=open_token.position)
        return NumberExpression(number_token=placeholder)
