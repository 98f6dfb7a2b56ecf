"""
The result of parsing one line of text.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from minicalc.core.syntax.nodes import ExpressionSyntax
from minicalc.core.syntax.token import SyntaxToken


class SyntaxTree(BaseModel):
    """
    Root expression, trailing end-of-file token and every diagnostic.

    A tree with diagnostics may contain synthesized placeholder tokens and
    must not be evaluated.
    """

    diagnostics: tuple[str, ...] = Field(default=(), description="Lexer then parser messages")
    root: ExpressionSyntax
    end_of_file_token: SyntaxToken

    model_config = ConfigDict(frozen=True)

    @classmethod
    def parse(cls, text: str) -> SyntaxTree:
        """Lex and parse ``text``. Never raises for malformed input."""
        from minicalc.core.syntax.parser import Parser

        return Parser(text).parse()

    @property
    def is_evaluable(self) -> bool:
        return not self.diagnostics
