"""Syntax kinds shared by tokens and tree nodes."""

from __future__ import annotations

from enum import StrEnum


class SyntaxKind(StrEnum):
    """
    Tags for tokens and expression nodes.

    Values are the names shown in diagnostics and tree dumps, e.g.
    ``str(SyntaxKind.NUMBER_TOKEN) == "NumberToken"``.
    """

    # Tokens
    BAD_TOKEN = "BadToken"
    END_OF_FILE_TOKEN = "EndOfFileToken"
    WHITESPACE_TOKEN = "WhiteSpaceToken"
    NUMBER_TOKEN = "NumberToken"
    OPEN_PARENTHESIS_TOKEN = "OpenParenthesisToken"
    CLOSE_PARENTHESIS_TOKEN = "CloseParenthesisToken"
    PLUS_TOKEN = "PlusToken"
    MINUS_TOKEN = "MinusToken"
    STAR_TOKEN = "StarToken"
    SLASH_TOKEN = "SlashToken"

    # Expressions
    NUMBER_EXPRESSION = "NumberExpression"
    PARENTHESIZED_EXPRESSION = "ParenthesizedExpression"
    BINARY_EXPRESSION = "BinaryExpression"
    UNARY_EXPRESSION = "UnaryExpression"  # reserved, not produced by the parser
