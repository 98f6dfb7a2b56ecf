"""
Lexer for minicalc.

Converts an input line into syntax tokens, one token per call to
``Lexer.next_token``. Problems are reported to a ``DiagnosticBag``; the
lexer itself never raises.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterator

from minicalc.core.syntax.diagnostics import DiagnosticBag
from minicalc.core.syntax.kinds import SyntaxKind
from minicalc.core.syntax.token import SyntaxToken

logger = logging.getLogger(__name__)

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_NUMBER_RE = re.compile(r"\d+")
_WHITESPACE_RE = re.compile(r"\s+")

_SINGLE_CHAR_TOKENS: dict[str, SyntaxKind] = {
    "+": SyntaxKind.PLUS_TOKEN,
    "-": SyntaxKind.MINUS_TOKEN,
    "*": SyntaxKind.STAR_TOKEN,
    "/": SyntaxKind.SLASH_TOKEN,
    "(": SyntaxKind.OPEN_PARENTHESIS_TOKEN,
    ")": SyntaxKind.CLOSE_PARENTHESIS_TOKEN,
}


def parse_int32(text: str) -> int | None:
    """Parse a run of decimal digits, or return None if it is not a valid Int32.

    Only ASCII digits are accepted; other Unicode decimal digits still form a
    number token but fail here.
    """
    if not text.isascii():
        return None
    try:
        value = int(text)
    except ValueError:
        return None
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


class Lexer:
    """Stateful cursor over one line of text."""

    def __init__(self, text: str, diagnostics: DiagnosticBag | None = None) -> None:
        self._text = text
        self._position = 0
        self._diagnostics = diagnostics if diagnostics is not None else DiagnosticBag()

    @property
    def diagnostics(self) -> DiagnosticBag:
        return self._diagnostics

    @property
    def position(self) -> int:
        return self._position

    def __iter__(self) -> Iterator[SyntaxToken]:
        """Yield tokens up to and including the first end-of-file token."""
        while True:
            token = self.next_token()
            yield token
            if token.kind == SyntaxKind.END_OF_FILE_TOKEN:
                return

    def next_token(self) -> SyntaxToken:
        """Return the next token. At the end of input, keep returning end-of-file."""
        start = self._position
        text = self._text

        if start >= len(text):
            return SyntaxToken(kind=SyntaxKind.END_OF_FILE_TOKEN, position=start, text="")

        # Numbers
        m = _NUMBER_RE.match(text, start)
        if m:
            number_text = m.group(0)
            self._position = m.end()
            value = parse_int32(number_text)
            if value is None:
                self._diagnostics.report_invalid_number(number_text)
            return SyntaxToken(
                kind=SyntaxKind.NUMBER_TOKEN, position=start, text=number_text, value=value
            )

        # Whitespace
        m = _WHITESPACE_RE.match(text, start)
        if m:
            self._position = m.end()
            return SyntaxToken(kind=SyntaxKind.WHITESPACE_TOKEN, position=start, text=m.group(0))

        # Operators and parentheses
        c = text[start]
        self._position += 1
        kind = _SINGLE_CHAR_TOKENS.get(c)
        if kind is not None:
            return SyntaxToken(kind=kind, position=start, text=c)

        self._diagnostics.report_bad_character(c)
        return SyntaxToken(kind=SyntaxKind.BAD_TOKEN, position=start, text=c)


def tokenize(text: str) -> tuple[list[SyntaxToken], tuple[str, ...]]:
    """Lex a whole line.

    Returns every token, whitespace and bad tokens included, ending with the
    end-of-file token, together with the lexer's diagnostics.
    """
    lexer = Lexer(text)
    tokens = list(lexer)
    logger.debug("Lexed %d tokens with %d diagnostics", len(tokens), len(lexer.diagnostics))
    return tokens, lexer.diagnostics.freeze()
