"""
Tokens produced by the lexer.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from minicalc.core.syntax.kinds import SyntaxKind


class SyntaxToken(BaseModel):
    """A single lexical unit. Leaf of the syntax tree."""

    kind: SyntaxKind
    position: int = Field(ge=0, description="Offset of the first character in the source")
    text: str | None = Field(
        default=None, description="Raw slice consumed; None for synthesized tokens"
    )
    value: int | None = Field(default=None, description="Parsed Int32 for number tokens")

    model_config = ConfigDict(frozen=True)

    def children(self) -> list[SyntaxToken]:
        return []

    def __str__(self) -> str:
        return self.text or ""
