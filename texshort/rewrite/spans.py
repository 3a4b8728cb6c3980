"""
Index spans produced by the structural rewriters.

All indices are inclusive positions into a text buffer (a Python ``str``,
so one index per code point).
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class Direction(Enum):
    """Scan direction for bracket matching."""

    RIGHT = "right"
    LEFT = "left"


class OperandKind(Enum):
    """How an operand of a division is delimited."""

    BRACKETED = "bracketed"  # adjacent character is a brace
    BARE = "bare"  # runs to whitespace or an enclosing brace


class _Span(BaseModel):
    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_order(self):
        first, last = self.bounds()
        if first > last:
            raise ValueError(f"span start {first} is after end {last}")
        return self

    def bounds(self) -> tuple[int, int]:
        raise NotImplementedError


class BracketPair(_Span):
    """Matched ``{`` / ``}`` indices."""

    open: int = Field(ge=0, description="Index of the opening brace")
    close: int = Field(ge=0, description="Index of the matching closing brace")

    def bounds(self) -> tuple[int, int]:
        return self.open, self.close


class OperandSpan(_Span):
    """One side of a division, ``[start, end]`` inclusive."""

    start: int = Field(ge=0)
    end: int = Field(ge=0)
    kind: OperandKind

    def bounds(self) -> tuple[int, int]:
        return self.start, self.end

    def text_of(self, text: str) -> str:
        return text[self.start:self.end + 1]


class BlockRegion(_Span):
    """A ``prefix{ ... }`` region: prefix index through closing brace."""

    start: int = Field(ge=0, description="Index of the prefix character")
    end: int = Field(ge=0, description="Index of the matching closing brace")

    def bounds(self) -> tuple[int, int]:
        return self.start, self.end

    def interior(self, text: str) -> str:
        """Text strictly inside the braces."""
        return text[self.start + 2:self.end]
