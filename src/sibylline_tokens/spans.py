"""Typed character spans.

A span is a half-open ``[start, end)`` interval of code point offsets into
some text, tagged with a kind. Spans never hold the text itself; callers
resolve them against the string they were produced from.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TokenKind(str, Enum):
    """Kinds produced by the tokenizer.

    Helpers may tag spans with any other string (``"email"``, ``"url"``).
    """

    LETTER = "letter"
    FLOAT = "float"
    INTEGER = "integer"
    SPUNCT = "spunct"
    """In-sentence punctuation (``,`` ``-`` ``:`` ``;`` brackets, quotes)."""

    PUNCT = "punct"
    """Sentence-terminal punctuation (``.`` ``!`` ``?``)."""

    SEPAR = "separ"
    BREAK = "break"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True, order=True)
class Span:
    """An immutable ``[start, end)`` interval tagged with a kind."""

    start: int
    """First code point offset (inclusive)."""

    end: int
    """Last code point offset (exclusive)."""

    kind: str
    """A :class:`TokenKind` or a helper-defined tag."""

    def __post_init__(self) -> None:
        if self.start < 0 or self.start >= self.end:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def __len__(self) -> int:
        return self.end - self.start

    def slice(self, text: str) -> str:
        """Return the part of ``text`` this span covers."""
        return text[self.start : self.end]


def is_contiguous(spans: list[Span] | tuple[Span, ...], length: int) -> bool:
    """Check that ``spans`` tile ``[0, length)`` in order with no gaps or overlaps."""
    pos = 0
    for span in spans:
        if span.start != pos:
            return False
        pos = span.end
    return pos == length
