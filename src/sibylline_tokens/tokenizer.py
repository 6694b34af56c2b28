"""Rule-driven tokenizer.

Scans text left to right. At every cursor position the rules in
:data:`RULES` are tried in order and the first one that matches consumes
its run. Grouped rules additionally split their run into sub-runs of
identical characters, so ``"!!?"`` becomes ``"!!"`` and ``"?"``.
"""

from __future__ import annotations

from dataclasses import dataclass
from itertools import groupby
from typing import Iterator

import regex

from .errors import UnrecognizedCharacter
from .spans import Span, TokenKind


@dataclass(frozen=True)
class Rule:
    """A scanning rule: what to match, how to tag it, whether to split runs."""

    kind: TokenKind
    pattern: regex.Pattern
    grouped: bool = False


# Order matters: FLOAT must be tried before INTEGER, SPUNCT/PUNCT before
# SEPAR (\p{Po} also covers "," "." "!" and friends).
RULES: tuple[Rule, ...] = (
    Rule(TokenKind.LETTER, regex.compile(r"\p{L}+")),
    Rule(TokenKind.FLOAT, regex.compile(r"[0-9]+[.,][0-9]+")),
    Rule(TokenKind.INTEGER, regex.compile(r"[0-9]+")),
    Rule(
        TokenKind.SPUNCT,
        regex.compile(r"[,\-:;\p{Ps}\p{Pe}\p{Pi}\p{Pf}]+"),
        grouped=True,
    ),
    Rule(TokenKind.PUNCT, regex.compile(r"[.!?]+"), grouped=True),
    Rule(TokenKind.SEPAR, regex.compile(r"[ \p{Sm}\p{Pc}\p{Po}\p{Pd}]+"), grouped=True),
    Rule(TokenKind.BREAK, regex.compile(r"(?:\r\n|\n|\r)+"), grouped=True),
)


def _identical_runs(run: str, start: int) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` offsets of each run of identical characters."""
    for _, group in groupby(run):
        end = start + sum(1 for _ in group)
        yield start, end
        start = end


def tokenize(text: str) -> list[Span]:
    """Split ``text`` into contiguous typed spans covering all of it.

    Args:
        text: Text to tokenize.

    Returns:
        Spans sorted by offset, each one starting where the previous ended.

    Raises:
        UnrecognizedCharacter: If no rule matches at some position.
    """
    tokens: list[Span] = []
    pos = 0
    length = len(text)

    while pos < length:
        for rule in RULES:
            match = rule.pattern.match(text, pos)
            if match is not None:
                break
        else:
            raise UnrecognizedCharacter(text, pos)

        if rule.grouped:
            tokens.extend(
                Span(start, end, rule.kind) for start, end in _identical_runs(match.group(), pos)
            )
        else:
            tokens.append(Span(pos, match.end(), rule.kind))
        pos = match.end()

    return tokens


class Tokenizer:
    """A text together with its lazily computed token sequence.

    The first access to :attr:`tokens` scans the text; later accesses return
    the cached tuple. The first access is not synchronized, so callers
    sharing an instance across threads should populate it up front.
    """

    __slots__ = ("text", "_tokens")

    def __init__(self, text: str) -> None:
        self.text = text
        self._tokens: tuple[Span, ...] | None = None

    @property
    def tokens(self) -> tuple[Span, ...]:
        if self._tokens is None:
            self._tokens = tuple(tokenize(self.text))
        return self._tokens

    @property
    def is_tokenized(self) -> bool:
        """Whether the token sequence has already been computed."""
        return self._tokens is not None
