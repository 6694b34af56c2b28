"""Base classes for helper recognizers."""

from __future__ import annotations

from abc import ABC, abstractmethod

import regex

from ..spans import Span


class Helper(ABC):
    """Abstract base class for helper recognizers.

    A helper reads the original text and returns coarser spans (an e-mail
    address, a URL) to be spliced over the token sequence. Spans should be
    returned in left-to-right order; they need not line up with token
    boundaries, unaligned ones are simply dropped when merged.
    """

    name: str = ""
    """Unique name the helper is registered and selected under."""

    kind: str = ""
    """Kind tag given to the spans this helper produces."""

    @abstractmethod
    def parse(self, text: str) -> list[Span]:
        """Return the spans recognized in ``text``."""
        ...

    def __call__(self, text: str) -> list[Span]:
        return self.parse(text)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, kind={self.kind!r})"


class PatternHelper(Helper):
    """Helper that tags every non-empty match of a regular expression.

    Subclasses set ``name``, ``kind`` and ``pattern`` as class attributes;
    ad-hoc helpers (for instance from a config file) pass them to the
    constructor instead.
    """

    pattern: str = ""
    flags: int = 0

    def __init__(
        self,
        name: str | None = None,
        pattern: str | None = None,
        kind: str | None = None,
        flags: int | None = None,
    ) -> None:
        if name is not None:
            self.name = name
        if pattern is not None:
            self.pattern = pattern
        if kind is not None:
            self.kind = kind
        if flags is not None:
            self.flags = flags
        if not self.name or not self.pattern:
            raise ValueError(f"{type(self).__name__} needs both a name and a pattern")
        if not self.kind:
            self.kind = self.name
        self._compiled = regex.compile(self.pattern, self.flags)

    def parse(self, text: str) -> list[Span]:
        return [
            Span(match.start(), match.end(), self.kind)
            for match in self._compiled.finditer(text)
            if match.end() > match.start()
        ]
