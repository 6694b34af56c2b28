"""Splicing coarser spans over a token sequence."""

from __future__ import annotations

import logging

from .spans import Span

logger = logging.getLogger(__name__)


def merge_span(tokens: list[Span], override: Span) -> list[Span]:
    """Replace the run of tokens that ``override`` covers with ``override``.

    The run starts at the first token beginning at ``override.start`` and
    ends at the first token ending at ``override.end``. If either boundary
    does not coincide with a token boundary the override is dropped and
    ``tokens`` is left untouched.

    Args:
        tokens: Contiguous token sequence, modified in place.
        override: Span to splice in.

    Returns:
        ``tokens``, for chaining.
    """
    first = next((i for i, token in enumerate(tokens) if token.start == override.start), None)
    last = next((i for i, token in enumerate(tokens) if token.end == override.end), None)

    if first is None or last is None:
        logger.debug(
            "Dropping unaligned %s span [%d, %d)", override.kind, override.start, override.end
        )
        return tokens

    tokens[first : last + 1] = [override]
    return tokens
