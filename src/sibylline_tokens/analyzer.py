"""Tokenize text and layer helper spans over the tokens."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .config import HelperConfig
from .helpers import DEFAULT_HELPERS, Helper, get_helper
from .merge import merge_span
from .spans import Span
from .tokenizer import Tokenizer

logger = logging.getLogger(__name__)


def analyze(text: str, helpers: Iterable[str] = DEFAULT_HELPERS) -> list[Span]:
    """Tokenize ``text`` and merge in the spans of each named helper.

    Helpers run in the given order, each against the original text, and
    their spans are merged one at a time into the running token sequence.
    An earlier merge can therefore hide the boundaries a later span needs,
    in which case that later span is dropped.

    Args:
        text: Text to analyze.
        helpers: Names of registered helpers, in application order.

    Returns:
        Contiguous spans covering the whole text.

    Raises:
        UnrecognizedCharacter: If the text cannot be tokenized.
        ValueError: If a helper name is not registered.
    """
    return Analyzer(helpers=helpers).analyze(text)


class Analyzer:
    """Tokenizer plus an ordered set of helpers.

    The helper order is resolved once, at construction: an explicit
    ``helpers`` argument wins, then the config's ``order``, then
    :data:`DEFAULT_HELPERS`. Names are looked up among the config's
    pattern helpers first and the global registry second.
    """

    def __init__(
        self,
        helpers: Iterable[str] | None = None,
        config: HelperConfig | None = None,
    ):
        """Initialize the analyzer.

        Args:
            helpers: Helper names in application order.
            config: Optional helper config supplying extra pattern helpers
                    and a default order.

        Raises:
            ValueError: If a helper name is not known.
        """
        local = config.get_helpers() if config is not None else {}

        if helpers is not None:
            names = tuple(helpers)
        elif config is not None and config.order is not None:
            names = config.order
        else:
            names = DEFAULT_HELPERS

        self._helpers: tuple[Helper, ...] = tuple(
            local[name] if name in local else get_helper(name) for name in names
        )

    @property
    def helpers(self) -> tuple[str, ...]:
        """Names of the helpers applied, in order."""
        return tuple(helper.name for helper in self._helpers)

    def analyze(self, text: str) -> list[Span]:
        """Tokenize ``text`` and merge in every helper's spans."""
        return self.analyze_tokenizer(Tokenizer(text))

    def analyze_tokenizer(self, tokenizer: Tokenizer) -> list[Span]:
        """Like :meth:`analyze`, reusing the tokens cached on ``tokenizer``."""
        spans = list(tokenizer.tokens)
        for helper in self._helpers:
            found = helper.parse(tokenizer.text)
            logger.debug("Helper %r found %d span(s)", helper.name, len(found))
            for span in found:
                merge_span(spans, span)
        return spans
