"""Sibylline Tokens: typed-span tokenizer with pluggable helper recognizers."""

from .analyzer import Analyzer, analyze
from .config import HelperConfig
from .errors import TokenizerError, UnrecognizedCharacter
from .helpers import (
    DEFAULT_HELPERS,
    Helper,
    PatternHelper,
    get_helper,
    list_helpers,
    register_helper,
)
from .merge import merge_span
from .spans import Span, TokenKind, is_contiguous
from .tokenizer import RULES, Rule, Tokenizer, tokenize

__all__ = [
    "Analyzer",
    "analyze",
    "HelperConfig",
    "TokenizerError",
    "UnrecognizedCharacter",
    "DEFAULT_HELPERS",
    "Helper",
    "PatternHelper",
    "get_helper",
    "list_helpers",
    "register_helper",
    "merge_span",
    "Span",
    "TokenKind",
    "is_contiguous",
    "RULES",
    "Rule",
    "Tokenizer",
    "tokenize",
]
