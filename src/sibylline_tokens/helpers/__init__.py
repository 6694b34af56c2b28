"""Helper registry.

Helpers are registered at import time and looked up by name.
Third parties can register custom helpers via register_helper().
"""

from __future__ import annotations

from .base import Helper, PatternHelper

_REGISTRY: dict[str, Helper] = {}

DEFAULT_HELPERS: tuple[str, ...] = ("urls", "emails", "abbrevs", "time")
"""Helpers applied by ``analyze`` when the caller does not choose, in order."""


def register_helper(helper: Helper | type[Helper]) -> Helper | type[Helper]:
    """Register a helper instance or class. Can be used as a class decorator.

    Classes are instantiated without arguments.
    """
    instance = helper() if isinstance(helper, type) else helper
    _REGISTRY[instance.name] = instance
    return helper


def get_helper(name: str) -> Helper:
    """Look up a registered helper by name.

    Raises:
        ValueError: If the helper name is not registered.
    """
    if name not in _REGISTRY:
        available = ", ".join(sorted(_REGISTRY.keys()))
        raise ValueError(f"Unknown helper {name!r}. Available helpers: {available}")
    return _REGISTRY[name]


def list_helpers() -> list[str]:
    """Return sorted list of registered helper names."""
    return sorted(_REGISTRY.keys())


# Register built-in helpers
from .builtin import AbbrevHelper, EmailHelper, TimeHelper, UrlHelper  # noqa: E402

register_helper(UrlHelper)
register_helper(EmailHelper)
register_helper(AbbrevHelper)
register_helper(TimeHelper)

__all__ = [
    "DEFAULT_HELPERS",
    "Helper",
    "PatternHelper",
    "register_helper",
    "get_helper",
    "list_helpers",
    "UrlHelper",
    "EmailHelper",
    "AbbrevHelper",
    "TimeHelper",
]
