"""Built-in pattern helpers."""

import regex

from .base import PatternHelper


class UrlHelper(PatternHelper):
    """Web addresses with a scheme (``https://...``) or a ``www.`` prefix."""

    name = "urls"
    kind = "url"
    pattern = (
        r"\b(?:[\w-]+://?|www[.])[^\s()<>]+"
        r"(?:\([\w\d]+\)|(?:[^[:punct:]\s]|/))"
    )
    flags = regex.IGNORECASE


class EmailHelper(PatternHelper):
    """E-mail addresses such as ``john@example.com``."""

    name = "emails"
    kind = "email"
    pattern = r"[\p{L}\d._%+-]+@[\p{L}\d-]+(?:\.[\p{L}\d-]+)*\.\p{L}{2,}"


class AbbrevHelper(PatternHelper):
    """Dotted single-letter abbreviations such as ``e.g.`` or ``U.S.A.``"""

    name = "abbrevs"
    kind = "abbrev"
    pattern = r"\b\p{L}(?:\.\p{L})+\."


class TimeHelper(PatternHelper):
    """24-hour clock times: ``9:05``, ``23:59``, ``07:30:15``."""

    name = "time"
    kind = "time"
    pattern = r"\b(?:[01]?\d|2[0-3]):[0-5]\d(?::[0-5]\d)?\b"
