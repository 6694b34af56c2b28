"""Tests for the helper registry."""

import pytest

from sibylline_tokens.helpers import (
    DEFAULT_HELPERS,
    EmailHelper,
    UrlHelper,
    get_helper,
    list_helpers,
    register_helper,
)
from sibylline_tokens.helpers.base import Helper, PatternHelper
from sibylline_tokens.spans import Span


class TestRegistry:
    """Tests for helper registration and lookup."""

    def test_list_helpers_includes_builtins(self):
        helpers = list_helpers()
        for name in ("urls", "emails", "abbrevs", "time"):
            assert name in helpers

    def test_defaults_are_registered(self):
        assert isinstance(DEFAULT_HELPERS, tuple)
        for name in DEFAULT_HELPERS:
            assert get_helper(name).name == name

    def test_get_helper_email(self):
        assert isinstance(get_helper("emails"), EmailHelper)

    def test_get_helper_url(self):
        assert isinstance(get_helper("urls"), UrlHelper)

    def test_get_helper_unknown_raises(self):
        with pytest.raises(ValueError, match="Unknown helper"):
            get_helper("nonexistent")

    def test_register_custom_helper(self):
        @register_helper
        class CustomHelper(Helper):
            name = "_test_custom"
            kind = "custom"

            def parse(self, text):
                return [Span(0, len(text), self.kind)] if text else []

        try:
            helper = get_helper("_test_custom")
            assert isinstance(helper, CustomHelper)
            assert helper("abc") == [Span(0, 3, "custom")]
            assert "_test_custom" in list_helpers()
        finally:
            # Clean up registry
            from sibylline_tokens.helpers import _REGISTRY

            _REGISTRY.pop("_test_custom", None)

    def test_register_instance(self, temp_helpers):
        helper = temp_helpers("_test_digits", r"\d+", "digits")
        assert get_helper("_test_digits") is helper


class TestPatternHelper:
    def test_kind_defaults_to_name(self):
        assert PatternHelper(name="word", pattern=r"\w+").kind == "word"

    def test_requires_pattern(self):
        with pytest.raises(ValueError, match="needs both a name and a pattern"):
            PatternHelper(name="empty")

    def test_skips_empty_matches(self):
        helper = PatternHelper(name="xs", pattern="x*")
        assert helper.parse("ab") == []
        assert helper.parse("axxb") == [Span(1, 3, "xs")]

    def test_callable(self):
        helper = PatternHelper(name="digits", pattern=r"\d+", kind="num")
        assert helper("a 12 b 3") == [Span(2, 4, "num"), Span(7, 8, "num")]
