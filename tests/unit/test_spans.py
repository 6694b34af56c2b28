"""Tests for span values and the coverage check."""

import dataclasses

import pytest

from sibylline_tokens.errors import UnrecognizedCharacter
from sibylline_tokens.spans import Span, TokenKind, is_contiguous


class TestSpan:
    def test_length_and_slice(self):
        span = Span(4, 9, "url")
        assert len(span) == 5
        assert span.slice("see https now") == "https"

    def test_immutable(self):
        span = Span(0, 1, TokenKind.LETTER)
        with pytest.raises(dataclasses.FrozenInstanceError):
            span.start = 2

    def test_empty_span_rejected(self):
        with pytest.raises(ValueError, match="Invalid span"):
            Span(3, 3, "x")

    def test_reversed_span_rejected(self):
        with pytest.raises(ValueError):
            Span(5, 2, "x")

    def test_negative_start_rejected(self):
        with pytest.raises(ValueError):
            Span(-1, 2, "x")

    def test_ordering_by_start(self):
        spans = [Span(4, 5, "b"), Span(0, 2, "a"), Span(2, 4, "c")]
        assert [s.start for s in sorted(spans)] == [0, 2, 4]

    def test_kind_compares_to_string(self):
        assert TokenKind.FLOAT == "float"
        assert str(TokenKind.BREAK) == "break"
        assert Span(0, 2, TokenKind.INTEGER) == Span(0, 2, "integer")


class TestIsContiguous:
    def test_contiguous(self):
        assert is_contiguous([Span(0, 2, "a"), Span(2, 3, "b")], 3)

    def test_empty(self):
        assert is_contiguous([], 0)
        assert not is_contiguous([], 1)

    def test_gap(self):
        assert not is_contiguous([Span(0, 2, "a"), Span(3, 4, "b")], 4)

    def test_overlap(self):
        assert not is_contiguous([Span(0, 2, "a"), Span(1, 3, "b")], 3)

    def test_short_of_length(self):
        assert not is_contiguous([Span(0, 2, "a")], 3)


class TestUnrecognizedCharacterError:
    def test_rendering(self):
        error = UnrecognizedCharacter("ab\x00", 2)
        assert str(error) == 'Could not recognize character "\x00" @ 2'
        assert error.character == "\x00"
