"""Tests for graphemes.py"""
from __future__ import annotations

from fontifier.graphemes import decoratable, is_letter_or_number, is_pictographic, segment

FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
FLAG = "\U0001F1FA\U0001F1F8"


class TestSegment:
    def test_empty(self):
        assert segment("") == []
        assert segment(None) == []

    def test_combining_mark_stays_with_base(self):
        assert segment("e\u0301x") == ["e\u0301", "x"]

    def test_zwj_sequence_is_one_grapheme(self):
        assert segment(f"a{FAMILY}b") == ["a", FAMILY, "b"]

    def test_flag_is_one_grapheme(self):
        assert segment(FLAG) == [FLAG]

    def test_codepoint_mode(self):
        assert segment("e\u0301x", "codepoint") == ["e", "\u0301", "x"]

    def test_joined_segments_round_trip(self):
        text = f"Hi {FAMILY} {FLAG} cafe\u0301!"
        assert "".join(segment(text)) == text


class TestGuards:
    def test_letters_and_digits(self):
        assert is_letter_or_number("a")
        assert is_letter_or_number("Ж")
        assert is_letter_or_number("7")
        assert is_letter_or_number("𝓐")

    def test_non_letters(self):
        assert not is_letter_or_number("!")
        assert not is_letter_or_number(" ")
        assert not is_letter_or_number("")
        assert not is_letter_or_number("😀")

    def test_pictographic(self):
        assert is_pictographic("😀")
        assert is_pictographic(FAMILY)
        assert not is_pictographic("a")

    def test_decoratable(self):
        assert decoratable("a")
        assert decoratable("3")
        assert not decoratable("😀")
        assert not decoratable(FAMILY)
        assert not decoratable("-")
