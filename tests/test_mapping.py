"""Tests for mapping.py"""
from __future__ import annotations

from fontifier.graphemes import segment
from fontifier.mapping import (
    THIN,
    apply_combining,
    apply_map,
    lookup,
    sanitize_visible,
    spaced,
    thin_space,
    weave,
)
from fontifier.rng import make_rng

X_BELOW = "\u0353"
FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F467"


class TestLookup:
    def test_exact_then_lower_then_upper(self):
        assert lookup({"a": "y", "A": "x"}, "a") == "y"
        assert lookup({"A": "x"}, "a") == "x"
        assert lookup({"a": "y"}, "A") == "y"

    def test_unmapped_passes_through(self):
        assert lookup({}, "?") == "?"
        assert lookup({"a": "b"}, "\U0001F600") == "\U0001F600"


class TestApplyMap:
    def test_empty(self):
        assert apply_map("", {"a": "b"}) == ""
        assert apply_map(None, {"a": "b"}) == ""

    def test_maps_and_keeps_emoji(self):
        assert apply_map("ab\U0001F600", {"a": "1", "b": "2"}) == "12\U0001F600"

    def test_case_fallback(self):
        assert apply_map("Hi", {"h": "ℎ", "I": "𝐈"}) == "ℎ𝐈"

    def test_unmapped_characters_are_not_normalized(self):
        # OHM SIGN, ANGSTROM SIGN and a CJK compatibility ideograph all change under NFC
        text = "\u2126\u212b\uf900e\u0301"
        assert apply_map(text, {"a": "b"}) == text

    def test_mapped_strings_are_kept_as_given(self):
        assert apply_map("x", {"x": "e\u0301"}) == "e\u0301"


class TestHelpers:
    def test_apply_combining_only_marks_letters(self):
        out = apply_combining("ab\U0001F600", (X_BELOW,), make_rng(1), 1, 2)
        assert len(segment(out)) == 3
        assert out.endswith("\U0001F600")
        assert 2 <= out.count(X_BELOW) <= 4

    def test_apply_combining_is_seeded(self):
        marks = (X_BELOW, "\u0354", "\u0355")
        assert apply_combining("hello", marks, make_rng(9)) == apply_combining("hello", marks, make_rng(9))

    def test_weave_cycles_and_skips_spaces(self):
        assert weave("ab c", ("1", "2")) == "a1b2 c1"
        assert weave("", ("1",)) == ""

    def test_weave_only_marks_letters_and_digits(self):
        assert weave("a!1", ("1", "2")) == "a1!12"
        assert weave(FAMILY + "a", ("\u0307",)) == FAMILY + "a\u0307"

    def test_spaced_keeps_graphemes(self):
        assert spaced("e\u0301x", "|") == "e\u0301|x"

    def test_thin_space(self):
        assert thin_space("x") == THIN + "x" + THIN

    def test_sanitize_strips_invisibles(self):
        assert sanitize_visible("a\u200bb\u200dc\x07") == "abc"

    def test_sanitize_keeps_zwj_emoji(self):
        assert sanitize_visible("a" + FAMILY + "b") == "a" + FAMILY + "b"

    def test_sanitize_clamps_mark_stacks(self):
        assert sanitize_visible("a" + X_BELOW * 5) == "a" + X_BELOW * 2

    def test_sanitize_never_truncates(self):
        assert sanitize_visible("word " * 80) == "word " * 80
        assert sanitize_visible("") == ""
