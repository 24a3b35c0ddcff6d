"""Tests for engine.py"""
from __future__ import annotations

import unicodedata

import pytest

from fontifier.engine import Engine, render
from fontifier.rules import RuleSet, resolve_rules
from fontifier.styles import MappedStyle, TransformStyle

GRIN = "\U0001F600"
FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F467"
WAVE = "\U0001F44B\U0001F3FD"
# each of these is rewritten by NFC: OHM SIGN, ANGSTROM SIGN, CJK compatibility ideograph
COMPAT = "\u2126\u212b\uf900"


def _rng_echo(text, rng):
    return f"{text}:{rng():.12f}"


class TestRender:
    def test_pure_style_returns_base(self):
        style = MappedStyle(name="Plain", category="Featured Styles", pure=True, table={"a": "b"})
        for bump in range(5):
            assert render(style, "aaaa", bump=bump, global_seed=9) == "bbbb"

    def test_self_decorating_transform_is_normalized(self):
        style = TransformStyle(name="T", fn=lambda t, rng: "e\u0301", self_decorating=True)
        assert render(style, "x") == "\u00e9"

    def test_transform_gets_seeded_rng(self):
        style = TransformStyle(name="Echo", fn=_rng_echo, self_decorating=True)
        a = render(style, "hi", bump=0, ordinal=0, global_seed=1)
        assert a == render(style, "hi", bump=0, ordinal=0, global_seed=1)
        assert a != render(style, "hi", bump=1, ordinal=0, global_seed=1)
        assert a != render(style, "hi", bump=0, ordinal=0, global_seed=2)

    def test_explicit_rules_are_used(self):
        style = MappedStyle(name="Medieval", category="Classic Styles")
        assert render(style, "hello there", rules=RuleSet()) == "hello there"

    def test_empty_text(self):
        style = MappedStyle(name="Alien", category="Complex / Glitched", table={"a": "b"})
        assert render(style, "", global_seed=5) == ""

    def test_pure_mapped_style_keeps_unmapped_text_exactly(self):
        style = MappedStyle(name="Plain", pure=True, table={"a": "b"})
        for ch in COMPAT + "e\u0301":
            assert render(style, ch, global_seed=9) == ch
        assert render(style, f"a{COMPAT}a") == f"b{COMPAT}b"


class TestBoldExample:
    """Bold / Classic Styles, "hi", global seed 42."""

    def test_literal_output(self, builtin_catalog):
        bold = builtin_catalog.get("Bold", "Classic Styles")
        engine = Engine(builtin_catalog, global_seed=42)
        assert engine.render(bold, "hi", 0, 0) == "\U0001D5F5\U0001D5F6"
        assert engine.render(bold, "hi", 0, 0) == engine.render(bold, "hi", 0, 0)

    def test_seed_values(self, builtin_catalog):
        bold = builtin_catalog.get("Bold", "Classic Styles")
        engine = Engine(builtin_catalog, global_seed=42)
        assert engine.seed_for(bold, 0, 0) == 2347888048
        assert engine.seed_for(bold, 1, 0) == 2347888049
        assert engine.seed_for(bold, 1, 0) != engine.seed_for(bold, 0, 0)


class TestEngine:
    def test_deterministic_across_instances(self, builtin_catalog):
        a = Engine(builtin_catalog, global_seed=42)
        b = Engine(builtin_catalog, global_seed=42)
        for ordinal, style in enumerate(builtin_catalog.flat_order()):
            assert a.render(style, "Hello", 2, ordinal) == b.render(style, "Hello", 2, ordinal)

    def test_every_builtin_style_renders_empty_as_empty(self, engine, builtin_catalog):
        for ordinal, style in enumerate(builtin_catalog.flat_order()):
            assert engine.render(style, "", 0, ordinal) == ""

    @pytest.mark.parametrize("bump", [0, 1, 2])
    def test_every_builtin_style_keeps_emoji_whole(self, builtin_catalog, bump):
        engine = Engine(builtin_catalog, global_seed=42)
        for ordinal, style in enumerate(builtin_catalog.flat_order()):
            out = engine.render(style, f"hi {FAMILY} there {GRIN} {WAVE}", bump, ordinal)
            assert FAMILY in out, style
            assert GRIN in out, style
            assert WAVE in out, style

    def test_every_builtin_style_keeps_lone_family(self, builtin_catalog):
        engine = Engine(builtin_catalog, global_seed=42)
        for ordinal, style in enumerate(builtin_catalog.flat_order()):
            assert FAMILY in engine.render(style, FAMILY, 0, ordinal), style

    def test_output_is_already_nfc(self, builtin_catalog):
        engine = Engine(builtin_catalog, global_seed=7)
        for ordinal, style in enumerate(builtin_catalog.flat_order()):
            if style.pure:
                continue
            out = engine.render(style, "Cafe\u0301 wo\u0308rld 123", 1, ordinal)
            assert unicodedata.normalize("NFC", out) == out, style

    def test_pure_styles_pass_unmapped_characters_through(self, builtin_catalog):
        heavy = builtin_catalog.get("Heavy Frame", "Flourish Decorated")
        out = Engine(builtin_catalog, global_seed=3).render(heavy, COMPAT, 0, 0)
        assert out.splitlines()[1] == f"\u2551  {COMPAT}  \u2551"

    def test_negative_counters_rejected(self, engine, builtin_catalog):
        style = builtin_catalog.flat_order()[0]
        with pytest.raises(ValueError):
            engine.render(style, "x", -1, 0)
        with pytest.raises(ValueError):
            engine.render(style, "x", 0, -1)
        with pytest.raises(ValueError):
            engine.seed_for(style, bump=-2)

    def test_none_text_is_empty(self, engine, builtin_catalog):
        style = builtin_catalog.flat_order()[0]
        assert engine.render(style, None) == ""

    def test_seed_changes_with_bump_ordinal_and_global_seed(self, builtin_catalog):
        style = builtin_catalog.flat_order()[0]
        e1, e2 = Engine(builtin_catalog, global_seed=1), Engine(builtin_catalog, global_seed=2)
        assert e1.seed_for(style, 0, 0) != e1.seed_for(style, 1, 0)
        assert e1.seed_for(style, 0, 0) != e1.seed_for(style, 0, 1)
        assert e1.seed_for(style, 0, 0) != e2.seed_for(style, 0, 0)

    def test_rules_come_from_catalog(self, engine, builtin_catalog):
        style = builtin_catalog.get("Medieval", "Classic Styles")
        assert engine.rules_for(style) is builtin_catalog.rules_for(style)

    def test_rules_for_unknown_style_are_cached(self, engine):
        style = MappedStyle(name="Alien Stranger", category="Nowhere")
        first = engine.rules_for(style)
        assert first == resolve_rules(style)
        assert engine.rules_for(style) is first

    def test_with_catalog_keeps_seed(self, engine, small_catalog):
        other = engine.with_catalog(small_catalog)
        assert other.catalog is small_catalog
        assert other.global_seed == engine.global_seed
        assert other.segment_mode == engine.segment_mode

    def test_global_seed_defaults_to_random_uint32(self):
        e = Engine()
        assert 0 <= e.global_seed <= 0xFFFFFFFF
