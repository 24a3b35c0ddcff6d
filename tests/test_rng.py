"""Tests for rng.py and seeds.py"""
from __future__ import annotations

from fontifier.rng import FNV_OFFSET, FNV_PRIME, MASK32, hash_str, make_rng, pick
from fontifier.seeds import compose_seed, identity_hash, render_key


def _fnv_units(units):
    h = FNV_OFFSET
    for u in units:
        h ^= u
        h = (h * FNV_PRIME) & MASK32
    return h


class TestHashStr:
    """FNV-1a over UTF-16 code units."""

    def test_known_vectors(self):
        assert hash_str("") == 2166136261
        assert hash_str("a") == 0xE40C292C

    def test_none_hashes_like_empty(self):
        assert hash_str(None) == hash_str("")

    def test_astral_chars_hash_as_surrogate_pairs(self):
        # U+1F600 is D83D DE00 in UTF-16
        assert hash_str("😀") == _fnv_units([0xD83D, 0xDE00])
        assert hash_str("x😀") == _fnv_units([0x78, 0xD83D, 0xDE00])

    def test_result_is_uint32(self):
        for s in ("Classic Styles|Bold", "🔥" * 50, "ünïcødé"):
            assert 0 <= hash_str(s) <= MASK32


class TestMakeRng:
    """mulberry32 generator."""

    def test_same_seed_same_sequence(self):
        a, b = make_rng(42), make_rng(42)
        assert [a() for _ in range(20)] == [b() for _ in range(20)]

    def test_different_seeds_differ(self):
        a, b = make_rng(1), make_rng(2)
        assert [a() for _ in range(5)] != [b() for _ in range(5)]

    def test_values_in_unit_interval(self):
        rng = make_rng(0xDEADBEEF)
        for _ in range(1000):
            v = rng()
            assert 0.0 <= v < 1.0

    def test_seed_is_masked_to_32_bits(self):
        a, b = make_rng(7), make_rng(7 + (1 << 32))
        assert [a() for _ in range(5)] == [b() for _ in range(5)]

    def test_pick_returns_member(self):
        rng = make_rng(3)
        seq = ("x", "y", "z")
        for _ in range(50):
            assert pick(rng, seq) in seq


class TestSeeds:
    def test_compose_seed_formula(self):
        h = identity_hash("Classic Styles", "Bold")
        assert compose_seed(10, "Classic Styles", "Bold", 2, 3) == (10 + h + 5) & MASK32

    def test_compose_seed_wraps(self):
        h = identity_hash("c", "n")
        assert compose_seed(MASK32, "c", "n", 1, 0) == h

    def test_bump_and_ordinal_change_seed(self):
        base = compose_seed(99, "c", "n", 0, 0)
        assert compose_seed(99, "c", "n", 1, 0) != base
        assert compose_seed(99, "c", "n", 0, 1) != base
        assert compose_seed(100, "c", "n", 0, 0) != base

    def test_render_key_hashes_ordinal(self):
        assert render_key("c", "n", 3) == str(hash_str("c|n|3"))
        assert render_key("c", "n", 3) != render_key("c", "n", 4)
