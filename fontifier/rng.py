# ================== Deterministic RNG + string hash ==================
# Both mirror the browser build bit-for-bit so a (seed, text) pair renders
# the same card in either place.
from __future__ import annotations

from typing import Callable, Sequence, TypeVar

T = TypeVar("T")

MASK32 = 0xFFFFFFFF
FNV_OFFSET = 2166136261
FNV_PRIME = 16777619


def _imul(a: int, b: int) -> int:
    return ((a & MASK32) * (b & MASK32)) & MASK32


def make_rng(seed: int) -> Callable[[], float]:
    """mulberry32: returns a generator of floats in [0, 1) fixed by `seed`."""
    state = seed & MASK32

    def rng() -> float:
        nonlocal state
        state = (state + 0x6D2B79F5) & MASK32
        t = state
        t = _imul(t ^ (t >> 15), t | 1)
        t ^= (t + _imul(t ^ (t >> 7), t | 61)) & MASK32
        return ((t ^ (t >> 14)) & MASK32) / 4294967296

    return rng


def pick(rng: Callable[[], float], seq: Sequence[T]) -> T:
    """One draw, one element: seq[floor(r * len)]."""
    return seq[int(rng() * len(seq))]


def hash_str(s: str = "") -> int:
    """32-bit FNV-1a over UTF-16 code units (what JS charCodeAt walks)."""
    h = FNV_OFFSET
    data = (s or "").encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = _imul(h, FNV_PRIME)
    return h
