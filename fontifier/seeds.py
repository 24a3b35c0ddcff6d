"""
Seed composition for card renders.

seed = (global_seed + hash("category|name") + bump + ordinal) mod 2**32

The render key hashes the ordinal in as well, so the same style shown on two
pages keeps two independent remix counters.
"""
from __future__ import annotations

from .rng import MASK32, hash_str


def identity_hash(category: str, name: str) -> int:
    return hash_str(f"{category or ''}|{name or ''}")


def compose_seed(global_seed: int, category: str, name: str, bump: int = 0, ordinal: int = 0) -> int:
    return (global_seed + identity_hash(category, name) + int(bump) + int(ordinal)) & MASK32


def render_key(category: str, name: str, ordinal: int) -> str:
    """Stable per-card key for bump-counter lookups."""
    return str(hash_str(f"{category or ''}|{name or ''}|{ordinal}"))
