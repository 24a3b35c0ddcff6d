"""
Composition entry point: (style, text, bump, ordinal) -> stylized string.

Usage:
- `render(style, "hello", bump=0, ordinal=3, global_seed=42)` as a pure function
- `Engine(catalog, global_seed=42).render(style, "hello", 0, 3)` caches rule-sets per
  style identity and keeps the global seed fixed for its lifetime

Notes:
- Output is a pure function of (style identity, text, bump, ordinal, global seed).
- Pure styles return the base mapping untouched; self-decorating transforms
  return their own (seeded) output, NFC-normalized.
"""
from __future__ import annotations

import unicodedata
from typing import Dict, Optional, Tuple

from .config import new_global_seed
from .decorate import decorate
from .mapping import apply_base
from .rng import MASK32, make_rng
from .rules import RuleSet, resolve_rules
from .seeds import compose_seed, render_key

__all__ = ["Engine", "render"]


def render(style, text, bump=0, ordinal=0, global_seed=0, rules: Optional[RuleSet] = None, mode=None) -> str:
    seed = compose_seed(global_seed, style.category, style.name, bump, ordinal)
    rng = make_rng(seed)
    base = apply_base(style, text, rng, mode)
    if style.pure:
        return base
    if style.decorates:
        return unicodedata.normalize("NFC", base)
    if rules is None:
        rules = resolve_rules(style)
    return decorate(base, rng, rules, mode)


def _check_counter(name, value):
    value = int(value)
    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
    return value


class Engine:
    def __init__(self, catalog=None, global_seed: Optional[int] = None, segment_mode: Optional[str] = None):
        self.catalog = catalog
        self.global_seed = (new_global_seed() if global_seed is None else int(global_seed)) & MASK32
        self.segment_mode = segment_mode
        self._rules: Dict[Tuple[str, str], RuleSet] = {}

    @classmethod
    def from_settings(cls, settings, catalog=None):
        return cls(catalog, global_seed=settings.global_seed, segment_mode=settings.segmenter)

    def rules_for(self, style) -> RuleSet:
        if self.catalog is not None and style.identity in self.catalog:
            return self.catalog.rules_for(style)
        rules = self._rules.get(style.identity)
        if rules is None:
            rules = self._rules[style.identity] = resolve_rules(style)
        return rules

    def seed_for(self, style, bump=0, ordinal=0) -> int:
        return compose_seed(self.global_seed, style.category, style.name,
                            _check_counter("bump", bump), _check_counter("ordinal", ordinal))

    def render_key(self, style, ordinal) -> str:
        return render_key(style.category, style.name, _check_counter("ordinal", ordinal))

    def render(self, style, text, bump=0, ordinal=0) -> str:
        bump = _check_counter("bump", bump)
        ordinal = _check_counter("ordinal", ordinal)
        return render(style, text or "", bump, ordinal, self.global_seed,
                      rules=self.rules_for(style), mode=self.segment_mode)

    def with_catalog(self, catalog) -> "Engine":
        """Same seed and segmenter, new catalog (explicit reload)."""
        return Engine(catalog, global_seed=self.global_seed, segment_mode=self.segment_mode)
