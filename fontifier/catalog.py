"""
Immutable style catalog: merge sources, normalize records, dedupe by identity.

Usage:
- `Catalog.from_sources(BASE_RECORDS, PACK_RECORDS)` merges in order, first
  occurrence of a (name, category) pair wins
- `catalog.reload(*sources)` builds a new catalog; nothing merges implicitly
- `catalog.flat_order()` is the listing whose positions are render ordinals

Notes:
- An empty catalog is logged, not raised; the caller decides how to tell the user.
- Rule-sets are resolved once per identity here, not per render.
"""
from __future__ import annotations

from itertools import chain
from typing import Dict, Iterable, List, Tuple

from .logging_adapter import make_logger
from .rules import RuleSet, resolve_rules
from .styles import Style, normalize_record

_log = make_logger("catalog")


def dedupe(styles: Iterable[Style]) -> List[Style]:
    seen = set()
    out = []
    for s in styles:
        if s.identity in seen:
            continue
        seen.add(s.identity)
        out.append(s)
    return out


def _sort_key(s):
    return s.casefold()


class Catalog:
    def __init__(self, styles: Iterable[Style] = ()):
        self._styles: Tuple[Style, ...] = tuple(dedupe(styles))
        self._by_id: Dict[Tuple[str, str], Style] = {s.identity: s for s in self._styles}
        self._rules: Dict[Tuple[str, str], RuleSet] = {s.identity: resolve_rules(s) for s in self._styles}
        self._flat = None

    @classmethod
    def from_sources(cls, *sources: Iterable) -> "Catalog":
        normalized = [normalize_record(r) for r in chain.from_iterable(sources)]
        catalog = cls(normalized)
        dropped = len(normalized) - len(catalog)
        if dropped:
            _log(f"dropped {dropped} duplicate style(s)")
        if catalog.is_empty:
            _log("WARN no styles found; check the built-in catalog and pack sources")
        return catalog

    def reload(self, *sources: Iterable) -> "Catalog":
        return type(self).from_sources(*sources)

    @property
    def styles(self) -> Tuple[Style, ...]:
        return self._styles

    @property
    def is_empty(self) -> bool:
        return not self._styles

    def __len__(self):
        return len(self._styles)

    def __iter__(self):
        return iter(self._styles)

    def __contains__(self, identity):
        if isinstance(identity, Style):
            identity = identity.identity
        return identity in self._by_id

    def get(self, name, category):
        return self._by_id.get((name.lower(), category.lower()))

    def rules_for(self, style) -> RuleSet:
        return self._rules.get(style.identity) or resolve_rules(style)

    def categories(self) -> List[Tuple[str, List[Style]]]:
        buckets: Dict[str, List[Style]] = {}
        for s in self._styles:
            buckets.setdefault(s.category, []).append(s)
        return [
            (cat, sorted(buckets[cat], key=lambda s: _sort_key(s.name)))
            for cat in sorted(buckets, key=_sort_key)
        ]

    def flat_order(self) -> Tuple[Style, ...]:
        if self._flat is None:
            self._flat = tuple(s for _, group in self.categories() for s in group)
        return self._flat
