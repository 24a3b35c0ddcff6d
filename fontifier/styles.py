"""
Style records.

Two variants, picked once when a raw record is normalized:

- MappedStyle: a grapheme -> string substitution table.
- TransformStyle: a function `fn(text, rng) -> str`. The seeded RNG of the
  render is passed in, so a transform that randomizes stays reproducible.
  `decorates=True` means the transform already ornaments its output and the
  generic decoration pass is skipped.

Raw records are plain dicts (the shape JSON packs and the built-in catalog
use): name/title, category/pack, map or transform, pure, tags, note.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple

from .mapping import apply_map

DEFAULT_CATEGORY = "Misc"
DEFAULT_NAME = "Untitled"


@dataclass(frozen=True, eq=False)
class Style:
    name: str = DEFAULT_NAME
    category: str = DEFAULT_CATEGORY
    pure: bool = False
    tags: Tuple[str, ...] = ()
    note: str = ""

    @property
    def identity(self) -> Tuple[str, str]:
        return (self.name.lower(), self.category.lower())

    @property
    def decorates(self) -> bool:
        return False

    def base(self, text: str, rng: Callable[[], float], mode: Optional[str] = None) -> str:
        raise NotImplementedError

    def __repr__(self):
        return f"{type(self).__name__}({self.name!r}, {self.category!r})"


@dataclass(frozen=True, eq=False, repr=False)
class MappedStyle(Style):
    table: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self):
        object.__setattr__(self, "table", MappingProxyType(dict(self.table)))

    def base(self, text, rng, mode=None):
        return apply_map(text, self.table, mode)


@dataclass(frozen=True, eq=False, repr=False)
class TransformStyle(Style):
    fn: Optional[Callable[..., str]] = None
    self_decorating: bool = False

    @property
    def decorates(self) -> bool:
        return self.self_decorating

    def base(self, text, rng, mode=None):
        if not text:
            return ""
        return self.fn(text, rng)


def _text_field(record, *keys, default):
    for key in keys:
        value = record.get(key)
        if value:
            return str(value)
    return default


def normalize_record(record) -> Style:
    """Turn a raw record (dict or Style) into an immutable Style; never rejects."""
    if isinstance(record, Style):
        return record
    record = record if isinstance(record, Mapping) else {}
    common = dict(
        name=_text_field(record, "name", "title", default=DEFAULT_NAME),
        category=_text_field(record, "category", "pack", default=DEFAULT_CATEGORY),
        pure=bool(record.get("pure", False)),
        tags=tuple(record.get("tags") or ()),
        note=str(record.get("note") or ""),
    )
    fn = record.get("transform")
    if callable(fn):
        return TransformStyle(fn=fn, self_decorating=bool(record.get("decorates", False)), **common)
    table = record.get("map")
    return MappedStyle(table=table if isinstance(table, Mapping) else {}, **common)
