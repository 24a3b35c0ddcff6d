"""
Gallery state for one viewer session: input text, current page, remix counters.

Usage:
- `g = Gallery(engine); g.set_text("hello")`
- `for category, cards in g.sections(): ...` renders the current page
- `g.remix(ordinal)`, `g.remix_all()`, `g.next_page()`

Notes:
- Ordinals are positions in the catalog's flat order, so they stay stable
  across pages. Remix counters are keyed by render key and never reset on
  paging, so coming back to a page shows the same previews.
- `reload(catalog)` swaps the catalog explicitly and clamps the page index.
"""
from __future__ import annotations

import math
from collections import namedtuple
from typing import Dict, List, Tuple

from .config import DEFAULT_MAX_INPUT, DEFAULT_PAGE_SIZE
from .graphemes import segment

Card = namedtuple("Card", ["ordinal", "key", "style", "bump", "preview"])


class Gallery:
    def __init__(self, engine, page_size: int = DEFAULT_PAGE_SIZE, max_input: int = DEFAULT_MAX_INPUT,
                 text: str = ""):
        if page_size < 1:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self.engine = engine
        self.page_size = page_size
        self.max_input = max_input
        self.text = ""
        self.page_index = 0
        self.bumps: Dict[str, int] = {}
        self.set_text(text)

    @classmethod
    def from_settings(cls, engine, settings):
        return cls(engine, page_size=settings.page_size, max_input=settings.max_input,
                   text=settings.default_text)

    # ---- text ----
    def set_text(self, text):
        text = text or ""
        if self.max_input:
            gs = segment(text, self.engine.segment_mode)
            if len(gs) > self.max_input:
                text = "".join(gs[: self.max_input])
        self.text = text
        return self.text

    def clear(self):
        self.text = ""

    # ---- paging ----
    @property
    def styles(self):
        catalog = self.engine.catalog
        return catalog.flat_order() if catalog is not None else ()

    def page_count(self) -> int:
        return max(1, math.ceil(len(self.styles) / self.page_size))

    def next_page(self) -> int:
        self.page_index = (self.page_index + 1) % self.page_count()
        return self.page_index

    def visible(self) -> List[Tuple[int, object]]:
        start = self.page_index * self.page_size
        page = self.styles[start:start + self.page_size]
        return [(start + i, style) for i, style in enumerate(page)]

    # ---- cards ----
    def key_for(self, ordinal) -> str:
        return self.engine.render_key(self.styles[ordinal], ordinal)

    def card(self, ordinal) -> Card:
        style = self.styles[ordinal]
        key = self.engine.render_key(style, ordinal)
        bump = self.bumps.get(key, 0)
        preview = self.engine.render(style, self.text, bump, ordinal)
        return Card(ordinal, key, style, bump, preview)

    def sections(self) -> List[Tuple[str, List[Card]]]:
        """Current page grouped by category, in catalog order."""
        out: List[Tuple[str, List[Card]]] = []
        for ordinal, style in self.visible():
            if not out or out[-1][0] != style.category:
                out.append((style.category, []))
            out[-1][1].append(self.card(ordinal))
        return out

    def remix(self, ordinal) -> Card:
        key = self.key_for(ordinal)
        self.bumps[key] = self.bumps.get(key, 0) + 1
        return self.card(ordinal)

    def remix_all(self):
        for ordinal, _ in self.visible():
            key = self.key_for(ordinal)
            self.bumps[key] = self.bumps.get(key, 0) + 1

    # ---- catalog ----
    def reload(self, catalog):
        self.engine = self.engine.with_catalog(catalog)
        self.page_index = min(self.page_index, self.page_count() - 1)
        return self
