"""
The decoration pass: seeded, grapheme-safe ornamentation of base text.

RNG draws happen in a fixed order (palette, then per grapheme the diacritic,
spacing and symbol rolls with their picks, then bead, then frame), so the
order of consumption is part of what makes a render reproducible.
"""
from __future__ import annotations

import unicodedata

from .graphemes import decoratable, segment
from .rng import pick
from .rules import frame_pairs, palette_symbols, DEFAULT_PALETTE

DIACRITICS = (
    "\u0307", "\u0323", "\u0331", "\u0304", "\u0335",
    "\u0346", "\u0357", "\u0332", "\u035b",
)
THIN_SPACES = ("\u2006", "\u2007", "\u2009", "\u200a", "\u202f")
BEAD_SPACE = THIN_SPACES[0]


def length_scale(n):
    """Short inputs get proportionally fewer ornaments."""
    return 0.5 + n / 12 if n < 6 else 1.0


def decorate(base_text, rng, rules, mode=None):
    gs = segment(base_text, mode)
    n = len(gs) or 1
    scale = length_scale(n)

    di_rate = rules.diacritic * scale
    sp_rate = rules.spacing * scale
    sym_rate = rules.symbol_inline * scale
    mid_rate = rules.mid_bead * scale

    pal_name = pick(rng, rules.palettes) if rules.palettes else DEFAULT_PALETTE
    palette = palette_symbols(pal_name)

    # one chunk per grapheme: the grapheme plus whatever got attached to it
    chunks = []
    for g in gs:
        chunk = g
        if decoratable(g):
            if rng() < di_rate:
                chunk += pick(rng, DIACRITICS)
            if rng() < sp_rate:
                chunk += pick(rng, THIN_SPACES)
            if rng() < sym_rate:
                sym = pick(rng, palette)
                ts = pick(rng, THIN_SPACES)
                chunk += ts + sym + ts
        chunks.append(chunk)

    if n > 3 and rng() < mid_rate:
        bead = pick(rng, palette)
        chunks.insert(n // 2, BEAD_SPACE + bead + BEAD_SPACE)

    out = "".join(chunks)

    pairs = frame_pairs(rules.frame)
    if n >= 4 and pairs and rng() < rules.frame_rate:
        left, right = pick(rng, pairs)
        out = left + BEAD_SPACE + out + BEAD_SPACE + right

    return unicodedata.normalize("NFC", out)
