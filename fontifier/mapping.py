# ================== Base mapping + transform helpers ==================
from __future__ import annotations

import re
import unicodedata

from .graphemes import decoratable, is_letter_or_number, is_pictographic, segment
from .rng import pick

THIN = "\u2009"

_INVISIBLES_RE = re.compile("[\u0000-\u001f\u007f-\u009f\u200b\u200c\u200d]")
_MARK_STACK_RE = re.compile("[\u0300-\u036f]{3,}")


def lookup(table, g):
    """exact -> lower -> upper -> the grapheme itself"""
    if g in table:
        return table[g]
    lo = g.lower()
    if lo in table:
        return table[lo]
    up = g.upper()
    if up in table:
        return table[up]
    return g


def apply_map(text, table, mode=None):
    """Unmapped graphemes come back exactly as given; no normalization here."""
    if not text:
        return ""
    return "".join(lookup(table, g) for g in segment(text, mode))


def apply_base(style, text, rng, mode=None):
    """Base text for any style variant; never raises on unmapped input."""
    return style.base(text or "", rng, mode)


def apply_combining(text, marks, rng, low=1, high=2):
    """Stack low..high random marks on every letter/digit; leave emoji alone."""
    out = []
    for g in segment(text):
        if not is_letter_or_number(g):
            out.append(g)
            continue
        n = int(rng() * (high - low + 1)) + low
        out.append(g + "".join(pick(rng, marks) for _ in range(n)))
    return unicodedata.normalize("NFC", "".join(out))


def weave(text, seq):
    """Cycle through `seq`, one mark after every letter or digit; emoji and spaces are left whole."""
    out, i = [], 0
    for g in segment(text):
        if not decoratable(g):
            out.append(g)
            continue
        out.append(g + seq[i % len(seq)])
        i += 1
    return "".join(out)


def spaced(text, sep="\u200a"):
    return sep.join(segment(text))


def thin_space(s):
    return THIN + s + THIN


def sanitize_visible(s):
    """Drop control and zero-width characters, cap mark stacks at two.

    Pictographic clusters are kept whole so ZWJ emoji sequences survive.
    """
    if not s:
        return s
    out = []
    for g in segment(s):
        if is_pictographic(g):
            out.append(g)
            continue
        g = _INVISIBLES_RE.sub("", g)
        out.append(_MARK_STACK_RE.sub(lambda m: m.group(0)[:2], g))
    return unicodedata.normalize("NFC", "".join(out))
