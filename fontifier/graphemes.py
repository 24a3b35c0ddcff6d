# Grapheme segmentation + character guards (UAX #29 via the `regex` module)
from __future__ import annotations

import regex

GRAPHEME_RE = regex.compile(r"\X")
ALNUM_RE = regex.compile(r"\p{L}|\p{N}")
PICTO_RE = regex.compile(r"\p{Extended_Pictographic}")

# module default; config.Settings.segmenter feeds Engine(segment_mode=...)
DEFAULT_MODE = "grapheme"


def segment(text, mode=None):
    """
    Split `text` into user-perceived characters.

    "grapheme" keeps emoji ZWJ/skin-tone sequences and base+combining runs
    together; "codepoint" is the coarse fallback (Python strings are code
    point sequences, so surrogate pairs never get split either way).
    """
    if not text:
        return []
    mode = mode or DEFAULT_MODE
    if mode == "codepoint":
        return list(text)
    return GRAPHEME_RE.findall(text)


def is_letter_or_number(g):
    return bool(g) and ALNUM_RE.search(g) is not None


def is_pictographic(g):
    return bool(g) and PICTO_RE.search(g) is not None


def decoratable(g):
    """Only letters/digits that aren't emoji get per-grapheme ornaments."""
    return is_letter_or_number(g) and not is_pictographic(g)
