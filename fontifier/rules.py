"""
Decoration rule-sets: per-category defaults plus name-triggered overrides.

A rule-set says how often the engine ornaments a style (diacritics, thin
spacing, inline symbols, a midpoint bead, a frame) and which palettes/frame
it draws from. Resolution is pure: same style name/category, same rules.

Overrides are an ordered, declarative list. Every override whose pattern hits
the lowercased name is applied in list order: palette/frame choices are
replaced (last hit wins), `add` fields accumulate, `floor` fields are raised
to at least the given value.
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from typing import Dict, Mapping, Optional, Tuple

# ================== Palettes / Frames ==================
PALETTES: Dict[str, Tuple[str, ...]] = {
    "cuneiform": ("𒀭", "𒀹", "𒅗", "𒄿", "𒌋", "𒊭", "𒉿", "𒁹"),
    "linearB":   ("𐂀", "𐂁", "𐂂", "𐂃", "𐂄", "𐂅"),
    "zodiac":    ("♈", "♉", "♊", "♋", "♌", "♍", "♎", "♏", "♐", "♑", "♒", "♓"),
    "alchemy":   ("🜁", "🜂", "🜃", "🜄", "🜍", "🜏", "🝙"),
    "geom":      ("◇", "◆", "◈", "⌬", "◬", "◩", "◪", "⟡"),
    "stars":     ("✦", "✶", "✷", "✺", "✧", "❖", "⋆", "✹", "✸"),
    "hearts":    ("♥", "❥", "♡", "❤", "💖", "💗"),
    "runes":     ("ᚨ", "ᚢ", "ᚱ", "ᚲ", "ᚷ", "ᚺ", "ᛟ", "ᛏ", "ᛉ", "ᛞ"),
    "flora":     ("❀", "❁", "✿", "✾", "❋", "⚘", "🌸"),
    "tech":      ("▣", "◧", "◨", "⟊", "⌗", "⟴", "⟰"),
    "occult":    ("✠", "☥", "☩", "⛧", "†", "✟"),
}
DEFAULT_PALETTE = "stars"

FRAMES: Dict[str, Tuple[Tuple[str, str], ...]] = {
    "ancient": (("𒀭", "𒀭"), ("𒀹", "𒀹"), ("❖", "❖")),
    "mystic":  (("✧", "✧"), ("⋆", "⋆"), ("☾", "☽")),
    "dark":    (("✠", "✠"), ("†", "†"), ("⛧", "⛧")),
    "ocean":   (("༄", "༄"), ("🌊", "🌊"), ("☽", "☾")),
    "frost":   (("❄\ufe0e", "❄\ufe0e"), ("☾", "☾")),
    "fire":    (("🔥", "🔥"), ("✦", "✦")),
    "tech":    (("◈", "◈"), ("▣", "▣")),
    "soft":    (("❀", "❀"), ("♥", "♥"), ("✿", "✿")),
    "none":    (),
}


def palette_symbols(name):
    return PALETTES.get(name) or PALETTES[DEFAULT_PALETTE]


def frame_pairs(name):
    return FRAMES.get(name, ())


# ================== Rule-set ==================
RATE_FIELDS = ("diacritic", "spacing", "symbol_inline", "mid_bead", "frame_rate")


def _clamp(p):
    return min(1.0, max(0.0, float(p)))


@dataclass(frozen=True)
class RuleSet:
    diacritic: float = 0.0
    spacing: float = 0.0
    symbol_inline: float = 0.0
    mid_bead: float = 0.0
    frame_rate: float = 0.0
    palettes: Tuple[str, ...] = (DEFAULT_PALETTE,)
    frame: str = "none"

    def __post_init__(self):
        for name in RATE_FIELDS:
            object.__setattr__(self, name, _clamp(getattr(self, name)))
        object.__setattr__(self, "palettes", tuple(self.palettes))


@dataclass(frozen=True)
class Override:
    palettes: Optional[Tuple[str, ...]] = None
    frame: Optional[str] = None
    add: Mapping[str, float] = field(default_factory=dict)
    floor: Mapping[str, float] = field(default_factory=dict)

    def apply(self, rules: RuleSet) -> RuleSet:
        changes = {}
        if self.palettes is not None:
            changes["palettes"] = self.palettes
        if self.frame is not None:
            changes["frame"] = self.frame
        for k, v in self.add.items():
            changes[k] = changes.get(k, getattr(rules, k)) + v
        for k, v in self.floor.items():
            changes[k] = max(changes.get(k, getattr(rules, k)), v)
        return replace(rules, **changes)


# Category defaults. Unknown categories use "Misc".
BASE_RULES: Dict[str, RuleSet] = {
    "Featured Styles":               RuleSet(0.22, 0.14, 0.12, 0.45, 0.45, ("cuneiform", "geom"), "ancient"),
    "Exotic & International Styles": RuleSet(0.14, 0.12, 0.10, 0.30, 0.25, ("runes", "zodiac", "geom"), "mystic"),
    "Algorithmic & Combining Marks": RuleSet(0.40, 0.18, 0.08, 0.15, 0.15, ("stars",), "none"),
    "Flourish Decorated":            RuleSet(0.10, 0.16, 0.06, 0.25, 0.20, ("hearts", "flora", "stars"), "soft"),
    "Classic Styles":                RuleSet(0.06, 0.10, 0.02, 0.05, 0.05, ("stars",), "none"),
    "Complex / Glitched":            RuleSet(0.24, 0.14, 0.14, 0.30, 0.30, ("alchemy", "geom", "tech"), "tech"),
    "Creative & Mixed Styles":       RuleSet(0.12, 0.12, 0.08, 0.25, 0.20, ("stars", "flora"), "mystic"),
    "Symbol–Alphabet Fusion":        RuleSet(0.10, 0.10, 0.10, 0.30, 0.25, ("zodiac", "alchemy", "stars"), "mystic"),
    "Misc":                          RuleSet(0.10, 0.10, 0.06, 0.20, 0.15, ("stars",), "none"),
}
FALLBACK_CATEGORY = "Misc"

NAME_OVERRIDES: Tuple[Tuple[re.Pattern, Override], ...] = (
    (re.compile(r"\b(ancient|hieroglyph|glyph)\b"),
     Override(palettes=("cuneiform", "linearB", "geom"), frame="ancient",
              add={"diacritic": 0.04, "mid_bead": 0.10}, floor={"frame_rate": 0.55})),
    (re.compile(r"\b(runic|rune)\b"),
     Override(palettes=("runes", "zodiac"), frame="mystic", floor={"mid_bead": 0.35})),
    (re.compile(r"\b(vaporwave|full\s?width)\b"),
     Override(palettes=("stars", "geom"), frame="soft", floor={"spacing": 0.22})),
    (re.compile(r"\b(fraktur|medieval|demon)\b"),
     Override(palettes=("occult", "alchemy"), frame="dark",
              add={"diacritic": 0.08}, floor={"frame_rate": 0.35})),
    (re.compile(r"\b(alien|ufo|xeno)\b"),
     Override(palettes=("tech", "geom", "zodiac"), frame="tech", add={"symbol_inline": 0.06})),
)


def category_rules(category):
    return BASE_RULES.get(category or FALLBACK_CATEGORY) or BASE_RULES[FALLBACK_CATEGORY]


def apply_name_overrides(rules: RuleSet, name: str) -> RuleSet:
    name = (name or "").lower()
    for pattern, override in NAME_OVERRIDES:
        if pattern.search(name):
            rules = override.apply(rules)
    return rules


def resolve_rules(style) -> RuleSet:
    """Category default, then every matching name override in order."""
    return apply_name_overrides(category_rules(style.category), style.name)
