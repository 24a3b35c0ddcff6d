"""
Runtime settings for the engine, gallery and app.

Precedence everywhere: explicit keyword > env > default.

Env:
- FONTIFIER_GLOBAL_SEED: uint32 process seed (default: random per process)
- FONTIFIER_PAGE_SIZE: cards per gallery page (default: 24)
- FONTIFIER_SEGMENTER: "grapheme" or "codepoint" (default: grapheme)
- FONTIFIER_MAX_INPUT: input cap in graphemes, 0 disables (default: 500)
- FONTIFIER_PACKS: comma-separated JSON pack paths/URLs (default: none)
- FONTIFIER_DEFAULT_TEXT: initial gallery text (default: "Aifontsgenerator")
"""
from __future__ import annotations

import os
import random
from dataclasses import dataclass, field
from typing import Mapping, Optional, Tuple

SEGMENTER_MODES = ("grapheme", "codepoint")

DEFAULT_PAGE_SIZE = 24
DEFAULT_MAX_INPUT = 500
DEFAULT_TEXT = "Aifontsgenerator"


def new_global_seed() -> int:
    """Fresh process-wide seed, the Python take on `Math.random() * 0xFFFFFFFF >>> 0`."""
    return random.getrandbits(32)


def _parse_int(name: str, raw: str) -> int:
    try:
        return int(raw.strip(), 0)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class Settings:
    global_seed: int
    page_size: int = DEFAULT_PAGE_SIZE
    segmenter: str = "grapheme"
    max_input: int = DEFAULT_MAX_INPUT
    packs: Tuple[str, ...] = field(default_factory=tuple)
    default_text: str = DEFAULT_TEXT

    def __post_init__(self):
        if not 0 <= self.global_seed <= 0xFFFFFFFF:
            raise ValueError(f"global_seed must fit in 32 bits, got {self.global_seed}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be positive, got {self.page_size}")
        if self.segmenter not in SEGMENTER_MODES:
            raise ValueError(f"segmenter must be one of {SEGMENTER_MODES}, got {self.segmenter!r}")
        if self.max_input < 0:
            raise ValueError(f"max_input must be >= 0, got {self.max_input}")

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None, **overrides) -> "Settings":
        env = os.environ if env is None else env
        values = {}

        raw = env.get("FONTIFIER_GLOBAL_SEED", "").strip()
        values["global_seed"] = _parse_int("FONTIFIER_GLOBAL_SEED", raw) if raw else None

        raw = env.get("FONTIFIER_PAGE_SIZE", "").strip()
        if raw:
            values["page_size"] = _parse_int("FONTIFIER_PAGE_SIZE", raw)

        raw = env.get("FONTIFIER_SEGMENTER", "").strip().lower()
        if raw:
            values["segmenter"] = raw

        raw = env.get("FONTIFIER_MAX_INPUT", "").strip()
        if raw:
            values["max_input"] = _parse_int("FONTIFIER_MAX_INPUT", raw)

        raw = env.get("FONTIFIER_PACKS", "")
        values["packs"] = tuple(p.strip() for p in raw.split(",") if p.strip())

        if "FONTIFIER_DEFAULT_TEXT" in env:
            values["default_text"] = env["FONTIFIER_DEFAULT_TEXT"]

        values.update({k: v for k, v in overrides.items() if v is not None})
        values["packs"] = tuple(values.get("packs", ()))
        if values.get("global_seed") is None:
            values["global_seed"] = new_global_seed()
        return cls(**values)
