from __future__ import annotations

import pytest

from fontifier.builtin import load_catalog
from fontifier.catalog import Catalog
from fontifier.engine import Engine
from fontifier.rules import RuleSet


@pytest.fixture(scope="session")
def builtin_catalog():
    return load_catalog()


@pytest.fixture
def engine(builtin_catalog):
    return Engine(builtin_catalog, global_seed=12345, segment_mode="grapheme")


@pytest.fixture
def small_catalog():
    return Catalog.from_sources([
        {"name": "Bold-ish", "category": "Classic Styles", "map": {"a": "𝗮", "b": "𝗯"}},
        {"name": "Circles", "category": "Classic Styles", "map": {"a": "ⓐ", "b": "ⓑ"}},
        {"name": "Runic", "category": "Exotic & International Styles", "map": {"A": "ᚨ", "B": "ᛒ"}},
        {"name": "Tribal", "category": "Exotic & International Styles", "map": {"A": "ᗩ", "B": "ᗷ"}},
        {"name": "Glitch Hop", "category": "Complex / Glitched", "map": {"B": "🅑"}},
    ])


@pytest.fixture
def zero_rules():
    return RuleSet()


@pytest.fixture
def full_rules():
    return RuleSet(1.0, 1.0, 1.0, 1.0, 1.0, ("stars",), "fire")
