from .builtin import BASE_RECORDS, PACK_RECORDS, load_catalog
from .catalog import Catalog
from .config import Settings
from .engine import Engine, render
from .gallery import Card, Gallery
from .packs import PackError, load_pack, load_packs
from .rules import RuleSet, resolve_rules
from .styles import MappedStyle, Style, TransformStyle, normalize_record

__all__ = [
    "BASE_RECORDS",
    "PACK_RECORDS",
    "Card",
    "Catalog",
    "Engine",
    "Gallery",
    "MappedStyle",
    "PackError",
    "RuleSet",
    "Settings",
    "Style",
    "TransformStyle",
    "load_catalog",
    "load_pack",
    "load_packs",
    "normalize_record",
    "render",
    "resolve_rules",
]
