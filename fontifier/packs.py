# ================== JSON style packs ==================
# A pack is a list of map records, or {"styles": [...]}, read from disk or over HTTP.
from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, List, Mapping

import requests

from .logging_adapter import make_logger

_log = make_logger("packs")

RECORD_KEYS = ("name", "title", "category", "pack", "map", "pure", "tags", "note")


class PackError(Exception):
    """A pack could not be fetched, parsed, or has the wrong shape."""


def is_url(source) -> bool:
    return str(source).lower().startswith(("http://", "https://"))


def fetch_pack(url, timeout=10):
    """
    Returns the decoded JSON payload. Raises requests errors on HTTP failure.
    """
    r = requests.get(url, headers={"accept": "application/json"}, timeout=timeout)
    r.raise_for_status()
    return r.json()


def read_pack(path):
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def parse_pack(payload, source="<pack>") -> List[dict]:
    if isinstance(payload, Mapping):
        payload = payload.get("styles")
    if not isinstance(payload, list):
        raise PackError(f"{source}: expected a list of styles or {{\"styles\": [...]}}")

    records = []
    for i, raw in enumerate(payload):
        if not isinstance(raw, Mapping):
            raise PackError(f"{source}: style #{i} is not an object")
        table = raw.get("map")
        if table is not None and not (
            isinstance(table, Mapping) and all(isinstance(v, str) for v in table.values())
        ):
            raise PackError(f"{source}: style #{i} has a non-string map")
        tags = raw.get("tags")
        if tags is not None and not (isinstance(tags, list) and all(isinstance(t, str) for t in tags)):
            raise PackError(f"{source}: style #{i} tags must be a list of strings")
        if "pure" in raw and not isinstance(raw["pure"], bool):
            raise PackError(f"{source}: style #{i} pure must be true or false")
        # packs carry data only; code-bearing keys are dropped
        records.append({k: raw[k] for k in RECORD_KEYS if k in raw})
    return records


def load_pack(source, timeout=10) -> List[dict]:
    try:
        if is_url(source):
            payload = fetch_pack(source, timeout=timeout)
        else:
            payload = read_pack(Path(source).expanduser())
    except (OSError, ValueError, requests.RequestException) as e:
        raise PackError(f"{source}: {e}") from e
    records = parse_pack(payload, source)
    _log(f"loaded {len(records)} style(s) from {source}")
    return records


def load_packs(sources: Iterable[str], timeout=10) -> List[dict]:
    """Load several packs; a bad one is logged and skipped."""
    records = []
    for source in sources:
        try:
            records.extend(load_pack(source, timeout=timeout))
        except PackError as e:
            _log(f"WARN skipped pack: {e}")
    return records
