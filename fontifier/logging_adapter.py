"""
Logging adapter: small function-style loggers that write to stderr.

Config:
- Env: LOG_JSON=1 switches loggers to one JSON object per line.

Usage:
- `log = make_logger(prefix="catalog"); log("loaded 96 styles")`
- `log = make_logger(prefix="packs", json_output=True)` forces JSON lines.
- `slog = make_structured_logger(prefix="gallery", defaults={"seed": 7}); slog("remix", {"ordinal": 3})`
- `log = get_configured_logger("app")` picks plain or structured from LOG_JSON.

Notes:
- Side effects: writes to stderr only; nothing is buffered or persisted.
- Home paths are shortened to ~ so pack file paths don't leak user names.
- LOG_JSON is read when the logger is created, not on every call.
"""
from __future__ import annotations

import json
import os
import sys
from pathlib import Path
from typing import Callable, Optional

__all__ = [
    "get_configured_logger",
    "make_logger",
    "make_structured_logger",
]


def make_logger(prefix: str = "", json_output: Optional[bool] = None) -> Callable[[str], None]:
    """
    Create a logger function printing `[prefix] message` to stderr.
    """
    home = str(Path.home())
    pref = f"[{prefix}]" if prefix else ""
    if json_output is None:
        json_output = os.environ.get("LOG_JSON", "0") == "1"

    def _log(msg: str) -> None:
        sanitized = str(msg).replace(home, "~")
        if json_output:
            payload = {"prefix": prefix, "message": sanitized}
            print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)
        else:
            print(f"{pref} {sanitized}".strip(), file=sys.stderr)

    return _log


def make_structured_logger(prefix: str = "", defaults: Optional[dict] = None) -> Callable[[str, Optional[dict]], None]:
    """
    Emit JSON lines with a consistent schema: {prefix,event,...fields}.
    Defaults are merged into each line; per-call fields win.
    """
    defaults = dict(defaults or {})

    def _log(event: str, fields: Optional[dict] = None) -> None:
        payload = {"prefix": prefix, "event": event}
        payload.update(defaults)
        if fields:
            payload.update(fields)
        print(json.dumps(payload, ensure_ascii=False), file=sys.stderr)

    return _log


def get_configured_logger(name: str, structured: Optional[bool] = None, defaults: Optional[dict] = None) -> Callable:
    """
    Logger for `name`, structured when LOG_JSON=1 unless `structured` says otherwise.

    Both variants accept a single message argument, so call sites that only
    pass a string work in either mode.
    """
    if structured is None:
        structured = os.environ.get("LOG_JSON", "0") == "1"
    if structured:
        return make_structured_logger(name, defaults)
    return make_logger(name, json_output=False)
