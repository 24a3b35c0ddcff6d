"""Tests for logging_adapter.py"""
from __future__ import annotations

import io
import json
import os
from contextlib import redirect_stderr
from pathlib import Path
from unittest import mock

import pytest

from fontifier.logging_adapter import get_configured_logger, make_logger, make_structured_logger


class TestMakeLogger:
    """Test suite for make_logger."""

    def test_plain_output(self):
        with mock.patch.dict(os.environ, {"LOG_JSON": "0"}, clear=False):
            log = make_logger("catalog")

        stderr_capture = io.StringIO()
        with redirect_stderr(stderr_capture):
            log("loaded 3 styles")

        output = stderr_capture.getvalue()
        assert output == "[catalog] loaded 3 styles\n"
        with pytest.raises(json.JSONDecodeError):
            json.loads(output)

    def test_json_from_env(self):
        with mock.patch.dict(os.environ, {"LOG_JSON": "1"}, clear=False):
            log = make_logger("packs")

        stderr_capture = io.StringIO()
        with redirect_stderr(stderr_capture):
            log("loaded ✨")

        parsed = json.loads(stderr_capture.getvalue().strip())
        assert parsed == {"prefix": "packs", "message": "loaded ✨"}

    def test_explicit_json_overrides_env(self):
        with mock.patch.dict(os.environ, {"LOG_JSON": "1"}, clear=False):
            log = make_logger("app", json_output=False)

        stderr_capture = io.StringIO()
        with redirect_stderr(stderr_capture):
            log("hello")
        assert stderr_capture.getvalue().startswith("[app] ")

    def test_home_path_is_shortened(self):
        log = make_logger("packs", json_output=False)
        home = str(Path.home())

        stderr_capture = io.StringIO()
        with redirect_stderr(stderr_capture):
            log(f"loaded {home}/packs/mine.json")
        assert "~/packs/mine.json" in stderr_capture.getvalue()

    def test_no_prefix(self):
        log = make_logger(json_output=False)
        stderr_capture = io.StringIO()
        with redirect_stderr(stderr_capture):
            log("bare")
        assert stderr_capture.getvalue() == "bare\n"


class TestStructuredLogger:
    def test_schema_and_defaults(self):
        slog = make_structured_logger("gallery", defaults={"seed": 7})
        stderr_capture = io.StringIO()
        with redirect_stderr(stderr_capture):
            slog("remix", {"ordinal": 3})
            slog("next_page")
        lines = [json.loads(line) for line in stderr_capture.getvalue().splitlines()]
        assert lines[0] == {"prefix": "gallery", "event": "remix", "seed": 7, "ordinal": 3}
        assert lines[1] == {"prefix": "gallery", "event": "next_page", "seed": 7}

    def test_fields_override_defaults(self):
        slog = make_structured_logger("x", defaults={"seed": 1})
        stderr_capture = io.StringIO()
        with redirect_stderr(stderr_capture):
            slog("e", {"seed": 2})
        assert json.loads(stderr_capture.getvalue())["seed"] == 2


class TestGetConfiguredLogger:
    @pytest.mark.parametrize("env_value,structured", [("1", True), ("0", False)])
    def test_reads_log_json(self, env_value, structured):
        with mock.patch.dict(os.environ, {"LOG_JSON": env_value}, clear=False):
            log = get_configured_logger("app")
        stderr_capture = io.StringIO()
        with redirect_stderr(stderr_capture):
            log("boot")
        output = stderr_capture.getvalue()
        if structured:
            assert json.loads(output) == {"prefix": "app", "event": "boot"}
        else:
            assert output == "[app] boot\n"

    def test_explicit_wins(self):
        with mock.patch.dict(os.environ, {"LOG_JSON": "0"}, clear=False):
            log = get_configured_logger("app", structured=True, defaults={"v": 1})
        stderr_capture = io.StringIO()
        with redirect_stderr(stderr_capture):
            log("boot")
        assert json.loads(stderr_capture.getvalue())["v"] == 1
