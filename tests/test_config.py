"""Tests for config.py"""
from __future__ import annotations

import os
from unittest import mock

import pytest

from fontifier.config import DEFAULT_MAX_INPUT, DEFAULT_PAGE_SIZE, DEFAULT_TEXT, Settings


class TestSettingsFromEnv:
    def test_defaults(self):
        s = Settings.from_env({})
        assert 0 <= s.global_seed <= 0xFFFFFFFF
        assert s.page_size == DEFAULT_PAGE_SIZE
        assert s.segmenter == "grapheme"
        assert s.max_input == DEFAULT_MAX_INPUT
        assert s.packs == ()
        assert s.default_text == DEFAULT_TEXT

    def test_env_values(self):
        s = Settings.from_env({
            "FONTIFIER_GLOBAL_SEED": "0x10",
            "FONTIFIER_PAGE_SIZE": "12",
            "FONTIFIER_SEGMENTER": "CodePoint",
            "FONTIFIER_MAX_INPUT": "0",
            "FONTIFIER_PACKS": "a.json, https://x/y.json ,,",
            "FONTIFIER_DEFAULT_TEXT": "",
        })
        assert s.global_seed == 16
        assert s.page_size == 12
        assert s.segmenter == "codepoint"
        assert s.max_input == 0
        assert s.packs == ("a.json", "https://x/y.json")
        assert s.default_text == ""

    def test_reads_os_environ_by_default(self):
        with mock.patch.dict(os.environ, {"FONTIFIER_GLOBAL_SEED": "99"}, clear=False):
            assert Settings.from_env().global_seed == 99

    def test_explicit_overrides_win(self):
        s = Settings.from_env({"FONTIFIER_GLOBAL_SEED": "1", "FONTIFIER_PAGE_SIZE": "3"},
                              global_seed=2, page_size=None, packs=["p.json"])
        assert s.global_seed == 2
        assert s.page_size == 3
        assert s.packs == ("p.json",)

    @pytest.mark.parametrize("env", [
        {"FONTIFIER_GLOBAL_SEED": "abc"},
        {"FONTIFIER_GLOBAL_SEED": str(1 << 32)},
        {"FONTIFIER_GLOBAL_SEED": "-1"},
        {"FONTIFIER_PAGE_SIZE": "0"},
        {"FONTIFIER_SEGMENTER": "words"},
        {"FONTIFIER_MAX_INPUT": "-5"},
    ])
    def test_invalid_values(self, env):
        with pytest.raises(ValueError):
            Settings.from_env(env)
