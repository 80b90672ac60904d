# =============================================================================
# test_config.py - Lexer Configuration Tests
# =============================================================================

import logging

import pytest
from lambdalang.config import LexerOptions


class TestLexerOptions:
    """Test LexerOptions defaults and validation."""

    def test_defaults(self):
        options = LexerOptions()
        assert options.int_bits == 32
        assert options.filename == "<input>"
        assert options.max_int == 2**31 - 1

    def test_max_int_follows_width(self):
        assert LexerOptions(int_bits=8).max_int == 127
        assert LexerOptions(int_bits=64).max_int == 2**63 - 1

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            LexerOptions(int_bits=1)


class TestFromEnv:
    """Test configuration from environment variables."""

    def test_unset(self, monkeypatch):
        monkeypatch.delenv("LAMBDALANG_INT_BITS", raising=False)
        assert LexerOptions.from_env().int_bits == 32

    def test_int_bits(self, monkeypatch):
        monkeypatch.setenv("LAMBDALANG_INT_BITS", "64")
        assert LexerOptions.from_env().int_bits == 64

    @pytest.mark.parametrize("value", ["wide", "1", "-8"])
    def test_invalid_value_is_ignored(self, monkeypatch, caplog, value):
        monkeypatch.setenv("LAMBDALANG_INT_BITS", value)
        with caplog.at_level(logging.WARNING, logger="lambdalang.config"):
            options = LexerOptions.from_env()
        assert options.int_bits == 32
        assert "LAMBDALANG_INT_BITS" in caplog.text
