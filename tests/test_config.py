"""Tests for configuration, settings and error modules."""

import pytest

from gitdiffparser import settings
from gitdiffparser.config import ParseConfig
from gitdiffparser.errors import GrammarViolationError, InputTooLargeError
from gitdiffparser.logging_utils import resolve_log_level


class TestParseConfig:
    """Test ParseConfig class."""

    def test_default_config(self):
        """Test default configuration values."""
        config = ParseConfig()

        assert config.encoding == "utf-8"
        assert config.max_input_bytes == 8_000_000

    def test_custom_config(self):
        """Test custom configuration values."""
        config = ParseConfig(encoding="latin-1", max_input_bytes=1024)

        assert config.to_dict() == {"encoding": "latin-1", "max_input_bytes": 1024}

    def test_validation_non_positive_cap(self):
        """Test validation of the input cap."""
        with pytest.raises(ValueError, match="max_input_bytes must be positive"):
            ParseConfig(max_input_bytes=0)

    def test_validation_unknown_encoding(self):
        """Test validation of the encoding name."""
        with pytest.raises(ValueError, match="unknown encoding"):
            ParseConfig(encoding="no-such-codec")

    def test_frozen(self):
        """Config is immutable."""
        config = ParseConfig()
        with pytest.raises(AttributeError):
            config.encoding = "ascii"


class TestSettings:
    """Test environment-driven settings."""

    def test_get_parse_config_from_env(self, monkeypatch):
        """Environment variables override defaults."""
        monkeypatch.setenv("GITDIFF_ENCODING", "latin-1")
        monkeypatch.setenv("GITDIFF_MAX_INPUT_BYTES", "2048")
        settings.get_parse_config.cache_clear()
        try:
            config = settings.get_parse_config()
        finally:
            settings.get_parse_config.cache_clear()

        assert config == ParseConfig(encoding="latin-1", max_input_bytes=2048)

    def test_log_level_resolution(self, monkeypatch):
        """Explicit level wins over environment variables."""
        monkeypatch.setenv("GITDIFF_LOG_LEVEL", "debug")
        monkeypatch.setenv("LOG_LEVEL", "error")

        assert resolve_log_level("warning") == "WARNING"
        assert resolve_log_level() == "DEBUG"

        monkeypatch.delenv("GITDIFF_LOG_LEVEL")
        assert resolve_log_level() == "ERROR"


class TestErrors:
    """Test error payloads."""

    def test_grammar_violation_to_dict(self):
        """Grammar errors carry position, line and expectation."""
        error = GrammarViolationError(3, "bogus", "expected chunk header")

        assert error.to_dict() == {
            "code": "GRAMMAR_VIOLATION",
            "message": "Line 3: expected chunk header, got 'bogus'",
            "details": {"line_number": 3, "line": "bogus", "expected": "expected chunk header"},
        }

    def test_input_too_large(self):
        """Size errors report both sizes."""
        error = InputTooLargeError(100, 10)

        assert error.code == "INPUT_TOO_LARGE"
        assert error.details == {"size_bytes": 100, "limit_bytes": 10}
