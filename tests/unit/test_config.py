"""
Unit tests for MediaTypeConfig.
"""

import logging

import pytest

from mediatype import MediaTypeConfig


class TestMediaTypeConfig:
    """Tests for configuration defaults, environment and validation."""

    def test_defaults(self):
        """Test default values."""
        config = MediaTypeConfig()

        assert config.default_charset == "utf-8"
        assert config.text_charset == "utf-8"
        assert config.default_media_type == "application/octet-stream"
        assert config.malformed_log_levelno == logging.WARNING
        config.validate()

    def test_from_env_defaults(self, clean_env):
        """Test from_env() with nothing set."""
        assert MediaTypeConfig.from_env() == MediaTypeConfig()

    def test_from_env(self, clean_env):
        """Test reading MEDIATYPE_* variables."""
        clean_env.setenv("MEDIATYPE_DEFAULT_CHARSET", "latin-1")
        clean_env.setenv("MEDIATYPE_DEFAULT_TYPE", "text/plain")
        clean_env.setenv("MEDIATYPE_MALFORMED_LOG_LEVEL", "debug")

        config = MediaTypeConfig.from_env()

        assert config.default_charset == "latin-1"
        assert config.default_media_type == "text/plain"
        assert config.malformed_log_level == "DEBUG"
        config.validate()

    @pytest.mark.parametrize("kwargs", [
        {"default_charset": "klingon"},
        {"text_charset": ""},
        {"default_media_type": "octet-stream"},
        {"default_media_type": "text/plain; =x"},
        {"log_level": "LOUD"},
        {"malformed_log_level": "warning"},
    ])
    def test_validate_rejects(self, kwargs):
        """Test fail-fast validation."""
        with pytest.raises(ValueError):
            MediaTypeConfig(**kwargs).validate()

    @pytest.mark.parametrize("level,expected", [
        ("warning", logging.WARNING),
        ("debug", logging.DEBUG),
        ("nonsense", logging.WARNING),
    ])
    def test_malformed_log_levelno_without_validate(self, level: str, expected: int):
        """Test that the level constant is always an int."""
        assert MediaTypeConfig(malformed_log_level=level).malformed_log_levelno == expected

    @pytest.mark.parametrize("charset", ["base64", "rot13"])
    def test_validate_rejects_non_text_codecs(self, charset: str):
        """Test that only text encodings are accepted as charsets."""
        with pytest.raises(ValueError):
            MediaTypeConfig(default_charset=charset).validate()
