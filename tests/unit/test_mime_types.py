"""
Unit tests for file extension → media type mapping.
"""

from pathlib import Path

import pytest

from mediatype import MediaTypeConfig, MediaTypeParseError, parse
from mediatype.mime_types import content_type_for_path, is_text_type, media_type_for_path


class TestMediaTypeForPath:
    """Tests for media_type_for_path()."""

    @pytest.mark.parametrize("path,expected", [
        ("style.css", "text/css"),
        ("/path/to/image.png", "image/png"),
        ("LOGO.PNG", "image/png"),
        ("archive.tar.gz", "application/gzip"),
        (Path("docs/readme.md"), "text/markdown"),
    ])
    def test_known_extensions(self, path, expected: str):
        """Test lookup by extension, ignoring case."""
        assert media_type_for_path(path).essence == expected

    def test_unknown_extension(self):
        """Test the binary fallback."""
        assert str(media_type_for_path("unknown.xyz")) == "application/octet-stream"
        assert str(media_type_for_path("Makefile")) == "application/octet-stream"

    def test_custom_default(self):
        """Test a caller-supplied fallback."""
        assert str(media_type_for_path("data.xyz", default="text/plain")) == "text/plain"

    def test_invalid_default(self):
        """Test that a bad default is a parse error."""
        with pytest.raises(MediaTypeParseError):
            media_type_for_path("data.xyz", default="nonsense")


class TestContentTypeForPath:
    """Tests for content_type_for_path()."""

    def test_text_gets_charset(self):
        """Test that textual types carry a charset."""
        assert str(content_type_for_path("page.html")) == "text/html; charset=utf-8"
        assert str(content_type_for_path("data.json")) == "application/json; charset=utf-8"

    def test_binary_is_bare(self):
        """Test that binary types have no parameters."""
        assert str(content_type_for_path("image.png")) == "image/png"

    def test_explicit_charset(self):
        """Test overriding the charset per call."""
        media_type = content_type_for_path("notes.txt", charset="iso-8859-1")
        assert media_type.parameter("charset") == "iso-8859-1"

    def test_config_charset_and_default(self):
        """Test charset and fallback type from config."""
        config = MediaTypeConfig(text_charset="ascii", default_media_type="text/plain")

        assert str(content_type_for_path("notes.txt", config=config)) == "text/plain; charset=ascii"
        assert str(content_type_for_path("blob.bin", config=config)) == "text/plain; charset=ascii"


class TestIsTextType:
    """Tests for is_text_type()."""

    @pytest.mark.parametrize("value,expected", [
        ("text/html", True),
        ("application/json", True),
        ("image/svg+xml", True),
        ("image/png", False),
        ("not a media type", False),
    ])
    def test_strings(self, value: str, expected: bool):
        """Test string input."""
        assert is_text_type(value) is expected

    def test_media_type(self):
        """Test parsed input."""
        assert is_text_type(parse("TEXT/CSV")) is True
