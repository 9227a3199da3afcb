"""
Unit tests for charset resolution.
"""

import pytest

from mediatype import parse
from mediatype.charset import resolve_charset, resolve_or_default


def ascii_only(name: str) -> str:
    """Resolver that only knows US-ASCII."""
    if name.lower() in ("ascii", "us-ascii"):
        return "ascii"
    raise LookupError(name)


class TestResolveCharset:
    """Tests for the codec-registry resolver."""

    @pytest.mark.parametrize("name,expected", [
        ("utf-8", "utf-8"),
        ("UTF-8", "utf-8"),
        ("utf8", "utf-8"),
        ("latin-1", "iso8859-1"),
        ("ISO-8859-1", "iso8859-1"),
    ])
    def test_known_names(self, name: str, expected: str):
        """Test that aliases resolve to canonical codec names."""
        assert resolve_charset(name) == expected

    @pytest.mark.parametrize("name", ["klingon", "", "utf-8\x00", "base64", "rot13", "zlib", "hex"])
    def test_unknown_names(self, name: str):
        """Test that unusable names raise LookupError."""
        with pytest.raises(LookupError):
            resolve_charset(name)

    def test_resolve_or_default(self):
        """Test the resolve-or-default contract."""
        assert resolve_or_default(None, "utf-8") == "utf-8"
        assert resolve_or_default("klingon", "utf-8") == "utf-8"
        assert resolve_or_default("klingon") is None
        assert resolve_or_default("UTF8", "ascii") == "utf-8"


class TestMediaTypeCharset:
    """Tests for MediaType.charset()."""

    def test_resolves_parameter(self):
        """Test that the charset parameter is resolved."""
        assert parse("text/plain; charset=UTF-8").charset() == "utf-8"

    def test_parameter_name_is_case_insensitive(self):
        """Test that CHARSET=... is found."""
        assert parse("text/plain; CHARSET=latin1").charset() == "iso8859-1"

    def test_quoted_charset(self):
        """Test a quoted charset value."""
        assert parse('text/plain; charset="utf-8"').charset() == "utf-8"

    def test_missing_returns_default(self):
        """Test the default when there is no charset parameter."""
        media_type = parse("text/plain")

        assert media_type.charset() is None
        assert media_type.charset("utf-8") == "utf-8"

    def test_unknown_returns_default(self):
        """Test the default when the charset is not supported."""
        media_type = parse("text/plain; charset=x-unknown-charset")

        assert media_type.charset() is None
        assert media_type.charset("utf-8") == "utf-8"

    @pytest.mark.parametrize("name", ["base64", "rot13", "bz2"])
    def test_non_text_codec_returns_default(self, name: str):
        """Test that codecs which are not text encodings fall back to the default."""
        assert parse(f"text/plain; charset={name}").charset("utf-8") == "utf-8"

    def test_empty_returns_default(self):
        """Test that charset="" falls back to the default."""
        assert parse('text/plain; charset=""').charset("ascii") == "ascii"

    def test_custom_resolver(self):
        """Test resolving against a caller-supplied registry."""
        assert parse("text/plain; charset=US-ASCII").charset(resolver=ascii_only) == "ascii"
        assert parse("text/plain; charset=utf-8").charset("x", resolver=ascii_only) == "x"

    def test_failure_is_logged(self, debug_logs):
        """Test that unsupported charsets are logged, not raised."""
        parse("text/plain; charset=klingon").charset("utf-8")

        assert any("klingon" in r.getMessage() for r in debug_logs.records)
