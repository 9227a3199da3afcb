"""
=============================================================================
MEDIATYPE - RFC 2045 MEDIA TYPES FOR HTTP
=============================================================================

Parses Content-Type values like "text/html; charset=utf-8" into immutable
MediaType objects.

=============================================================================
PACKAGE STRUCTURE
=============================================================================

    mediatype/
    ├── __init__.py      # Public API (this file)
    ├── grammar.py       # Token / quoted-string scanner
    ├── media_type.py    # MediaType value, parse(), parse_or_none()
    ├── errors.py        # NoSubtypeError, MalformedParameterError
    ├── charset.py       # Charset name → codec, resolve-or-default
    ├── headers.py       # Content-Type header helpers, body decoding
    ├── mime_types.py    # File extension → MediaType
    ├── config.py        # MediaTypeConfig
    └── compat.py        # Deprecated aliases

=============================================================================
QUICK START
=============================================================================

    from mediatype import parse, parse_or_none

    media_type = parse("text/plain; charset=UTF-8")
    media_type.type                  # 'text'
    media_type.subtype               # 'plain'
    media_type.parameter("CHARSET")  # 'UTF-8'
    media_type.charset()             # 'utf-8' (resolved codec name)
    str(media_type)                  # 'text/plain; charset=UTF-8'

    parse("text")                    # raises NoSubtypeError
    parse_or_none("text")            # None

=============================================================================
"""

__version__ = "1.0.0"

from .errors import (
    MediaTypeParseError,
    NoSubtypeError,
    MalformedParameterError,
    ParseErrorKind,
)
from .media_type import MediaType, parse, parse_or_none
from .charset import CharsetResolver, resolve_charset
from .config import MediaTypeConfig
from .headers import content_type_from_headers, decode_body, with_charset
from .mime_types import media_type_for_path, content_type_for_path, is_text_type

__all__ = [
    # Parsing
    "MediaType",
    "parse",
    "parse_or_none",

    # Errors
    "MediaTypeParseError",
    "NoSubtypeError",
    "MalformedParameterError",
    "ParseErrorKind",

    # Charsets
    "CharsetResolver",
    "resolve_charset",

    # HTTP helpers
    "MediaTypeConfig",
    "content_type_from_headers",
    "decode_body",
    "with_charset",
    "media_type_for_path",
    "content_type_for_path",
    "is_text_type",

    "__version__",
]
