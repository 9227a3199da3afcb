"""
=============================================================================
CONTENT-TYPE HEADER HELPERS
=============================================================================

Glue between HTTP messages and MediaType values.

    Headers                      MediaType                   Body text
    {"Content-Type": ...}  ──►   parse_or_none()    ──►      bytes.decode(
                                  │                            charset or
                                  ▼                            default)
                            malformed? log it,
                            treat as "no content type"

A broken Content-Type header must not fail the whole request or response:
the body is still there, we just know less about it. Everything here
degrades to "no media type" / "default charset" instead of raising.

=============================================================================
"""

import logging
from typing import Mapping, Optional

from .config import MediaTypeConfig
from .grammar import DQUOTE, SQUOTE, ascii_lower, is_token
from .media_type import MediaType, parse, parse_or_none


logger = logging.getLogger(__name__)

CONTENT_TYPE = "content-type"


def get_header(headers: Mapping[str, str], name: str) -> Optional[str]:
    """
    Get a header value by name, ignoring case.

    Request headers are usually stored lowercased already; response
    headers often keep their "Content-Type" spelling. Accept both.
    """
    value = headers.get(name)
    if value is not None:
        return value

    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return None


def content_type_from_headers(
    headers: Mapping[str, str],
    config: Optional[MediaTypeConfig] = None,
) -> Optional[MediaType]:
    """
    Get the parsed Content-Type of an HTTP message.

    Args:
        headers: Header name → value mapping (any name case).
        config: Controls the log level for malformed values.

    Returns:
        The MediaType, or None if the header is missing, blank or
        malformed.
    """
    config = config or MediaTypeConfig()

    value = get_header(headers, CONTENT_TYPE)
    if value is None:
        return None

    # Header values carry optional whitespace around them (OWS)
    value = value.strip()
    if not value:
        return None

    media_type = parse_or_none(value)
    if media_type is None:
        logger.log(
            config.malformed_log_levelno,
            f"Ignoring malformed Content-Type header: {value!r}",
        )
    return media_type


def body_charset(
    media_type: Optional[MediaType],
    config: Optional[MediaTypeConfig] = None,
) -> str:
    """Get the charset to decode a body with, never failing."""
    config = config or MediaTypeConfig()
    if media_type is None:
        return config.default_charset
    return media_type.charset(config.default_charset)


def decode_body(
    body: bytes,
    media_type: Optional[MediaType],
    config: Optional[MediaTypeConfig] = None,
) -> str:
    """
    Decode a message body as text.

    Undecodable bytes become U+FFFD instead of raising.

    Example:
        >>> decode_body(b"caf\\xe9", parse("text/plain; charset=latin-1"))
        'café'
    """
    return body.decode(body_charset(media_type, config), errors="replace")


def _format_value(value: str) -> str:
    # A bare '...' token would lose its quotes again when re-parsed
    single_quoted = len(value) > 2 and value.startswith(SQUOTE) and value.endswith(SQUOTE)
    if is_token(value) and not single_quoted:
        return value
    if DQUOTE in value:
        raise ValueError(f"Parameter value cannot be quoted: {value!r}")
    return f'{DQUOTE}{value}{DQUOTE}'


def with_charset(media_type: MediaType, charset: str) -> MediaType:
    """
    Get a copy of ``media_type`` with its charset set to ``charset``.

    The first charset parameter is replaced in place and any others are
    dropped; without one, ``charset`` is appended. Other parameters keep
    their order and spelling.

    Example:
        >>> str(with_charset(parse("text/html"), "utf-8"))
        'text/html; charset=utf-8'

    Raises:
        ValueError: If a value contains a double quote and so cannot be
                    written back out.
    """
    parts = [media_type.essence]
    replaced = False
    for name, value in media_type.parameters:
        if ascii_lower(name) == "charset":
            if replaced:
                continue
            name, value = "charset", charset
            replaced = True
        parts.append(f"{name}={_format_value(value)}")

    if not replaced:
        parts.append(f"charset={_format_value(charset)}")

    return parse("; ".join(parts))
