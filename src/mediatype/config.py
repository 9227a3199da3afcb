"""
=============================================================================
MEDIA TYPE CONFIGURATION
=============================================================================

Defaults used by the HTTP-facing helpers (headers.py, mime_types.py).

The parser itself has no knobs: the grammar is fixed. What varies between
deployments is what to do AROUND it:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    WHERE CONFIG IS USED                             │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │  default_charset       body has no usable charset → decode with this│
    │  text_charset          charset added to text/* built from filenames │
    │  default_media_type    unknown file extension → this type           │
    │  malformed_log_level   how loudly to log a broken Content-Type      │
    │  log_level             root level for configure_logging()           │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Sources, highest priority first: explicit constructor arguments, then
MEDIATYPE_* environment variables (via from_env), then the defaults below.

=============================================================================
"""

import logging
import os
from dataclasses import dataclass

from .charset import resolve_charset
from .errors import MediaTypeParseError
from .media_type import parse


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class MediaTypeConfig:
    """
    Configuration for media type handling.

    Example:
        config = MediaTypeConfig(default_charset="iso-8859-1")
        text = decode_body(body, media_type, config)
    """

    default_charset: str = "utf-8"
    """
    Charset for decoding bodies whose Content-Type has no charset
    parameter, or names one this runtime does not support.
    """

    text_charset: str = "utf-8"
    """
    Charset parameter attached to textual types built from file names,
    e.g. "index.html" → text/html; charset=utf-8
    """

    default_media_type: str = "application/octet-stream"
    """
    Media type for unknown file extensions.
    application/octet-stream = "I don't know what this is, treat as binary"
    """

    malformed_log_level: str = "WARNING"
    """
    Level used when a Content-Type header cannot be parsed.
    Use DEBUG for clients that talk to sloppy servers all day.
    """

    log_level: str = "INFO"
    """Logging level applied by configure_logging()."""

    @classmethod
    def from_env(cls) -> "MediaTypeConfig":
        """
        Create configuration from environment variables.

        =====================================================================
        ENVIRONMENT VARIABLES
        =====================================================================

        MEDIATYPE_DEFAULT_CHARSET      (default: utf-8)
        MEDIATYPE_TEXT_CHARSET         (default: utf-8)
        MEDIATYPE_DEFAULT_TYPE         (default: application/octet-stream)
        MEDIATYPE_MALFORMED_LOG_LEVEL  (default: WARNING)
        MEDIATYPE_LOG_LEVEL            (default: INFO)

        =====================================================================
        """
        return cls(
            default_charset=os.getenv("MEDIATYPE_DEFAULT_CHARSET", "utf-8"),
            text_charset=os.getenv("MEDIATYPE_TEXT_CHARSET", "utf-8"),
            default_media_type=os.getenv(
                "MEDIATYPE_DEFAULT_TYPE", "application/octet-stream"
            ),
            malformed_log_level=os.getenv("MEDIATYPE_MALFORMED_LOG_LEVEL", "WARNING").upper(),
            log_level=os.getenv("MEDIATYPE_LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Fails fast: a typo in a charset name should stop startup, not
        silently fall back to the default on every request.
        """
        for field_name in ("default_charset", "text_charset"):
            value = getattr(self, field_name)
            try:
                resolve_charset(value)
            except LookupError:
                raise ValueError(f"{field_name}: unsupported charset {value!r}") from None

        try:
            parse(self.default_media_type)
        except MediaTypeParseError as e:
            raise ValueError(f"default_media_type: {e}") from e

        for field_name in ("malformed_log_level", "log_level"):
            value = getattr(self, field_name)
            if value not in LOG_LEVELS:
                raise ValueError(
                    f"{field_name} must be one of {', '.join(LOG_LEVELS)}, got {value!r}"
                )

    @property
    def malformed_log_levelno(self) -> int:
        """``malformed_log_level`` as a logging module constant, WARNING if unknown."""
        level = logging.getLevelName(self.malformed_log_level.upper())
        return level if isinstance(level, int) else logging.WARNING


def configure_logging(config: MediaTypeConfig) -> None:
    """
    Set up root logging for scripts using this package.

    Library code never calls this; it only creates named loggers.
    """
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
