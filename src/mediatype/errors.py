"""
=============================================================================
MEDIA TYPE PARSE ERRORS
=============================================================================

Exceptions raised when a string is not a well-formed media type.

There are exactly two ways a Content-Type value can be rejected:

    ┌─────────────────────────────────────────────────────────────────────┐
    │                      PARSE ERROR KINDS                              │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │  NO_SUBTYPE            "text"             → no "type/subtype" at 0  │
    │                        "/plain"                                      │
    │                                                                      │
    │  MALFORMED_PARAMETER   "text/plain; =x"   → a ";" segment does not  │
    │                        "text/plain x"       follow the grammar      │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

Both derive from ValueError, so code that only cares about "bad input"
can catch the built-in without importing anything from this package.

=============================================================================
"""

from enum import Enum


class ParseErrorKind(Enum):
    """Which part of the grammar rejected the input."""

    NO_SUBTYPE = "no_subtype"
    MALFORMED_PARAMETER = "malformed_parameter"


class MediaTypeParseError(ValueError):
    """
    Raised when a media type string cannot be parsed.

    Carries the offending input and the error kind so callers can
    report it (or map it to a 400 / 415 response) without string
    matching on the message.
    """

    kind: ParseErrorKind

    def __init__(self, message: str, text: str):
        super().__init__(message)
        self.text = text  # The complete input that failed to parse


class NoSubtypeError(MediaTypeParseError):
    """The leading ``type/subtype`` did not match at position 0."""

    kind = ParseErrorKind.NO_SUBTYPE

    def __init__(self, text: str):
        super().__init__(f'No subtype found for: "{text}"', text)


class MalformedParameterError(MediaTypeParseError):
    """A ``;``-delimited segment did not follow the parameter grammar."""

    kind = ParseErrorKind.MALFORMED_PARAMETER

    def __init__(self, text: str, position: int):
        self.position = position
        self.remainder = text[position:]
        super().__init__(
            f'Parameter is not formatted correctly: "{self.remainder}" for: "{text}"',
            text,
        )
