"""
=============================================================================
MEDIA TYPE VALUE
=============================================================================

Parses a Content-Type value into an immutable MediaType.

    "text/HTML; Charset=\"UTF-8\"; q=1"
                    │
                    ▼  parse()
    MediaType(
        raw        = 'text/HTML; Charset="UTF-8"; q=1'   ← kept verbatim
        type       = 'text'                              ← lowercased
        subtype    = 'html'                              ← lowercased
        parameters = (('Charset', 'UTF-8'), ('q', '1'))  ← as written
    )

=============================================================================
EQUALITY IS TEXTUAL
=============================================================================

Two MediaType values are equal when their RAW strings are equal, nothing
else. This is deliberate and it surprises people:

    parse("text/plain") == parse("text/plain")            → True
    parse("TEXT/PLAIN") == parse("text/plain")            → False
    parse("a/b;x=1;y=2") == parse("a/b;y=2;x=1")          → False

The raw string is what goes back out in a Content-Type header, so two
values that would be written differently are different values. Compare
``.essence`` or ``.parameters`` when the structure is what matters.

=============================================================================
INTERVIEW INSIGHT
=============================================================================

Q: "Why keep the raw string instead of re-serializing?"
A: "Re-serializing means choosing a canonical form (quoting, spacing,
   parameter case) and every choice can break some peer that depends
   on the original bytes. Storing the input means str() is exact and
   free, and hashing is a plain string hash."

=============================================================================
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from .charset import CharsetResolver, resolve_or_default
from .errors import MalformedParameterError, MediaTypeParseError, NoSubtypeError
from .grammar import ascii_lower, decode_value, match_parameter, match_type_subtype


logger = logging.getLogger(__name__)


# Non-text/* types whose content is still text
TEXTUAL_TYPES = frozenset({
    "application/json",
    "application/xml",
    "application/javascript",
    "application/x-javascript",
    "image/svg+xml",  # SVG is XML text
})


@dataclass(frozen=True, eq=False, repr=False)
class MediaType:
    """
    An RFC 2045 media type, such as ``text/plain; charset=utf-8``.

    Instances come from :func:`parse` (or :func:`parse_or_none`); the
    constructor does no validation of its own.

    Attributes:
        raw:        The exact string that was parsed. Used for str(),
                    equality and hashing.
        type:       Top-level type, lowercased ("text", "image", ...).
        subtype:    Subtype, lowercased ("plain", "png", "svg+xml", ...).
        parameters: (name, value) pairs in the order they appeared.
                    Names keep their case; duplicates are kept.
    """

    raw: str
    type: str
    subtype: str
    parameters: Tuple[Tuple[str, str], ...] = ()

    # =========================================================================
    # CONSTRUCTION
    # =========================================================================

    @classmethod
    def parse(cls, text: str) -> "MediaType":
        """Same as :func:`parse`."""
        return parse(text)

    @classmethod
    def parse_or_none(cls, text: str) -> Optional["MediaType"]:
        """Same as :func:`parse_or_none`."""
        return parse_or_none(text)

    # =========================================================================
    # LOOKUP
    # =========================================================================

    def parameter(self, name: str) -> Optional[str]:
        """
        Get the value of the first parameter called ``name``.

        Names are compared case-insensitively; values are returned as
        written.

        Example:
            >>> parse("text/plain; Charset=UTF-8").parameter("charset")
            'UTF-8'
        """
        wanted = ascii_lower(name)
        for param_name, value in self.parameters:
            if ascii_lower(param_name) == wanted:
                return value
        return None

    def charset(
        self,
        default: Optional[str] = None,
        resolver: Optional[CharsetResolver] = None,
    ) -> Optional[str]:
        """
        Get the codec for this media type's ``charset`` parameter.

        Returns ``default`` if there is no charset parameter, or if the
        named charset is not supported by ``resolver`` (the interpreter's
        codec registry by default). Never raises for a bad charset.

        Example:
            >>> parse("text/html; charset=UTF8").charset()
            'utf-8'
            >>> parse("text/html; charset=klingon").charset("utf-8")
            'utf-8'
        """
        return resolve_or_default(self.parameter("charset"), default, resolver)

    # =========================================================================
    # DERIVED VIEWS
    # =========================================================================

    @property
    def essence(self) -> str:
        """``type/subtype`` without parameters, lowercased."""
        return f"{self.type}/{self.subtype}"

    @property
    def is_text(self) -> bool:
        """Check if content of this type is human-readable text."""
        return self.type == "text" or self.essence in TEXTUAL_TYPES

    # =========================================================================
    # VALUE SEMANTICS
    # =========================================================================

    def __str__(self) -> str:
        return self.raw

    def __repr__(self) -> str:
        return f"MediaType({self.raw!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MediaType):
            return NotImplemented
        return self.raw == other.raw

    def __hash__(self) -> int:
        return hash(self.raw)


# =============================================================================
# PARSING
# =============================================================================

def parse(text: str) -> MediaType:
    """
    Parse a media type string.

    =====================================================================
    PARSING ALGORITHM
    =====================================================================

    1. Match TOKEN "/" TOKEN at position 0      → else NoSubtypeError
    2. Lowercase type and subtype
    3. Until the end of the input, match one ";" segment:
         no match            → MalformedParameterError
         empty segment       → skip it
         name=value          → decode value, append (name, value)
    4. Return MediaType with raw = the untouched input

    =====================================================================

    Args:
        text: A Content-Type value, e.g. ``"text/plain; charset=utf-8"``.

    Returns:
        The parsed MediaType.

    Raises:
        NoSubtypeError: If the input does not start with ``type/subtype``.
        MalformedParameterError: If a parameter segment is malformed.
    """
    head = match_type_subtype(text)
    if head is None:
        raise NoSubtypeError(text)

    parameters = []
    pos = head.end
    while pos < len(text):
        segment = match_parameter(text, pos)
        if segment is None:
            raise MalformedParameterError(text, pos)

        if not segment.is_empty:
            parameters.append((segment.name, decode_value(segment)))
        pos = segment.end

    return MediaType(
        raw=text,
        type=ascii_lower(head.type),
        subtype=ascii_lower(head.subtype),
        parameters=tuple(parameters),
    )


def parse_or_none(text: str) -> Optional[MediaType]:
    """
    Parse a media type string, returning None if it is malformed.

    Use this where a bad value should mean "no media type" instead of
    aborting the surrounding work, e.g. reading a response header.
    """
    try:
        return parse(text)
    except MediaTypeParseError as e:
        logger.debug(f"Ignoring malformed media type: {e}")
        return None
