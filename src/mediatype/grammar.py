"""
=============================================================================
MEDIA TYPE GRAMMAR
=============================================================================

A small hand-written scanner for the RFC 2045 Content-Type grammar.

=============================================================================
THE GRAMMAR
=============================================================================

    media-type  = TOKEN "/" TOKEN *parameter
    parameter   = ";" *WSP [ TOKEN "=" ( TOKEN / QUOTED ) ]

    TOKEN       = 1*( ALPHA / DIGIT / "-" / "!" / "#" / "$" / "%" / "&" /
                      "'" / "*" / "+" / "." / "^" / "_" / "`" / "{" / "|" /
                      "}" / "~" )
    QUOTED      = DQUOTE *( any char except DQUOTE ) DQUOTE

Walking through a typical header value:

    text/html; charset="utf-8";
    ──┬─ ─┬──  ───┬─── ───┬───  ┬
      │   │       │       │     │
    type  │     name    quoted  │
       subtype          value   empty segment (tolerated)

=============================================================================
WHY A SCANNER AND NOT A REGEX?
=============================================================================

A regex could match this grammar, but the interesting behavior lives in
the corners: the name=value group is OPTIONAL and all-or-nothing, and
after an empty segment the cursor must advance exactly past the ";" and
its whitespace. Explicit match functions make each of those decisions
visible:

    match_parameter("; =x", 0)
        ";"  ✓
        " "  ✓ whitespace
        "=x" ✗ not TOKEN "=" ...  → segment matches with NO capture,
                                    ending before "="
    next scan starts at "=" → not ";" → malformed parameter

Every segment consumes at least the ";", so parsing is linear in the
length of the input.

=============================================================================
"""

from dataclasses import dataclass
from typing import Optional


# =============================================================================
# CHARACTER CLASSES
# =============================================================================
#
# RFC 2045 "token": ASCII letters, digits, and a fixed set of symbols.
# Anything else (space, ";", "=", '"', "/", non-ASCII...) ends a token.
#
TOKEN_CHARS = frozenset(
    "abcdefghijklmnopqrstuvwxyz"
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "0123456789"
    "-!#$%&'*+.^_`{|}~"
)

# Whitespace allowed directly after ";" (the "\s" class of most regex engines)
WHITESPACE_CHARS = frozenset(" \t\n\x0b\f\r")

DQUOTE = '"'
SQUOTE = "'"

# Folds A-Z only; every other character is left as it is
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ",
    "abcdefghijklmnopqrstuvwxyz",
)


@dataclass(frozen=True)
class TypeSubtypeMatch:
    """The leading ``type/subtype`` of a media type, as written."""

    type: str
    subtype: str
    end: int  # Index just past the subtype


@dataclass(frozen=True)
class ParameterMatch:
    """
    One ``;`` segment.

    ``name`` is None for an empty segment (a bare ``;``). Otherwise exactly
    one of ``token`` / ``quoted`` holds the value as written: ``quoted``
    already has its double quotes removed.
    """

    end: int
    name: Optional[str] = None
    token: Optional[str] = None
    quoted: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return self.name is None


# =============================================================================
# PRIMITIVE MATCHERS
# =============================================================================
#
# Each matcher takes (text, pos) and returns the index just past what it
# matched, or None. None never consumes input.
#

def match_token(text: str, pos: int) -> Optional[int]:
    """Match one or more token characters starting at ``pos``."""
    end = pos
    length = len(text)
    while end < length and text[end] in TOKEN_CHARS:
        end += 1
    return end if end > pos else None


def match_quoted(text: str, pos: int) -> Optional[int]:
    """
    Match a double-quoted string starting at ``pos``.

    There is no backslash escaping: the string ends at the next ``"``.
    An unterminated quote is not a match.
    """
    if pos >= len(text) or text[pos] != DQUOTE:
        return None
    closing = text.find(DQUOTE, pos + 1)
    if closing == -1:
        return None
    return closing + 1


def skip_whitespace(text: str, pos: int) -> int:
    """Return the first index at or after ``pos`` that is not whitespace."""
    length = len(text)
    while pos < length and text[pos] in WHITESPACE_CHARS:
        pos += 1
    return pos


# =============================================================================
# COMPOSITE MATCHERS
# =============================================================================

def match_type_subtype(text: str) -> Optional[TypeSubtypeMatch]:
    """
    Match ``TOKEN "/" TOKEN`` anchored at the start of ``text``.

    Only the prefix has to match; whatever follows is left to
    :func:`match_parameter`.

    Examples:
        >>> match_type_subtype("text/plain; charset=utf-8")
        TypeSubtypeMatch(type='text', subtype='plain', end=10)

        >>> match_type_subtype("text") is None
        True
    """
    type_end = match_token(text, 0)
    if type_end is None:
        return None

    if type_end >= len(text) or text[type_end] != "/":
        return None

    subtype_start = type_end + 1
    subtype_end = match_token(text, subtype_start)
    if subtype_end is None:
        return None

    return TypeSubtypeMatch(
        type=text[:type_end],
        subtype=text[subtype_start:subtype_end],
        end=subtype_end,
    )


def match_parameter(text: str, pos: int) -> Optional[ParameterMatch]:
    """
    Match one parameter segment starting at ``pos``.

    =====================================================================
    SEGMENT FORMS
    =====================================================================

        ";"                       → empty, ends after ";"
        ";   "                    → empty, ends after the whitespace
        "; charset=utf-8"         → name="charset", token="utf-8"
        "; name=\"a b\""          → name="name", quoted="a b"
        "; =oops"                 → empty, ends before "="
        "charset=utf-8"           → None (does not start with ";")

    The name/value pair either matches completely or not at all. A
    partial pair is not an error HERE: the segment is empty and the
    leftover characters fail the next call, which is where the parser
    reports them.

    =====================================================================

    Returns:
        A ParameterMatch, or None if ``text[pos]`` is not ``;``.
    """
    if pos >= len(text) or text[pos] != ";":
        return None

    after_whitespace = skip_whitespace(text, pos + 1)
    empty = ParameterMatch(end=after_whitespace)

    # ---------------------------------------------------------------------
    # name "="
    # ---------------------------------------------------------------------
    name_end = match_token(text, after_whitespace)
    if name_end is None:
        return empty
    if name_end >= len(text) or text[name_end] != "=":
        return empty

    name = text[after_whitespace:name_end]
    value_start = name_end + 1

    # ---------------------------------------------------------------------
    # TOKEN | QUOTED
    # ---------------------------------------------------------------------
    # The two can never both match: '"' is not a token character.
    #
    token_end = match_token(text, value_start)
    if token_end is not None:
        return ParameterMatch(
            end=token_end,
            name=name,
            token=text[value_start:token_end],
        )

    quoted_end = match_quoted(text, value_start)
    if quoted_end is not None:
        return ParameterMatch(
            end=quoted_end,
            name=name,
            quoted=text[value_start + 1:quoted_end - 1],
        )

    return empty


def decode_value(match: ParameterMatch) -> str:
    """
    Turn a matched parameter value into the value callers see.

    =====================================================================
    VALUE DECODING
    =====================================================================

        charset="utf-8"    → utf-8     (quotes removed by the matcher)
        charset=""         → ""        (empty, but present)
        charset='utf-8'    → utf-8     (lenient, see below)
        charset=''         → ''        (too short to strip)
        charset=utf-8      → utf-8

    Single quotes are not quoting in RFC 2045; "'" is an ordinary token
    character. Servers in the wild still send charset='utf-8', so a
    token that starts AND ends with "'" and has something in between
    loses exactly one quote on each side. Nothing else is unescaped.

    =====================================================================
    """
    if match.name is None:
        raise ValueError("Empty parameter segment has no value")

    if match.token is None:
        return match.quoted or ""

    token = match.token
    if len(token) > 2 and token.startswith(SQUOTE) and token.endswith(SQUOTE):
        return token[1:-1]

    return token


def is_token(text: str) -> bool:
    """Check whether ``text`` is a single, complete token."""
    return bool(text) and match_token(text, 0) == len(text)


def ascii_lower(text: str) -> str:
    """Lowercase ASCII letters only, leaving every other character alone."""
    return text.translate(_ASCII_LOWER)
