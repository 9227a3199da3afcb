"""
=============================================================================
CHARSET RESOLUTION
=============================================================================

Maps a charset NAME taken from a Content-Type header ("utf-8", "Latin-1",
"x-unknown") to a codec this Python runtime can actually use.

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    RESOLVE-OR-DEFAULT                               │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   charset parameter      resolver                result             │
    │   ─────────────────      ────────────────────    ────────────────── │
    │   (missing)              not called              default            │
    │   "UTF-8"                codecs.lookup → ok      "utf-8"            │
    │   "latin1"               codecs.lookup → ok      "iso8859-1"        │
    │   "x-bogus"              LookupError             default            │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

A bad charset in a header is the sender's problem, not ours: resolution
failures never raise to the caller, they fall back to the caller's default.

The registry itself is Python's codec registry. Anything with the same
calling convention (name in, canonical codec name out, LookupError on
failure) can be passed instead, e.g. a resolver restricted to a whitelist.

=============================================================================
"""

import codecs
import logging
from typing import Optional, Protocol


logger = logging.getLogger(__name__)


class CharsetResolver(Protocol):
    """Resolve a charset name, raising LookupError when it is unsupported."""

    def __call__(self, name: str) -> str:
        ...


def resolve_charset(name: str) -> str:
    """
    Resolve ``name`` against the interpreter's codec registry.

    Returns:
        The canonical codec name, e.g. ``"utf-8"`` for ``"UTF8"``.

    Raises:
        LookupError: If no codec is registered under that name, or the
                     codec is not a text encoding (base64, rot13, zlib...).
    """
    try:
        codec_name = codecs.lookup(name).name
        # Bytes-to-bytes and str-to-str codecs refuse bytes.decode()
        b"".decode(codec_name)
        return codec_name
    except (TypeError, ValueError) as e:
        # Names with embedded NULs and the like never reach the registry
        raise LookupError(f"unknown encoding: {name!r}") from e


def resolve_or_default(
    name: Optional[str],
    default: Optional[str] = None,
    resolver: Optional[CharsetResolver] = None,
) -> Optional[str]:
    """
    Resolve a charset name, falling back to ``default``.

    Args:
        name: Charset name from a header, or None if there was none.
        default: Returned when ``name`` is None or cannot be resolved.
        resolver: Registry to consult. Uses :func:`resolve_charset`
                  if not specified.

    Returns:
        The resolved codec name, or ``default``.
    """
    if name is None:
        return default

    resolver = resolver or resolve_charset
    try:
        return resolver(name)
    except LookupError:
        logger.debug(f"Unsupported charset {name!r}, using {default!r}")
        return default
