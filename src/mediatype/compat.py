"""
Legacy entry points.

Older callers spelled parsing as ``get()`` (raising) and ``parse()``
(returning None). Both route to the current functions and warn.
"""

import warnings
from typing import Optional

from .media_type import MediaType, parse, parse_or_none


def get(text: str) -> MediaType:
    """Deprecated spelling of :func:`mediatype.parse`."""
    warnings.warn(
        "get() is deprecated, use mediatype.parse()",
        DeprecationWarning,
        stacklevel=2,
    )
    return parse(text)


def parse_legacy(text: str) -> Optional[MediaType]:
    """Deprecated spelling of :func:`mediatype.parse_or_none`."""
    warnings.warn(
        "parse_legacy() is deprecated, use mediatype.parse_or_none()",
        DeprecationWarning,
        stacklevel=2,
    )
    return parse_or_none(text)
