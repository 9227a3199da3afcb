"""
=============================================================================
FILE EXTENSION → MEDIA TYPE
=============================================================================

Picks a MediaType for a file from its extension, for setting the
Content-Type of a response that serves the file.

    "report.PDF"   → application/pdf
    "index.html"   → text/html; charset=utf-8      (content_type_for_path)
    "blob.xyz"     → application/octet-stream     (unknown extension)

Only the extension is consulted. Sniffing file contents is a different
(and much less predictable) job.

For the full registry, see:
https://www.iana.org/assignments/media-types/media-types.xhtml

=============================================================================
"""

from pathlib import Path
from typing import Optional, Union

from .config import MediaTypeConfig
from .headers import with_charset
from .media_type import MediaType, parse


# Extension (lowercase, with dot) → "type/subtype"
EXTENSION_TYPES = {
    # Text and structured text
    ".html": "text/html",
    ".htm": "text/html",
    ".css": "text/css",
    ".js": "text/javascript",
    ".mjs": "text/javascript",     # ES modules
    ".json": "application/json",
    ".map": "application/json",    # Source maps
    ".xml": "application/xml",
    ".txt": "text/plain",
    ".md": "text/markdown",
    ".csv": "text/csv",
    ".yaml": "text/yaml",
    ".yml": "text/yaml",
    ".toml": "text/x-toml",
    ".py": "text/x-python",

    # Images
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
    ".ico": "image/x-icon",
    ".webp": "image/webp",
    ".avif": "image/avif",

    # Fonts
    ".woff": "font/woff",
    ".woff2": "font/woff2",
    ".ttf": "font/ttf",
    ".otf": "font/otf",

    # Audio / video
    ".mp3": "audio/mpeg",
    ".wav": "audio/wav",
    ".ogg": "audio/ogg",
    ".mp4": "video/mp4",
    ".webm": "video/webm",

    # Documents and archives
    ".pdf": "application/pdf",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".zip": "application/zip",
    ".gz": "application/gzip",
    ".tar": "application/x-tar",
    ".wasm": "application/wasm",
}


def media_type_for_path(
    path: Union[str, Path],
    default: Optional[str] = None,
) -> MediaType:
    """
    Get the media type for a file based on its extension.

    Args:
        path: File path or name with extension.
        default: Media type for unknown extensions. Uses
                 application/octet-stream if not specified.

    Examples:
        >>> media_type_for_path("/static/LOGO.PNG").essence
        'image/png'

        >>> str(media_type_for_path("data.xyz", default="text/plain"))
        'text/plain'

    Raises:
        MediaTypeParseError: If ``default`` is not a valid media type.
    """
    extension = Path(path).suffix.lower()
    essence = EXTENSION_TYPES.get(extension)
    if essence is None:
        essence = default or MediaTypeConfig.default_media_type
    return parse(essence)


def is_text_type(media_type: Union[MediaType, str]) -> bool:
    """
    Check if a media type represents text content.

    Accepts a parsed MediaType or a string; strings that do not parse are
    not text.

        >>> is_text_type("application/json; charset=utf-8")
        True
        >>> is_text_type("image/png")
        False
    """
    if isinstance(media_type, str):
        parsed = MediaType.parse_or_none(media_type)
        return parsed is not None and parsed.is_text
    return media_type.is_text


def content_type_for_path(
    path: Union[str, Path],
    charset: Optional[str] = None,
    config: Optional[MediaTypeConfig] = None,
) -> MediaType:
    """
    Get the full Content-Type for serving a file.

    Textual types get a charset parameter; binary types are returned
    bare.

    Examples:
        >>> str(content_type_for_path("page.html"))
        'text/html; charset=utf-8'

        >>> str(content_type_for_path("image.png"))
        'image/png'
    """
    config = config or MediaTypeConfig()
    media_type = media_type_for_path(path, default=config.default_media_type)

    if media_type.is_text:
        return with_charset(media_type, charset or config.text_charset)

    return media_type
