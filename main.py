"""
=============================================================================
WALKTHROUGH: PARSING CONTENT-TYPE HEADERS
=============================================================================

Runs a handful of real-world Content-Type values through the parser and
shows what comes out. Run it with:

    python main.py

Set MEDIATYPE_LOG_LEVEL=DEBUG to also see why malformed values and
unknown charsets were rejected.

=============================================================================
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / "src"))

from mediatype import (  # noqa: E402
    MediaTypeConfig,
    MediaTypeParseError,
    content_type_for_path,
    content_type_from_headers,
    parse,
)
from mediatype.config import configure_logging  # noqa: E402


SAMPLES = [
    "text/plain",
    "text/html; charset=UTF-8",
    'multipart/form-data; boundary="----WebKitFormBoundary7MA4YWxk"',
    "application/json;charset='utf-8'",
    "TEXT/Plain; Charset=latin1; charset=ascii",
    "text/plain;",
    "text/plain; charset=klingon",
    "text",
    "text/plain; =oops",
]


def describe(text: str, config: MediaTypeConfig) -> str:
    try:
        media_type = parse(text)
    except MediaTypeParseError as e:
        return f"  ✗ {e.kind.value}: {e}"

    lines = [
        f"  essence:    {media_type.essence}",
        f"  parameters: {list(media_type.parameters)}",
        f"  charset:    {media_type.charset(config.default_charset)}",
    ]
    return "\n".join(lines)


def main() -> None:
    config = MediaTypeConfig.from_env()
    config.validate()
    configure_logging(config)

    print("=" * 70)
    print("PARSING")
    print("=" * 70)
    for text in SAMPLES:
        print(f"\n{text!r}")
        print(describe(text, config))

    print()
    print("=" * 70)
    print("EQUALITY IS TEXTUAL")
    print("=" * 70)
    a, b = parse("TEXT/PLAIN"), parse("text/plain")
    print(f"  {a!r} == {b!r}: {a == b}")
    print(f"  same essence: {a.essence == b.essence}")

    print()
    print("=" * 70)
    print("HEADERS AND FILES")
    print("=" * 70)
    headers = {"Content-Type": "text/csv; charset=iso-8859-1"}
    print(f"  from headers:   {content_type_from_headers(headers, config)!r}")
    print(f"  broken header:  {content_type_from_headers({'content-type': 'nope'}, config)!r}")
    for name in ("index.html", "logo.png", "unknown.xyz"):
        print(f"  {name:<15} → {content_type_for_path(name, config=config)}")


if __name__ == "__main__":
    main()
