"""
Content-Encoding handling for response bodies.

Only gzip is decoded. Any other encoding is passed through unmodified.
"""

from __future__ import annotations

import gzip
from typing import BinaryIO

GZIP_TOKENS = frozenset({"gzip", "x-gzip"})


def is_gzipped(content_encoding: str | None) -> bool:
    """
    Check a Content-Encoding value for a gzip token.

    Args:
        content_encoding: Value of the Content-Encoding header, may be None

    Returns:
        True if the value is a single gzip token (case-insensitive).
        Stacked encodings such as "gzip, br" are not decoded.
    """
    if not content_encoding:
        return False
    tokens = [t.strip().lower() for t in content_encoding.split(",") if t.strip()]
    return len(tokens) == 1 and tokens[0] in GZIP_TOKENS


def wrap_gzip(stream: BinaryIO) -> BinaryIO:
    """Wrap a compressed byte source in a lazily decoding gzip reader."""
    return gzip.GzipFile(fileobj=stream, mode="rb")
