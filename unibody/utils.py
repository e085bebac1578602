from __future__ import annotations

import re
from typing import BinaryIO

_CHARSET_RE = re.compile(r"""charset\s*=\s*["']?([^\s;"']*)""", re.IGNORECASE)


def get_charset_from_content_type(content_type: str | None) -> str | None:
    """
    Extract the ``charset`` parameter from a Content-Type value.

    Returns None when the header is missing or has no charset parameter;
    an empty string when the parameter is present but blank.
    """
    if not content_type:
        return None
    match = _CHARSET_RE.search(content_type)
    if match is None:
        return None
    return match.group(1).strip()


def resolve_charset(content_type: str | None, default: str = "utf-8") -> str:
    charset = get_charset_from_content_type(content_type)
    if charset:
        return charset
    return default


def read_all(stream: BinaryIO, chunk_size: int = 8192) -> bytes:
    """Read a binary stream until EOF."""
    chunks: list[bytes] = []
    while True:
        chunk = stream.read(chunk_size)
        if not chunk:
            break
        chunks.append(chunk)
    return b"".join(chunks)
