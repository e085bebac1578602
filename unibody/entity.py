from __future__ import annotations

import io
import logging
import zlib
from http.client import HTTPException
from typing import BinaryIO

from .transport import EntityLike

logger = logging.getLogger(__name__)

# Errors raised while pulling (and possibly gunzipping) bytes off an entity.
READ_ERRORS = (OSError, EOFError, zlib.error, HTTPException)


class Entity:
    """
    Response entity backed by a byte string or a readable binary stream.

    ``get_content()`` returns the same stream on every call, so a stream
    is readable only once.
    """

    def __init__(
        self,
        content: bytes | BinaryIO | None,
        content_type: str | None = None,
        content_encoding: str | None = None,
        content_length: int | None = None,
    ) -> None:
        if isinstance(content, (bytes, bytearray)):
            if content_length is None:
                content_length = len(content)
            content = io.BytesIO(bytes(content))
        self._content = content
        self.content_type = content_type
        self.content_encoding = content_encoding
        self.content_length = content_length

    def get_content(self) -> BinaryIO | None:
        return self._content

    def __repr__(self) -> str:
        return f"<Entity {self.content_type or 'unknown'} {self.content_length} bytes>"


def consume(entity: EntityLike | None, chunk_size: int = 8192) -> None:
    """
    Read the rest of the entity content and close it.

    Errors propagate to the caller.
    """
    if entity is None:
        return
    stream = entity.get_content()
    if stream is None:
        return
    try:
        while stream.read(chunk_size):
            pass
    except ValueError:
        # Reading a closed stream; nothing left to drain.
        pass
    stream.close()


def consume_quietly(entity: EntityLike | None, chunk_size: int = 8192) -> None:
    """Best-effort variant of :func:`consume` that never raises I/O errors."""
    try:
        consume(entity, chunk_size)
    except READ_ERRORS:
        logger.debug("Ignoring error while draining entity %r", entity, exc_info=True)


def discard_quietly(entity: EntityLike | None) -> None:
    """Close the entity content without reading from it, ignoring I/O errors."""
    if entity is None:
        return
    try:
        stream = entity.get_content()
        if stream is not None:
            stream.close()
    except READ_ERRORS:
        logger.debug("Ignoring error while discarding entity %r", entity, exc_info=True)
