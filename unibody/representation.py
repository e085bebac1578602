"""
Body representations a caller can request from the materializer.

The caller picks one variant up front instead of passing a class to be
compared reflectively.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Decoder = Callable[[str, Any], Any]


class Representation:
    """Base class of the body representation variants."""

    name = "Representation"
    is_stream = False

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other)

    def __hash__(self) -> int:
        return hash(type(self))

    def __repr__(self) -> str:
        return self.name


class RawBytes(Representation):
    """The buffered body as ``bytes``."""

    name = "RawBytes"


class StructuredDocument(Representation):
    """The buffered body parsed into a :class:`~unibody.json_node.JsonNode`."""

    name = "StructuredDocument"


class Text(Representation):
    """The buffered body decoded with the resolved charset, untrimmed."""

    name = "Text"


class ByteStream(Representation):
    """
    The live body stream, not buffered.

    The response holding it must be closed to release the connection.
    """

    name = "ByteStream"
    is_stream = True


class CustomType(Representation):
    """
    The buffered body decoded into ``target``.

    Args:
        target: Type handed to the decoder
        decoder: Optional ``decoder(text, target)`` overriding the
            materializer's object mapper for this request
    """

    name = "CustomType"

    def __init__(self, target: Any, decoder: Decoder | None = None) -> None:
        self.target = target
        self.decoder = decoder

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CustomType):
            return False
        return self.target is other.target and self.decoder is other.decoder

    def __hash__(self) -> int:
        return hash((CustomType, id(self.target), id(self.decoder)))

    def __repr__(self) -> str:
        target = getattr(self.target, "__name__", repr(self.target))
        return f"CustomType({target})"


RAW_BYTES = RawBytes()
STRUCTURED_DOCUMENT = StructuredDocument()
TEXT = Text()
BYTE_STREAM = ByteStream()
