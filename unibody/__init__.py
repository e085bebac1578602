from unibody.materializer import ResponseMaterializer
from unibody.models import Response
from unibody.headers import Headers
from unibody.json_node import JsonNode
from unibody.mapper import JsonObjectMapper, ObjectMapper
from unibody.entity import Entity, consume, consume_quietly, discard_quietly
from unibody.transport import BasicTransportResponse
from unibody.adapters import HTTPClientResponse, HTTPConnectionHandle
from unibody.representation import (
    Representation,
    RawBytes,
    StructuredDocument,
    Text,
    ByteStream,
    CustomType,
    RAW_BYTES,
    STRUCTURED_DOCUMENT,
    TEXT,
    BYTE_STREAM,
)
from unibody.errors import (
    UnibodyError,
    MaterializationError,
    TransportIOError,
    DecodeError,
    UnsupportedRepresentationError,
    ReleaseError,
)

__all__ = [
    "ResponseMaterializer",
    "Response",
    "Headers",
    "JsonNode",
    "JsonObjectMapper",
    "ObjectMapper",
    "Entity",
    "consume",
    "consume_quietly",
    "discard_quietly",
    "BasicTransportResponse",
    "HTTPClientResponse",
    "HTTPConnectionHandle",
    "Representation",
    "RawBytes",
    "StructuredDocument",
    "Text",
    "ByteStream",
    "CustomType",
    "RAW_BYTES",
    "STRUCTURED_DOCUMENT",
    "TEXT",
    "BYTE_STREAM",
    "UnibodyError",
    "MaterializationError",
    "TransportIOError",
    "DecodeError",
    "UnsupportedRepresentationError",
    "ReleaseError",
]
