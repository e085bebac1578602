from __future__ import annotations

import codecs
import io
import logging
from typing import Any, BinaryIO

from .compression import is_gzipped, wrap_gzip
from .entity import READ_ERRORS, consume_quietly, discard_quietly
from .errors import (
    DecodeError,
    MaterializationError,
    TransportIOError,
    UnsupportedRepresentationError,
)
from .headers import Headers
from .json_node import JsonNode
from .mapper import ObjectMapper
from .models import Response
from .representation import (
    ByteStream,
    CustomType,
    RawBytes,
    Representation,
    StructuredDocument,
    Text,
)
from .transport import EntityLike, RequestHandle, TransportResponse
from .utils import read_all, resolve_charset

logger = logging.getLogger(__name__)


class ResponseMaterializer:
    """
    Turns completed transport responses into :class:`Response` values.

    Every representation except :class:`ByteStream` is read fully into
    memory and the entity is drained right away, so the transport can
    reuse the connection as soon as :meth:`materialize` returns. A byte
    stream is handed over unread and the connection stays busy until the
    response is closed.

    Args:
        object_mapper: Decoder used for :class:`CustomType` requests that
            carry no decoder of their own
        default_charset: Charset used when the Content-Type names none
        chunk_size: Read size used when buffering the body
    """

    def __init__(
        self,
        object_mapper: ObjectMapper | None = None,
        default_charset: str = "utf-8",
        chunk_size: int = 8192,
    ) -> None:
        self.object_mapper = object_mapper
        self.default_charset = default_charset
        self.chunk_size = chunk_size

    def materialize(
        self,
        transport_response: TransportResponse,
        representation: Representation,
        request: RequestHandle | None = None,
    ) -> Response:
        """
        Build a Response holding the body in the requested representation.

        Args:
            transport_response: Completed response from the HTTP engine
            representation: Body shape the caller wants
            request: Handle whose connection is released when a streamed
                response is closed

        Returns:
            The materialized response

        Raises:
            TransportIOError: Reading or gunzipping the entity failed
            DecodeError: The body could not be decoded
            UnsupportedRepresentationError: No decoder for the representation
        """
        headers = Headers(transport_response.headers)
        status = transport_response.status_code
        status_text = transport_response.reason or ""
        entity = transport_response.entity
        name = getattr(representation, "name", repr(representation))

        logger.debug("Materializing [%s] response as %s", status, name)

        if not isinstance(representation, Representation):
            discard_quietly(entity)
            raise UnsupportedRepresentationError(
                f"Unknown representation {representation!r}",
                representation=name,
                entity_present=entity is not None,
            )

        if entity is None:
            return Response(
                status, status_text, headers, representation,
                request=request if representation.is_stream else None,
            )

        try:
            decoder = self._custom_decoder(representation)
        except UnsupportedRepresentationError:
            # Rejected before any byte of the body is read.
            discard_quietly(entity)
            raise

        try:
            raw_body, body = self._read_body(entity, representation, decoder)
        except MaterializationError:
            consume_quietly(entity, self.chunk_size)
            raise

        if representation.is_stream:
            logger.debug("Deferring connection release until close()")
            return Response(
                status, status_text, headers, representation,
                raw_body=raw_body, body=body, entity=entity, request=request,
            )

        consume_quietly(entity, self.chunk_size)
        return Response(
            status, status_text, headers, representation,
            raw_body=raw_body, body=body,
        )

    def _custom_decoder(self, representation: Representation) -> Any:
        if isinstance(representation, (RawBytes, StructuredDocument, Text, ByteStream)):
            return None
        if not isinstance(representation, CustomType):
            raise UnsupportedRepresentationError(
                f"No decoder for representation {representation!r}",
                representation=representation.name,
                entity_present=True,
            )
        if representation.decoder is not None:
            return representation.decoder
        if self.object_mapper is not None:
            return self.object_mapper.read_value
        raise UnsupportedRepresentationError(
            "Only RawBytes, StructuredDocument, Text and ByteStream are supported "
            "without a decoder; pass one to CustomType or configure an object_mapper",
            representation=representation.name,
            entity_present=True,
        )

    def _read_body(
        self,
        entity: EntityLike,
        representation: Representation,
        decoder: Any,
    ) -> tuple[BinaryIO | None, Any]:
        name = representation.name
        charset = resolve_charset(entity.content_type, self.default_charset)

        try:
            stream = entity.get_content()
            if stream is not None and is_gzipped(entity.content_encoding):
                logger.debug("Wrapping %s entity in gzip decoder", entity.content_encoding)
                stream = wrap_gzip(stream)

            if isinstance(representation, ByteStream):
                return stream, stream

            content = read_all(stream, self.chunk_size) if stream is not None else b""
        except READ_ERRORS as exc:
            raise TransportIOError(
                f"Failed to read response entity: {exc}",
                representation=name,
                entity_present=True,
            ) from exc

        logger.debug("Buffered %d bytes of response body", len(content))
        raw_body = io.BytesIO(content)

        if isinstance(representation, RawBytes):
            return raw_body, content

        text = _decode_text(content, charset, name)
        if isinstance(representation, Text):
            return raw_body, text
        if isinstance(representation, StructuredDocument):
            try:
                return raw_body, JsonNode(text.strip())
            except ValueError as exc:
                raise DecodeError(
                    f"Failed to parse structured document: {exc}",
                    representation=name,
                    entity_present=True,
                ) from exc

        try:
            return raw_body, decoder(text, representation.target)
        except Exception as exc:
            raise DecodeError(
                f"Failed to decode body into {representation!r}: {exc}",
                representation=name,
                entity_present=True,
            ) from exc


def _decode_text(content: bytes, charset: str, name: str) -> str:
    try:
        codecs.lookup(charset)
    except LookupError as exc:
        raise DecodeError(
            f"Unsupported charset {charset!r}",
            representation=name,
            entity_present=True,
        ) from exc
    return content.decode(charset, errors="replace")

