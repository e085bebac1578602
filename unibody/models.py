from __future__ import annotations

import logging
from typing import Any, BinaryIO

from .entity import READ_ERRORS, consume
from .errors import ReleaseError
from .headers import Headers
from .representation import Representation
from .transport import EntityLike, RequestHandle

logger = logging.getLogger(__name__)


class Response:
    """
    Materialized HTTP response.

    Built by :class:`~unibody.materializer.ResponseMaterializer`; nothing
    on it can be reassigned afterwards. ``raw_body`` and ``body`` are None
    when the transport response carried no entity.

    A response materialized as a byte stream keeps its connection open
    until :meth:`close` is called. Callers that request a stream must
    close it, preferably with ``with``.
    """

    def __init__(
        self,
        status: int,
        status_text: str,
        headers: Headers,
        representation: Representation,
        raw_body: BinaryIO | None = None,
        body: Any = None,
        entity: EntityLike | None = None,
        request: RequestHandle | None = None,
    ) -> None:
        self._status = status
        self._status_text = status_text
        self._headers = headers
        self._representation = representation
        self._raw_body = raw_body
        self._body = body
        self._entity = entity
        self._request = request
        # Buffered responses were released during materialization.
        self._closed = not representation.is_stream

    @property
    def status(self) -> int:
        return self._status

    @property
    def status_text(self) -> str:
        return self._status_text

    @property
    def headers(self) -> Headers:
        """Response headers with the same case as the server sent them."""
        return self._headers

    @property
    def raw_body(self) -> BinaryIO | None:
        return self._raw_body

    @property
    def body(self) -> Any:
        return self._body

    @property
    def representation(self) -> Representation:
        return self._representation

    @property
    def closed(self) -> bool:
        return self._closed

    def get_status(self) -> int:
        return self._status

    def get_status_text(self) -> str:
        return self._status_text

    def get_headers(self) -> Headers:
        return self._headers

    def get_raw_body(self) -> BinaryIO | None:
        return self._raw_body

    def get_body(self) -> Any:
        return self._body

    def close(self) -> None:
        """
        Release the connection behind a streamed body.

        Releases the request's connection, then drains and closes the
        entity. Errors are raised as :class:`ReleaseError`. Once a close
        has succeeded, later calls do nothing.
        """
        if self._closed:
            return
        if self._request is not None:
            try:
                self._request.release_connection()
            except Exception as exc:
                raise self._release_error(exc) from exc
        try:
            consume(self._entity)
        except READ_ERRORS as exc:
            raise self._release_error(exc) from exc
        if self._raw_body is not None:
            self._raw_body.close()
        self._closed = True
        logger.debug("Released streamed response [%s]", self._status)

    def _release_error(self, exc: BaseException) -> ReleaseError:
        return ReleaseError(
            f"Failed to release connection: {exc}",
            representation=self._representation.name,
            entity_present=self._entity is not None,
        )

    def __enter__(self) -> Response:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<Response [{self._status}] {self._representation!r}>"
