"""
Adapters for the standard library's ``http.client``.
"""

from __future__ import annotations

import http.client

from .entity import Entity

# Statuses that never carry a message body.
NO_BODY_STATUSES = frozenset({204, 304})


class HTTPClientResponse:
    """
    Exposes an ``http.client.HTTPResponse`` as a transport response.

    Args:
        response: Response returned by ``HTTPConnection.getresponse()``
        request_method: Method of the request, HEAD responses have no entity
    """

    def __init__(self, response: http.client.HTTPResponse, request_method: str = "GET") -> None:
        self._response = response
        self.status_code = response.status
        self.reason = response.reason
        self.headers: list[tuple[str, str]] = response.getheaders()
        self.entity: Entity | None = None
        if self._has_body(request_method):
            self.entity = Entity(
                response,
                content_type=response.getheader("Content-Type"),
                content_encoding=response.getheader("Content-Encoding"),
                content_length=response.length,
            )

    def _has_body(self, request_method: str) -> bool:
        if request_method.upper() == "HEAD":
            return False
        if 100 <= self.status_code < 200:
            return False
        return self.status_code not in NO_BODY_STATUSES

    def __repr__(self) -> str:
        return f"<HTTPClientResponse [{self.status_code}]>"


class HTTPConnectionHandle:
    """Releases an ``http.client.HTTPConnection`` by closing it."""

    def __init__(self, connection: http.client.HTTPConnection) -> None:
        self.connection = connection
        self.released = False

    def release_connection(self) -> None:
        self.connection.close()
        self.released = True
