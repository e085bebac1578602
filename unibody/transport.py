"""
Interfaces consumed from the HTTP engine that produced the response.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import BinaryIO, Protocol


class EntityLike(Protocol):
    content_type: str | None
    content_encoding: str | None

    def get_content(self) -> BinaryIO | None: ...


class TransportResponse(Protocol):
    status_code: int
    reason: str
    headers: Iterable[tuple[str, str]]
    entity: EntityLike | None


class RequestHandle(Protocol):
    def release_connection(self) -> None: ...


class BasicTransportResponse:
    """
    Completed transport response held in memory.

    Useful for engines that do not expose their own response type, and
    for tests.
    """

    def __init__(
        self,
        status_code: int,
        reason: str,
        headers: Iterable[tuple[str, str]],
        entity: EntityLike | None = None,
    ) -> None:
        self.status_code = status_code
        self.reason = reason
        self.headers: list[tuple[str, str]] = list(headers)
        self.entity = entity

    def __repr__(self) -> str:
        return f"<BasicTransportResponse [{self.status_code}]>"
