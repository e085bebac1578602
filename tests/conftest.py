"""Pytest configuration and fixtures."""

import io

import pytest

from unibody.entity import Entity
from unibody.materializer import ResponseMaterializer
from unibody.transport import BasicTransportResponse


class TrackingStream(io.BytesIO):
    """BytesIO that records how many bytes were pulled from it."""

    def __init__(self, data: bytes) -> None:
        super().__init__(data)
        self.bytes_read = 0

    def read(self, size=-1):
        chunk = super().read(size)
        self.bytes_read += len(chunk)
        return chunk


class FailingStream(io.RawIOBase):
    """Stream whose reads always fail with an I/O error."""

    def readable(self):
        return True

    def read(self, size=-1):
        raise OSError("connection reset by peer")


@pytest.fixture
def materializer():
    """Create a materializer without an object mapper."""
    return ResponseMaterializer()


@pytest.fixture
def make_response():
    """Build an in-memory transport response."""

    def _make(
        body=b"",
        content_type="text/plain; charset=utf-8",
        content_encoding=None,
        headers=None,
        status_code=200,
        reason="OK",
        entity=True,
    ):
        if headers is None:
            headers = [("Content-Type", content_type)] if content_type else []
        ent = None
        if entity:
            ent = Entity(body, content_type=content_type, content_encoding=content_encoding)
        return BasicTransportResponse(status_code, reason, headers, ent)

    return _make


@pytest.fixture
def sample_response(make_response):
    """Create a sample JSON transport response."""
    return make_response(
        body=b'{"key":"val"}',
        content_type="application/json",
        headers=[("Content-Type", "application/json"), ("Content-Length", "13")],
    )


@pytest.fixture
def tracking_stream():
    """Factory for streams that count the bytes read from them."""
    return TrackingStream


@pytest.fixture
def failing_stream():
    """Stream whose reads fail."""
    return FailingStream()
