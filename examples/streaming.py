#!/usr/bin/env python3
"""
Example: Stream a large response without loading the body into memory.

A ByteStream response owns its connection until it is closed; the
with-block releases it even if processing fails.
"""
from __future__ import annotations

import http.client

from unibody import BYTE_STREAM, HTTPClientResponse, HTTPConnectionHandle, ResponseMaterializer


def stream_bytes():
    """Stream 50KB of random bytes and count them chunk by chunk."""
    conn = http.client.HTTPSConnection("httpbin.org", timeout=10)
    conn.request("GET", "/stream-bytes/50000")
    transport = HTTPClientResponse(conn.getresponse())

    with ResponseMaterializer().materialize(
        transport, BYTE_STREAM, request=HTTPConnectionHandle(conn)
    ) as response:
        print(f"Status: {response.status}")
        total_bytes = 0
        chunk_count = 0
        while chunk := response.raw_body.read(8192):
            total_bytes += len(chunk)
            chunk_count += 1

    print(f"Received {total_bytes} bytes in {chunk_count} chunks")


def stream_gzip():
    """Stream a gzip-encoded body; it is decompressed as it is read."""
    conn = http.client.HTTPSConnection("httpbin.org", timeout=10)
    conn.request("GET", "/gzip")
    transport = HTTPClientResponse(conn.getresponse())

    with ResponseMaterializer().materialize(
        transport, BYTE_STREAM, request=HTTPConnectionHandle(conn)
    ) as response:
        print(f"Content-Encoding: {response.headers.get_first('Content-Encoding')}")
        print(response.raw_body.read().decode("utf-8")[:200])


if __name__ == "__main__":
    stream_bytes()
    stream_gzip()
