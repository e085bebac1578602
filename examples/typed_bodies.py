"""
Example: Materialize the same endpoint as bytes, text, JSON and a custom type.

Buffered representations release the connection before materialize()
returns, so each request can reuse one http.client connection.
"""

import http.client

from unibody import (
    RAW_BYTES,
    STRUCTURED_DOCUMENT,
    TEXT,
    CustomType,
    HTTPClientResponse,
    JsonObjectMapper,
    ResponseMaterializer,
)


class Slideshow:
    def __init__(self, slideshow):
        self.title = slideshow["title"]
        self.slides = slideshow["slides"]


def main():
    materializer = ResponseMaterializer(object_mapper=JsonObjectMapper())
    conn = http.client.HTTPSConnection("httpbin.org", timeout=10)

    for representation in (RAW_BYTES, TEXT, STRUCTURED_DOCUMENT, CustomType(Slideshow)):
        conn.request("GET", "/json", headers={"Accept-Encoding": "gzip"})
        response = materializer.materialize(HTTPClientResponse(conn.getresponse()), representation)
        print(f"{representation!r}: [{response.status}] {response.status_text}")
        print(f"   Content-Encoding: {response.headers.get_first('Content-Encoding', 'none')}")
        if isinstance(representation, CustomType):
            print(f"   Title: {response.body.title} ({len(response.body.slides)} slides)")
        else:
            print(f"   Body: {str(response.body)[:80]}")

    conn.close()


if __name__ == "__main__":
    main()
