r"""Shared test helpers for the client tests.

This module contains an in-memory echo application used through
``httpx.MockTransport`` by the unit tests and served over real sockets
by the integration tests, plus a small multipart parser used to check
upload bodies.
"""

from __future__ import annotations

__all__ = [
    "BASE_PATH",
    "ERROR_BODY",
    "FILE_CONTENT",
    "create_async_client",
    "create_client",
    "echo_app",
    "parse_multipart",
]

import json
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import httpx

from httpwrap import AsyncClient, Client

if TYPE_CHECKING:
    from collections.abc import Callable

BASE_PATH = "http://testserver"
FILE_CONTENT = b"I am a nice file"
ERROR_BODY = b'{"error": "not found"}'

_NAME_PATTERN = re.compile(rb'(?<![A-Za-z])name="([^"]*)"')
_FILENAME_PATTERN = re.compile(rb'filename="([^"]*)"')


@dataclass
class FormPart:
    """A parsed multipart part.

    Attributes:
        name: The form field name.
        filename: The filename, or ``None`` for plain fields.
        content: The raw part content.
    """

    name: str
    filename: str | None
    content: bytes


def parse_multipart(content_type: str, body: bytes) -> dict[str, FormPart]:
    """Parse a multipart/form-data body into its parts, keyed by field
    name."""
    boundary = content_type.split("boundary=", 1)[1].strip('"').encode()
    parts = {}
    for segment in body.split(b"--" + boundary)[1:]:
        if segment.startswith(b"--"):
            break
        raw_headers, _, content = segment[2:].partition(b"\r\n\r\n")
        name = _NAME_PATTERN.search(raw_headers)
        filename = _FILENAME_PATTERN.search(raw_headers)
        part = FormPart(
            name=name.group(1).decode(),
            filename=filename.group(1).decode() if filename else None,
            content=content[:-2],
        )
        parts[part.name] = part
    return parts


def _json_response(status_code: int, value: Any, headers: dict[str, str] | None = None) -> httpx.Response:
    return httpx.Response(status_code, content=json.dumps(value).encode() + b"\n", headers=headers)


def echo_app(request: httpx.Request) -> httpx.Response:
    """Answer requests the way the test endpoints do.

    Routes:
        ``/a``: echoes the method as a JSON string and in ``X-SOME``.
        ``/b``: echoes the uploaded ``file`` part as a JSON string.
        ``/form``: echoes every multipart part as a JSON object.
        ``/echo``: echoes method, headers and body as a JSON object.
        ``/raw``: echoes the request body as is.
        ``/empty``: answers 204 without a body.
        ``/text``: answers a body that is not JSON.
        ``/missing``: answers 404 with a JSON error body.
        ``/large-error``: answers 500 with a 1000-byte body.
    """
    path = request.url.path
    method = request.method
    if path == "/a":
        return _json_response(200, method, headers={"X-SOME": method})
    if path == "/b":
        parts = parse_multipart(request.headers["Content-Type"], request.content)
        if "file" not in parts:
            return httpx.Response(500, content=b"no file part")
        return _json_response(200, parts["file"].content.decode(), headers={"X-SOME": method})
    if path == "/form":
        parts = parse_multipart(request.headers["Content-Type"], request.content)
        return _json_response(
            200,
            {
                name: {"filename": part.filename, "content": part.content.decode()}
                for name, part in parts.items()
            },
        )
    if path == "/echo":
        return _json_response(
            200,
            {
                "method": method,
                "headers": [list(item) for item in request.headers.multi_items()],
                "body": request.content.decode(),
            },
        )
    if path == "/raw":
        return httpx.Response(200, content=request.content, headers={"X-SOME": method})
    if path == "/empty":
        return httpx.Response(204)
    if path == "/text":
        return httpx.Response(200, content=b"not json")
    if path == "/large-error":
        return httpx.Response(500, content=b"x" * 1000)
    return httpx.Response(404, content=ERROR_BODY)


def create_client(
    handler: Callable[[httpx.Request], httpx.Response] = echo_app, **kwargs: Any
) -> Client:
    """Create a Client whose transport is served by ``handler``."""
    transport = httpx.Client(transport=httpx.MockTransport(handler))
    return Client(BASE_PATH, client=transport, **kwargs)


def create_async_client(
    handler: Callable[[httpx.Request], httpx.Response] = echo_app, **kwargs: Any
) -> AsyncClient:
    """Create an AsyncClient whose transport is served by ``handler``."""
    transport = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return AsyncClient(BASE_PATH, client=transport, **kwargs)
