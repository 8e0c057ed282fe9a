r"""Asynchronous convenience client.

This module provides ``AsyncClient``, the asyncio counterpart of
``Client``. It wraps ``httpx.AsyncClient`` and the asyncio websocket
client of ``websockets`` and shares the URL, header, multipart and
response handling helpers with the synchronous client.
"""

from __future__ import annotations

__all__ = ["AsyncClient"]

import asyncio
import logging
import time
from typing import TYPE_CHECKING, Any

import httpx
from websockets.asyncio.client import connect as ws_connect

from httpwrap.core.codec import JSON_CONTENT_TYPE, METHODS_WITH_BODY, decode_json, encode_json
from httpwrap.core.config import ClientConfig
from httpwrap.core.headers import merge_headers
from httpwrap.core.multipart import build_multipart_request
from httpwrap.core.url import resolve_url, to_websocket_url
from httpwrap.result import Result
from httpwrap.utils.response import handle_response_async
from httpwrap.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path
    from types import TracebackType
    from typing import Self

    from websockets.asyncio.client import ClientConnection
    from websockets.http11 import Response as WebSocketResponse

    from httpwrap.core.headers import HeadersInput

logger: logging.Logger = logging.getLogger(__name__)


class AsyncClient:
    r"""Asynchronous convenience client around ``httpx.AsyncClient``.

    ``AsyncClient`` exposes the same operations as ``Client`` as
    coroutines. The multipart file is read before the request is sent,
    exactly like the synchronous client.

    Args:
        base_path: The URL prefix for relative request targets.
        headers: The default headers sent with every request.
        config: Optional ClientConfig with transport settings.
            If ``None``, a default ClientConfig is used.
        client: Optional httpx.AsyncClient instance to use for requests.
            If ``None``, a new client is created from ``config``.

    Example:
        ```pycon
        >>> import asyncio
        >>> from httpwrap import AsyncClient
        >>> async def main():
        ...     async with AsyncClient(base_path="https://api.example.com") as client:
        ...         return (await client.json_get("/users/1")).data
        ...
        >>> asyncio.run(main())  # doctest: +SKIP

        ```
    """

    def __init__(
        self,
        base_path: str = "",
        headers: HeadersInput | None = None,
        *,
        config: ClientConfig | None = None,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self.base_path = base_path
        self.headers = headers
        self._config: ClientConfig = config or ClientConfig()
        self._owns_client = client is None
        self._client: httpx.AsyncClient = client or httpx.AsyncClient(
            **self._config.transport_kwargs()
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_path={self.base_path!r})"

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    @property
    def headers(self) -> httpx.Headers:
        """The default headers sent with every request."""
        return self._headers

    @headers.setter
    def headers(self, headers: HeadersInput | None) -> None:
        self._headers = httpx.Headers(headers)

    @property
    def config(self) -> ClientConfig:
        """The transport configuration."""
        return self._config

    def add_header(self, name: str, value: str) -> None:
        """Append a value to a default header, keeping existing values."""
        self._headers = httpx.Headers([*self._headers.multi_items(), (name, value)])

    async def aclose(self) -> None:
        """Close the underlying httpx client if this client created it."""
        if self._owns_client:
            await self._client.aclose()

    def resolve_url(self, target: str) -> str:
        """Resolve a request target against ``base_path``."""
        return resolve_url(self.base_path, target)

    async def request(
        self,
        method: str,
        target: str,
        *,
        content: bytes | None = None,
        headers: HeadersInput | None = None,
        stream: bool = False,
    ) -> httpx.Response:
        r"""Send an HTTP request.

        Args:
            method: The HTTP method.
            target: An absolute URL or a path relative to ``base_path``.
            content: Optional request body. Empty bodies are not sent.
            headers: Optional request-specific headers. They replace
                default headers with the same name.
            stream: If ``True``, the response body is not read and the
                caller must close the response.

        Returns:
            The ``httpx.Response``.

        Raises:
            HttpRequestError: If the response status code is >= 400.
            httpx.HTTPError: If the request cannot be built or sent.
        """
        request = self._client.build_request(
            method,
            self.resolve_url(target),
            content=content or None,
            headers=merge_headers(self._headers, headers),
        )
        return await self._send(request, stream=stream)

    async def request_json(self, method: str, target: str, payload: Any = None) -> Result[Any]:
        """Send a request with a JSON body and decode the JSON response.

        For POST, PUT and PATCH the payload is serialized to JSON and sent
        as the body; other methods send no body and ignore ``payload``.
        """
        method = method.upper()
        content = None
        headers = None
        if method in METHODS_WITH_BODY:
            content = encode_json(payload)
            headers = {"Content-Type": JSON_CONTENT_TYPE}
        response = await self.request(method, target, content=content, headers=headers)
        return Result(data=decode_json(response.content), response=response)

    async def json_get(self, target: str) -> Result[Any]:
        return await self.request_json("GET", target)

    async def json_delete(self, target: str) -> Result[Any]:
        return await self.request_json("DELETE", target)

    async def json_post(self, target: str, payload: Any = None) -> Result[Any]:
        return await self.request_json("POST", target, payload)

    async def json_put(self, target: str, payload: Any = None) -> Result[Any]:
        return await self.request_json("PUT", target, payload)

    async def json_patch(self, target: str, payload: Any = None) -> Result[Any]:
        return await self.request_json("PATCH", target, payload)

    async def request_raw(
        self, method: str, target: str, content: bytes | None = None
    ) -> Result[bytes]:
        """Send a request and return the response body as bytes."""
        response = await self.request(method, target, content=content)
        return Result(data=response.content, response=response)

    async def raw_get(self, target: str) -> Result[bytes]:
        return await self.request_raw("GET", target)

    async def raw_delete(self, target: str) -> Result[bytes]:
        return await self.request_raw("DELETE", target)

    async def raw_post(self, target: str, content: bytes | None = None) -> Result[bytes]:
        return await self.request_raw("POST", target, content)

    async def raw_put(self, target: str, content: bytes | None = None) -> Result[bytes]:
        return await self.request_raw("PUT", target, content)

    async def raw_head(self, target: str) -> httpx.Response:
        """Send a HEAD request without reading any response body."""
        response = await self.request("HEAD", target, stream=True)
        await response.aclose()
        return response

    async def multipart(
        self,
        target: str,
        fields: Mapping[str, str] | None = None,
        file_field: str | None = None,
        file_path: str | Path | None = None,
    ) -> httpx.Response:
        """Send a multipart/form-data POST request.

        The file is only sent when both ``file_field`` and ``file_path``
        are given. The body is fully built in a worker thread before the
        request is sent, so reading the file does not block the event loop.
        """
        request = await asyncio.to_thread(
            build_multipart_request,
            self._client.build_request,
            self.resolve_url(target),
            headers=merge_headers(self._headers, exclude=("Content-Type",)),
            fields=fields,
            file_field=file_field,
            file_path=file_path,
        )
        return await self._send(request)

    async def multipart_json(
        self,
        target: str,
        fields: Mapping[str, str] | None = None,
        file_field: str | None = None,
        file_path: str | Path | None = None,
    ) -> Result[Any]:
        """Send a multipart/form-data POST request and decode the JSON
        response."""
        response = await self.multipart(target, fields, file_field, file_path)
        return Result(data=decode_json(response.content), response=response)

    async def websocket(self, target: str) -> tuple[ClientConnection, WebSocketResponse]:
        r"""Open a websocket connection.

        Args:
            target: An absolute URL or a path relative to ``base_path``.

        Returns:
            A tuple of the open connection and the handshake response.

        Raises:
            ValueError: If the resolved URL has no websocket equivalent.
            websockets.exceptions.InvalidHandshake: If the handshake fails.
            OSError: If the connection cannot be established.
            TimeoutError: If the handshake does not complete in time.
        """
        url = to_websocket_url(self.resolve_url(target))
        logger.debug(f"Opening websocket connection to {url}")
        connection = await ws_connect(
            url,
            additional_headers=self._headers.multi_items(),
            open_timeout=self._config.websocket_open_timeout,
        )
        return connection, connection.response

    async def _send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        method, url = request.method, str(request.url)
        logger.debug(f"Sending {method} request to {url}")
        start_time = time.time()
        try:
            response = await self._client.send(request, stream=stream)
        except httpx.RequestError as exc:
            logger.debug(f"{method} request to {url} failed with {type(exc).__name__}: {exc}")
            raise
        await handle_response_async(
            response,
            method=method,
            url=url,
            max_error_body_size=self._config.max_error_body_size,
        )
        log_structured(
            logger,
            logging.DEBUG,
            f"{method} request to {url} completed with status {response.status_code}",
            method=method,
            url=url,
            status_code=response.status_code,
            elapsed=time.time() - start_time,
        )
        return response
