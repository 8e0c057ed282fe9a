r"""Synchronous convenience client.

This module provides ``Client``, a thin wrapper around ``httpx.Client``
that resolves relative targets against a base path, merges default
headers into every request, and offers JSON, raw-bytes, multipart and
websocket helpers on top of a single request primitive.
"""

from __future__ import annotations

__all__ = ["Client"]

import logging
import time
from typing import TYPE_CHECKING, Any

import httpx
from websockets.sync.client import connect as ws_connect

from httpwrap.core.codec import JSON_CONTENT_TYPE, METHODS_WITH_BODY, decode_json, encode_json
from httpwrap.core.config import ClientConfig
from httpwrap.core.headers import merge_headers
from httpwrap.core.multipart import build_multipart_request
from httpwrap.core.url import resolve_url, to_websocket_url
from httpwrap.result import Result
from httpwrap.utils.response import handle_response
from httpwrap.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path
    from types import TracebackType
    from typing import Self

    from websockets.http11 import Response as WebSocketResponse
    from websockets.sync.client import ClientConnection

    from httpwrap.core.headers import HeadersInput

logger: logging.Logger = logging.getLogger(__name__)


class Client:
    r"""Synchronous convenience client around ``httpx.Client``.

    The client holds a base path, a set of default headers, and the
    ``httpx.Client`` used as transport. Both ``base_path`` and
    ``headers`` may be reassigned at any time; the new values apply to
    the next request.

    Every HTTP helper funnels into ``request``, which resolves the URL,
    merges the default headers, sends the request, and raises
    ``HttpRequestError`` for any status code >= 400. Nothing is retried.
    Transport errors from httpx propagate unchanged.

    The client owns the ``httpx.Client`` it creates and closes it in
    ``close``. A transport passed in by the caller is never closed.

    Args:
        base_path: The URL prefix for relative request targets.
        headers: The default headers sent with every request. Anything
            accepted by ``httpx.Headers`` is accepted, including a sequence
            of pairs with repeated names.
        config: Optional ClientConfig with transport settings.
            If ``None``, a default ClientConfig is used.
        client: Optional httpx.Client instance to use for requests.
            If ``None``, a new client is created from ``config``.

    Example:
        ```pycon
        >>> from httpwrap import Client
        >>> with Client(base_path="https://api.example.com") as client:  # doctest: +SKIP
        ...     user = client.json_get("/users/1").data
        ...     created = client.json_post("/users", {"name": "Ada"})
        ...     created.headers["Location"]
        ...

        ```
    """

    def __init__(
        self,
        base_path: str = "",
        headers: HeadersInput | None = None,
        *,
        config: ClientConfig | None = None,
        client: httpx.Client | None = None,
    ) -> None:
        self.base_path = base_path
        self.headers = headers
        self._config: ClientConfig = config or ClientConfig()
        self._owns_client = client is None
        self._client: httpx.Client = client or httpx.Client(**self._config.transport_kwargs())

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_path={self.base_path!r})"

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

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
        """Append a value to a default header, keeping existing values.

        Args:
            name: The header name.
            value: The value to append.

        Example:
            ```pycon
            >>> from httpwrap import Client
            >>> client = Client(headers={"Accept": "text/plain"})
            >>> client.add_header("Accept", "application/json")
            >>> client.headers.get_list("Accept")
            ['text/plain', 'application/json']
            >>> client.close()

            ```
        """
        self._headers = httpx.Headers([*self._headers.multi_items(), (name, value)])

    def close(self) -> None:
        """Close the underlying httpx client if this client created it."""
        if self._owns_client:
            self._client.close()

    def resolve_url(self, target: str) -> str:
        """Resolve a request target against ``base_path``.

        Args:
            target: An absolute URL or a path relative to ``base_path``.

        Returns:
            The resolved URL.
        """
        return resolve_url(self.base_path, target)

    def request(
        self,
        method: str,
        target: str,
        *,
        content: bytes | None = None,
        headers: HeadersInput | None = None,
        stream: bool = False,
    ) -> httpx.Response:
        r"""Send an HTTP request.

        This is the primitive every other HTTP helper uses.

        Args:
            method: The HTTP method (GET, POST, PUT, DELETE, PATCH, HEAD, ...).
            target: An absolute URL or a path relative to ``base_path``.
            content: Optional request body. Empty bodies are not sent.
            headers: Optional request-specific headers. They replace
                default headers with the same name.
            stream: If ``True``, the response body is not read and the
                caller must close the response.

        Returns:
            The ``httpx.Response``. Unless ``stream`` is set, its body has
            been read and its connection released.

        Raises:
            HttpRequestError: If the response status code is >= 400.
            httpx.HTTPError: If the request cannot be built or sent.

        Example:
            ```pycon
            >>> from httpwrap import Client
            >>> with Client(base_path="https://api.example.com") as client:  # doctest: +SKIP
            ...     response = client.request("GET", "/health")
            ...

            ```
        """
        request = self._client.build_request(
            method,
            self.resolve_url(target),
            content=content or None,
            headers=merge_headers(self._headers, headers),
        )
        return self._send(request, stream=stream)

    def request_json(self, method: str, target: str, payload: Any = None) -> Result[Any]:
        r"""Send a request with a JSON body and decode the JSON response.

        For POST, PUT and PATCH the payload is serialized to JSON and sent
        as the body; other methods send no body and ignore ``payload``.

        Args:
            method: The HTTP method.
            target: An absolute URL or a path relative to ``base_path``.
            payload: The value to serialize as the request body.

        Returns:
            A Result holding the decoded response body (``None`` for an
            empty body) and the response.

        Raises:
            HttpRequestError: If the response status code is >= 400.
            TypeError: If the payload is not JSON serializable.
            json.JSONDecodeError: If the response body is not valid JSON.
        """
        method = method.upper()
        content = None
        headers = None
        if method in METHODS_WITH_BODY:
            content = encode_json(payload)
            headers = {"Content-Type": JSON_CONTENT_TYPE}
        response = self.request(method, target, content=content, headers=headers)
        return Result(data=decode_json(response.content), response=response)

    def json_get(self, target: str) -> Result[Any]:
        """Send a GET request and decode the JSON response."""
        return self.request_json("GET", target)

    def json_delete(self, target: str) -> Result[Any]:
        """Send a DELETE request and decode the JSON response."""
        return self.request_json("DELETE", target)

    def json_post(self, target: str, payload: Any = None) -> Result[Any]:
        """Send a POST request with a JSON body and decode the JSON
        response."""
        return self.request_json("POST", target, payload)

    def json_put(self, target: str, payload: Any = None) -> Result[Any]:
        """Send a PUT request with a JSON body and decode the JSON
        response."""
        return self.request_json("PUT", target, payload)

    def json_patch(self, target: str, payload: Any = None) -> Result[Any]:
        """Send a PATCH request with a JSON body and decode the JSON
        response."""
        return self.request_json("PATCH", target, payload)

    def request_raw(self, method: str, target: str, content: bytes | None = None) -> Result[bytes]:
        r"""Send a request and return the response body as bytes.

        Args:
            method: The HTTP method.
            target: An absolute URL or a path relative to ``base_path``.
            content: Optional request body.

        Returns:
            A Result holding the raw response body and the response.

        Raises:
            HttpRequestError: If the response status code is >= 400.
        """
        response = self.request(method, target, content=content)
        return Result(data=response.content, response=response)

    def raw_get(self, target: str) -> Result[bytes]:
        """Send a GET request and return the raw response body."""
        return self.request_raw("GET", target)

    def raw_delete(self, target: str) -> Result[bytes]:
        """Send a DELETE request and return the raw response body."""
        return self.request_raw("DELETE", target)

    def raw_post(self, target: str, content: bytes | None = None) -> Result[bytes]:
        """Send a POST request with a raw body and return the raw
        response body."""
        return self.request_raw("POST", target, content)

    def raw_put(self, target: str, content: bytes | None = None) -> Result[bytes]:
        """Send a PUT request with a raw body and return the raw response
        body."""
        return self.request_raw("PUT", target, content)

    def raw_head(self, target: str) -> httpx.Response:
        r"""Send a HEAD request without reading any response body.

        Args:
            target: An absolute URL or a path relative to ``base_path``.

        Returns:
            The closed response; only its status and headers are meaningful.

        Raises:
            HttpRequestError: If the response status code is >= 400.
        """
        response = self.request("HEAD", target, stream=True)
        response.close()
        return response

    def multipart(
        self,
        target: str,
        fields: Mapping[str, str] | None = None,
        file_field: str | None = None,
        file_path: str | Path | None = None,
    ) -> httpx.Response:
        r"""Send a multipart/form-data POST request.

        The body is fully built, including the file content, before the
        request is sent. A default ``Content-Type`` header is ignored for
        this request so the multipart boundary is preserved.

        Args:
            target: An absolute URL or a path relative to ``base_path``.
            fields: Optional text fields.
            file_field: Optional name of the file part. The file is only
                sent when both ``file_field`` and ``file_path`` are given.
            file_path: Optional path of the file to upload.

        Returns:
            The ``httpx.Response`` with its body read.

        Raises:
            OSError: If the file cannot be opened or read.
            HttpRequestError: If the response status code is >= 400.

        Example:
            ```pycon
            >>> from httpwrap import Client
            >>> with Client(base_path="https://api.example.com") as client:  # doctest: +SKIP
            ...     response = client.multipart(
            ...         "/upload", {"a": "1"}, file_field="file", file_path="report.csv"
            ...     )
            ...

            ```
        """
        request = build_multipart_request(
            self._client.build_request,
            self.resolve_url(target),
            headers=merge_headers(self._headers, exclude=("Content-Type",)),
            fields=fields,
            file_field=file_field,
            file_path=file_path,
        )
        return self._send(request)

    def multipart_json(
        self,
        target: str,
        fields: Mapping[str, str] | None = None,
        file_field: str | None = None,
        file_path: str | Path | None = None,
    ) -> Result[Any]:
        """Send a multipart/form-data POST request and decode the JSON
        response.

        See ``multipart`` for the arguments.

        Raises:
            OSError: If the file cannot be opened or read.
            HttpRequestError: If the response status code is >= 400.
            json.JSONDecodeError: If the response body is not valid JSON.
        """
        response = self.multipart(target, fields, file_field, file_path)
        return Result(data=decode_json(response.content), response=response)

    def websocket(self, target: str) -> tuple[ClientConnection, WebSocketResponse]:
        r"""Open a websocket connection.

        The target is resolved like any HTTP target, then its scheme is
        replaced by the websocket equivalent (``http`` -> ``ws``,
        ``https`` -> ``wss``). The default headers are sent with the
        handshake. The caller owns the returned connection and must close it.

        Args:
            target: An absolute URL or a path relative to ``base_path``.

        Returns:
            A tuple of the open connection and the handshake response.

        Raises:
            ValueError: If the resolved URL has no websocket equivalent.
            websockets.exceptions.InvalidHandshake: If the handshake fails.
            OSError: If the connection cannot be established.
            TimeoutError: If the handshake does not complete in time.

        Example:
            ```pycon
            >>> from httpwrap import Client
            >>> client = Client(base_path="http://localhost:8090")
            >>> connection, response = client.websocket("/events")  # doctest: +SKIP
            >>> connection.recv()  # doctest: +SKIP
            'OK'

            ```
        """
        url = to_websocket_url(self.resolve_url(target))
        logger.debug(f"Opening websocket connection to {url}")
        connection = ws_connect(
            url,
            additional_headers=self._headers.multi_items(),
            open_timeout=self._config.websocket_open_timeout,
        )
        return connection, connection.response

    def _send(self, request: httpx.Request, *, stream: bool = False) -> httpx.Response:
        method, url = request.method, str(request.url)
        logger.debug(f"Sending {method} request to {url}")
        start_time = time.time()
        try:
            response = self._client.send(request, stream=stream)
        except httpx.RequestError as exc:
            logger.debug(f"{method} request to {url} failed with {type(exc).__name__}: {exc}")
            raise
        handle_response(
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
