r"""httpwrap - Convenience wrapper around httpx and websockets.

This package wraps an ``httpx`` client with the few conveniences most
API callers rewrite by hand: relative targets resolved against a base
path, default headers merged into every request, JSON and raw-bytes
helpers per HTTP verb, a multipart upload helper, and a websocket
connect helper that reuses the base path and default headers.

Key Features:
    - Base path joining with exactly one slash at the join
    - Multi-valued default headers on every request and websocket handshake
    - JSON helpers for GET, DELETE, POST, PUT and PATCH
    - Raw-bytes helpers for GET, DELETE, POST, PUT and a body-less HEAD
    - Multipart uploads with text fields and an optional file
    - Error responses (status >= 400) raised as HttpRequestError with the
      beginning of the body kept for diagnosis
    - Synchronous ``Client`` and asyncio ``AsyncClient``
    - Lazily-created process-wide default client

Example:
    ```pycon
    >>> from httpwrap import Client
    >>> client = Client(base_path="https://api.example.com", headers={"X-Token": "secret"})
    >>> result = client.json_post("/items", {"name": "widget"})  # doctest: +SKIP
    >>> result.data, result.headers["Content-Type"]  # doctest: +SKIP
    >>> client.close()

    ```
"""

from __future__ import annotations

__all__ = [
    "AsyncClient",
    "Client",
    "ClientConfig",
    "HttpRequestError",
    "Result",
    "__version__",
    "get_default_client",
    "set_default_client",
]

from importlib.metadata import PackageNotFoundError, version

from httpwrap.client import Client
from httpwrap.client_async import AsyncClient
from httpwrap.core.config import ClientConfig
from httpwrap.default import get_default_client, set_default_client
from httpwrap.exceptions import HttpRequestError
from httpwrap.result import Result

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
