r"""Exceptions raised by the httpwrap clients."""

from __future__ import annotations

__all__ = ["HttpRequestError"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


class HttpRequestError(RuntimeError):
    """Raised when a server answers with an HTTP error status (>= 400).

    Transport failures, JSON errors, file errors and websocket handshake
    failures are not wrapped; they propagate unchanged.

    Args:
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        message: Human-readable description of the failure.
        status_code: The HTTP status code, if a response was received.
        reason: The reason phrase of the response, if any.
        body: The beginning of the response body, truncated to the
            client's ``max_error_body_size``.
        response: The closed ``httpx.Response``, if any.
        cause: Optional lower-level exception.

    Example:
        ```pycon
        >>> from httpwrap import HttpRequestError
        >>> error = HttpRequestError(
        ...     method="GET",
        ...     url="https://api.example.com/missing",
        ...     message="GET request to https://api.example.com/missing failed with status 404",
        ...     status_code=404,
        ...     reason="Not Found",
        ...     body=b'{"error": "missing"}',
        ... )
        >>> error.status_code
        404
        >>> error.text
        '{"error": "missing"}'

        ```
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        status_code: int | None = None,
        reason: str | None = None,
        body: bytes | None = None,
        response: httpx.Response | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.status_code = status_code
        self.reason = reason
        self.body = body
        self.response = response
        if cause is not None:
            self.__cause__ = cause

    @property
    def text(self) -> str | None:
        """The captured body decoded as text, or ``None`` if no body
        was captured."""
        if self.body is None:
            return None
        return self.body.decode(errors="replace")
