r"""HTTP response classification utilities.

This module provides functions that classify HTTP responses by status
code and turn error responses into ``HttpRequestError`` exceptions,
keeping the beginning of the response body for diagnosis.
"""

from __future__ import annotations

__all__ = ["handle_response", "handle_response_async", "is_error_status"]

import logging

import httpx

from httpwrap.exceptions import HttpRequestError

logger: logging.Logger = logging.getLogger(__name__)


def is_error_status(status_code: int) -> bool:
    """Indicate if a status code is treated as a failure.

    Args:
        status_code: The HTTP status code.

    Returns:
        ``True`` for status codes >= 400.

    Example:
        ```pycon
        >>> from httpwrap.utils.response import is_error_status
        >>> is_error_status(404)
        True
        >>> is_error_status(302)
        False

        ```
    """
    return status_code >= 400


def handle_response(
    response: httpx.Response,
    *,
    method: str,
    url: str,
    max_error_body_size: int,
) -> None:
    """Raise an error for responses with an error status code.

    Successful responses are left untouched. For error responses the
    body is captured (up to ``max_error_body_size`` bytes), the response
    is closed, and an ``HttpRequestError`` is raised.

    Args:
        response: The HTTP response to validate.
        method: The HTTP method name, used in error messages.
        url: The requested URL, used in error messages.
        max_error_body_size: Maximum number of body bytes kept on the error.

    Raises:
        HttpRequestError: If the response status code is >= 400.
    """
    if not is_error_status(response.status_code):
        return
    try:
        try:
            body = response.content
        except httpx.ResponseNotRead:
            body = _read_prefix(response, max_error_body_size)
    finally:
        response.close()
    raise _build_error(response, method=method, url=url, body=body[:max_error_body_size])


async def handle_response_async(
    response: httpx.Response,
    *,
    method: str,
    url: str,
    max_error_body_size: int,
) -> None:
    """Raise an error for responses with an error status code
    (asynchronous).

    See ``handle_response`` for details.

    Args:
        response: The HTTP response to validate.
        method: The HTTP method name, used in error messages.
        url: The requested URL, used in error messages.
        max_error_body_size: Maximum number of body bytes kept on the error.

    Raises:
        HttpRequestError: If the response status code is >= 400.
    """
    if not is_error_status(response.status_code):
        return
    try:
        try:
            body = response.content
        except httpx.ResponseNotRead:
            body = await _aread_prefix(response, max_error_body_size)
    finally:
        await response.aclose()
    raise _build_error(response, method=method, url=url, body=body[:max_error_body_size])


def _read_prefix(response: httpx.Response, limit: int) -> bytes:
    chunks: list[bytes] = []
    size = 0
    if limit > 0:
        for chunk in response.iter_bytes():
            chunks.append(chunk)
            size += len(chunk)
            if size >= limit:
                break
    return b"".join(chunks)


async def _aread_prefix(response: httpx.Response, limit: int) -> bytes:
    chunks: list[bytes] = []
    size = 0
    if limit > 0:
        async for chunk in response.aiter_bytes():
            chunks.append(chunk)
            size += len(chunk)
            if size >= limit:
                break
    return b"".join(chunks)


def _build_error(response: httpx.Response, *, method: str, url: str, body: bytes) -> HttpRequestError:
    status_code = response.status_code
    reason = response.reason_phrase
    logger.debug(f"{method} request to {url} failed with status {status_code} {reason}")
    return HttpRequestError(
        method=method,
        url=url,
        message=f"{method} request to {url} failed with status {status_code}: {reason}",
        status_code=status_code,
        reason=reason,
        body=body,
        response=response,
    )
