r"""Parameter validation utilities for client configuration.

This module provides validation functions for the client configuration
to ensure values meet the required constraints before they are handed
to the underlying HTTP and websocket libraries.
"""

from __future__ import annotations

__all__ = ["validate_client_params", "validate_timeout"]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import httpx


def validate_timeout(timeout: float | httpx.Timeout) -> None:
    """Validate timeout parameter.

    Args:
        timeout: Maximum seconds to wait for server responses.
            Must be > 0 if provided as a numeric value.

    Raises:
        ValueError: If timeout is a numeric value <= 0.

    Example:
        ```pycon
        >>> from httpwrap.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(30)
        >>> validate_timeout(0)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be > 0, got 0

        ```
    """
    if isinstance(timeout, (int, float)) and timeout <= 0:
        msg = f"timeout must be > 0, got {timeout}"
        raise ValueError(msg)


def validate_client_params(
    max_error_body_size: int,
    websocket_open_timeout: float | None = None,
) -> None:
    """Validate client parameters.

    Args:
        max_error_body_size: Maximum number of response body bytes kept on
            an ``HttpRequestError``. Must be >= 0. A value of 0 keeps no body.
        websocket_open_timeout: Maximum seconds allowed for the websocket
            handshake. Must be > 0 if provided.

    Raises:
        ValueError: If max_error_body_size is negative, or if
            websocket_open_timeout is non-positive.

    Example:
        ```pycon
        >>> from httpwrap.core.validation import validate_client_params
        >>> validate_client_params(max_error_body_size=1024)
        >>> validate_client_params(max_error_body_size=0, websocket_open_timeout=5.0)
        >>> validate_client_params(max_error_body_size=-1)  # doctest: +SKIP

        ```
    """
    if max_error_body_size < 0:
        msg = f"max_error_body_size must be >= 0, got {max_error_body_size}"
        raise ValueError(msg)
    if websocket_open_timeout is not None and websocket_open_timeout <= 0:
        msg = f"websocket_open_timeout must be > 0, got {websocket_open_timeout}"
        raise ValueError(msg)
