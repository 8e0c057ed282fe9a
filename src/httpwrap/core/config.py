r"""Configuration dataclass and defaults for Client and AsyncClient.

This module provides configuration constants and a dataclass-based
configuration object for the transport-level settings of the ``Client``
and ``AsyncClient`` classes. The base path and the default headers are
plain client attributes and are not part of this configuration.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_ERROR_BODY_SIZE",
    "DEFAULT_TIMEOUT",
    "ClientConfig",
]

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from httpwrap.core.validation import validate_client_params, validate_timeout

if TYPE_CHECKING:
    import httpx


# Default timeout in seconds for HTTP requests and websocket handshakes
DEFAULT_TIMEOUT = 10.0

# Default number of response body bytes kept on an HttpRequestError
DEFAULT_MAX_ERROR_BODY_SIZE = 64 * 1024


@dataclass
class ClientConfig:
    """Configuration for the transport created by a client.

    Note:
        ``timeout`` and ``follow_redirects`` are only used when the client
        creates its own ``httpx.Client``/``httpx.AsyncClient``. A transport
        passed in by the caller keeps its own settings.

    Args:
        timeout: Maximum seconds to wait for the server response. Must be > 0.
        follow_redirects: Whether the created transport follows redirects.
        max_error_body_size: Maximum number of response body bytes kept on
            an ``HttpRequestError``. Must be >= 0.
        websocket_open_timeout: Maximum seconds allowed for the websocket
            handshake. Must be > 0.

    Example:
        ```pycon
        >>> from httpwrap.core.config import ClientConfig
        >>> config = ClientConfig()  # Use defaults
        >>> config.timeout
        10.0
        >>> config = ClientConfig(max_error_body_size=1024)
        >>> merged = config.merge(timeout=30.0)
        >>> merged.timeout
        30.0
        >>> merged.max_error_body_size
        1024

        ```
    """

    timeout: float | httpx.Timeout = DEFAULT_TIMEOUT
    follow_redirects: bool = False
    max_error_body_size: int = DEFAULT_MAX_ERROR_BODY_SIZE
    websocket_open_timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If any parameter fails validation.
        """
        validate_timeout(self.timeout)
        validate_client_params(
            max_error_body_size=self.max_error_body_size,
            websocket_open_timeout=self.websocket_open_timeout,
        )

    def merge(self, **overrides: Any) -> ClientConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new ClientConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from httpwrap.core.config import ClientConfig
            >>> config = ClientConfig(timeout=5.0)
            >>> config.merge(timeout=None).timeout
            5.0

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary format.

        Returns:
            Dictionary with the configuration parameters.

        Example:
            ```pycon
            >>> from httpwrap.core.config import ClientConfig
            >>> ClientConfig().to_dict()["follow_redirects"]
            False

            ```
        """
        return {
            "timeout": self.timeout,
            "follow_redirects": self.follow_redirects,
            "max_error_body_size": self.max_error_body_size,
            "websocket_open_timeout": self.websocket_open_timeout,
        }

    def transport_kwargs(self) -> dict[str, Any]:
        """Return the keyword arguments used to create the httpx
        transport.

        Returns:
            Dictionary with ``timeout`` and ``follow_redirects``.
        """
        return {"timeout": self.timeout, "follow_redirects": self.follow_redirects}
