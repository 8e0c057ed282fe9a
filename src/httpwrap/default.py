r"""Process-wide default client.

Passing an explicitly constructed ``Client`` to the code that needs it is
the preferred way to use httpwrap. For scripts and small programs that
want a ready-to-use client without wiring, this module holds a single
default ``Client``:

- ``get_default_client`` creates it on first access and returns the same
  instance for the rest of the process;
- ``set_default_client`` installs an explicitly configured client instead.
  The default can be assigned only once, and not after it was created
  lazily.

The default client is never reset or closed by httpwrap.
"""

from __future__ import annotations

__all__ = ["get_default_client", "set_default_client"]

import logging
import threading

from httpwrap.client import Client

logger: logging.Logger = logging.getLogger(__name__)

_lock = threading.Lock()
_default_client: Client | None = None


def get_default_client() -> Client:
    """Return the process-wide default client, creating it on first
    use.

    Returns:
        The default ``Client``. It starts with an empty base path and no
        default headers; both may be set by the caller.

    Example:
        ```pycon
        >>> from httpwrap import get_default_client
        >>> get_default_client() is get_default_client()
        True

        ```
    """
    global _default_client  # noqa: PLW0603
    if _default_client is None:
        with _lock:
            if _default_client is None:
                logger.debug("Creating the default client")
                _default_client = Client()
    return _default_client


def set_default_client(client: Client) -> None:
    """Install ``client`` as the process-wide default client.

    Args:
        client: The client returned by later ``get_default_client`` calls.

    Raises:
        RuntimeError: If a default client already exists.
    """
    global _default_client  # noqa: PLW0603
    with _lock:
        if _default_client is not None:
            msg = "the default client has already been set"
            raise RuntimeError(msg)
        _default_client = client
