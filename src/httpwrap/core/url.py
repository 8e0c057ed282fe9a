r"""URL resolution helpers shared by the sync and async clients.

This module turns caller-supplied request targets into absolute URLs by
joining relative paths onto a configured base path, and rewrites HTTP
URLs into their websocket equivalents.
"""

from __future__ import annotations

__all__ = ["has_scheme", "resolve_url", "to_websocket_url"]

import re

# RFC 3986: scheme = ALPHA *( ALPHA / DIGIT / "+" / "-" / "." )
_SCHEME_PATTERN = re.compile(r"^[A-Za-z][A-Za-z0-9+.\-]*://")

WEBSOCKET_SCHEMES = {"http": "ws", "https": "wss", "ws": "ws", "wss": "wss"}


def has_scheme(target: str) -> bool:
    """Indicate if a request target is an absolute URL.

    Args:
        target: The request target to inspect.

    Returns:
        ``True`` if the target starts with ``<scheme>://``, otherwise ``False``.

    Example:
        ```pycon
        >>> from httpwrap.core.url import has_scheme
        >>> has_scheme("https://api.example.com/data")
        True
        >>> has_scheme("/data")
        False

        ```
    """
    return _SCHEME_PATTERN.match(target) is not None


def resolve_url(base_path: str, target: str) -> str:
    """Resolve a request target against a base path.

    Absolute targets are returned verbatim. Relative targets are joined
    onto ``base_path`` so that exactly one slash separates the two parts.
    No percent-encoding, query merging, or validation is performed: a
    malformed result surfaces later when the request is built.

    Args:
        base_path: The URL prefix for relative targets. May be empty.
        target: An absolute URL or a path relative to ``base_path``.

    Returns:
        The resolved URL.

    Example:
        ```pycon
        >>> from httpwrap.core.url import resolve_url
        >>> resolve_url("https://api.example.com/", "/users")
        'https://api.example.com/users'
        >>> resolve_url("https://api.example.com", "users")
        'https://api.example.com/users'
        >>> resolve_url("https://api.example.com", "http://other.example.com/x")
        'http://other.example.com/x'

        ```
    """
    if has_scheme(target):
        return target
    return f"{base_path.rstrip('/')}/{target.lstrip('/')}"


def to_websocket_url(url: str) -> str:
    """Rewrite the scheme of an absolute URL to its websocket
    equivalent.

    Only the scheme component is replaced (``http`` -> ``ws`` and
    ``https`` -> ``wss``); the rest of the URL is left untouched, so a
    path that happens to contain ``http`` is preserved.

    Args:
        url: An absolute ``http``, ``https``, ``ws`` or ``wss`` URL.

    Returns:
        The websocket URL.

    Raises:
        ValueError: If the URL has no scheme or the scheme has no
            websocket equivalent.

    Example:
        ```pycon
        >>> from httpwrap.core.url import to_websocket_url
        >>> to_websocket_url("https://example.com/http/stream")
        'wss://example.com/http/stream'

        ```
    """
    if not has_scheme(url):
        msg = f"cannot open a websocket to a URL without a scheme: {url!r}"
        raise ValueError(msg)
    scheme, rest = url.split("://", 1)
    websocket_scheme = WEBSOCKET_SCHEMES.get(scheme.lower())
    if websocket_scheme is None:
        msg = f"unsupported scheme for a websocket connection: {scheme!r}"
        raise ValueError(msg)
    return f"{websocket_scheme}://{rest}"
