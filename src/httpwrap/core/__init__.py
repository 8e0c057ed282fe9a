r"""Core shared logic for sync and async clients.

This module contains shared functionality used by both the synchronous
and asynchronous clients, including configuration, validation, URL
resolution, header merging and multipart preparation.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_ERROR_BODY_SIZE",
    "DEFAULT_TIMEOUT",
    "ClientConfig",
    "JSON_CONTENT_TYPE",
    "METHODS_WITH_BODY",
    "build_multipart_request",
    "decode_json",
    "encode_json",
    "has_scheme",
    "merge_headers",
    "resolve_url",
    "to_websocket_url",
    "validate_client_params",
    "validate_timeout",
]

from httpwrap.core.codec import JSON_CONTENT_TYPE, METHODS_WITH_BODY, decode_json, encode_json
from httpwrap.core.config import (
    DEFAULT_MAX_ERROR_BODY_SIZE,
    DEFAULT_TIMEOUT,
    ClientConfig,
)
from httpwrap.core.headers import merge_headers
from httpwrap.core.multipart import build_multipart_request
from httpwrap.core.url import has_scheme, resolve_url, to_websocket_url
from httpwrap.core.validation import validate_client_params, validate_timeout
