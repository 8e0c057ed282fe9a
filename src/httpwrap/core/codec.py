r"""JSON encoding and decoding of request and response bodies."""

from __future__ import annotations

__all__ = ["JSON_CONTENT_TYPE", "METHODS_WITH_BODY", "decode_json", "encode_json"]

import json
from typing import Any

JSON_CONTENT_TYPE = "application/json"

# Methods whose JSON helpers send the payload as the request body
METHODS_WITH_BODY = frozenset({"POST", "PUT", "PATCH"})


def encode_json(value: Any) -> bytes:
    """Serialize a value to a UTF-8 JSON document.

    ``None`` is encoded as the JSON literal ``null``.

    Args:
        value: The value to serialize.

    Returns:
        The JSON document as bytes.

    Raises:
        TypeError: If the value is not JSON serializable.
        ValueError: If the value contains a circular reference or a
            non-finite float such as ``NaN``.

    Example:
        ```pycon
        >>> from httpwrap.core.codec import encode_json
        >>> encode_json({"key": "value"})
        b'{"key": "value"}'
        >>> encode_json(None)
        b'null'

        ```
    """
    return json.dumps(value, allow_nan=False).encode("utf-8")


def decode_json(content: bytes) -> Any:
    """Decode a JSON response body.

    An empty body decodes to ``None``.

    Args:
        content: The raw response body.

    Returns:
        The decoded value.

    Raises:
        json.JSONDecodeError: If the body is not valid JSON.

    Example:
        ```pycon
        >>> from httpwrap.core.codec import decode_json
        >>> decode_json(b'"GET"\n')
        'GET'
        >>> decode_json(b"") is None
        True

        ```
    """
    if not content.strip():
        return None
    return json.loads(content)
