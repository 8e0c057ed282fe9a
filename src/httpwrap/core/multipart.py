r"""Multipart form-data preparation for file uploads.

The multipart body is always fully built before a request is sent: the
source file is opened, streamed into the body, and closed again before
the caller dispatches the request.
"""

from __future__ import annotations

__all__ = ["build_multipart_request"]

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

logger: logging.Logger = logging.getLogger(__name__)


def _build_empty_request(
    build_request: Callable[..., httpx.Request], url: str, headers: httpx.Headers
) -> httpx.Request:
    # httpx falls back to an empty body when there are no parts, so the
    # closing delimiter is written by hand.
    boundary = os.urandom(16).hex()
    headers = httpx.Headers(headers)
    headers["Content-Type"] = f"multipart/form-data; boundary={boundary}"
    request = build_request("POST", url, headers=headers, content=f"--{boundary}--\r\n".encode())
    request.read()
    return request


def build_multipart_request(
    build_request: Callable[..., httpx.Request],
    url: str,
    *,
    headers: httpx.Headers,
    fields: Mapping[str, str] | None = None,
    file_field: str | None = None,
    file_path: str | Path | None = None,
) -> httpx.Request:
    """Build a POST request with a fully materialized multipart body.

    The body holds the text ``fields`` and, when both ``file_field`` and
    ``file_path`` are given, one file part named ``file_field`` whose
    filename is the basename of ``file_path``.

    Args:
        build_request: The ``build_request`` method of an
            ``httpx.Client`` or ``httpx.AsyncClient``.
        url: The resolved URL.
        headers: The request headers. Must not contain a
            ``Content-Type``; the multipart encoder sets it with its boundary.
        fields: Optional text fields.
        file_field: Optional name of the file part.
        file_path: Optional path of the file to upload.

    Returns:
        The request, with its body already read into memory.

    Raises:
        OSError: If the file cannot be opened or read.

    Example:
        ```pycon
        >>> import httpx
        >>> from httpwrap.core.multipart import build_multipart_request
        >>> with httpx.Client() as client:
        ...     request = build_multipart_request(
        ...         client.build_request,
        ...         "https://api.example.com/upload",
        ...         headers=httpx.Headers(),
        ...         fields={"a": "1"},
        ...     )
        ...
        >>> request.headers["Content-Type"].startswith("multipart/form-data")
        True

        ```
    """
    data = dict(fields or {})
    if not (file_field and file_path):
        if not data:
            return _build_empty_request(build_request, url, headers)
        # httpx only switches to multipart when files are present, so plain
        # fields are sent as parts without a filename.
        files = [(name, (None, value.encode())) for name, value in data.items()]
        request = build_request("POST", url, headers=headers, files=files)
        request.read()
        return request

    path = Path(file_path)
    logger.debug(f"Adding {path} to multipart body as field {file_field!r}")
    with path.open("rb") as fileobj:
        request = build_request(
            "POST",
            url,
            headers=headers,
            data=data,
            files={file_field: (path.name, fileobj)},
        )
        request.read()
    return request
