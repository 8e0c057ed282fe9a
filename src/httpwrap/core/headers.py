r"""Default-header merging for outgoing requests."""

from __future__ import annotations

__all__ = ["HeadersInput", "merge_headers"]

from collections.abc import Mapping, Sequence
from typing import Union

import httpx

HeadersInput = Union[httpx.Headers, Mapping[str, str], Sequence[tuple[str, str]]]


def merge_headers(
    defaults: HeadersInput | None,
    overrides: HeadersInput | None = None,
    *,
    exclude: tuple[str, ...] = (),
) -> httpx.Headers:
    """Merge default headers with per-request headers.

    Every value of a multi-valued default header is kept, in order. A
    header present in ``overrides`` replaces all default values with the
    same (case-insensitive) name.

    Args:
        defaults: The default headers applied to every request.
        overrides: Optional request-specific headers.
        exclude: Header names dropped from the defaults before merging.

    Returns:
        A new ``httpx.Headers`` instance; the inputs are not modified.

    Example:
        ```pycon
        >>> from httpwrap.core.headers import merge_headers
        >>> headers = merge_headers(
        ...     [("Accept", "text/plain"), ("Accept", "application/json")],
        ...     {"X-Trace": "1"},
        ... )
        >>> headers.get_list("accept")
        ['text/plain', 'application/json']
        >>> headers["x-trace"]
        '1'

        ```
    """
    merged = httpx.Headers(defaults)
    for name in exclude:
        merged.pop(name, None)
    if overrides is not None:
        merged.update(overrides)
    return merged
