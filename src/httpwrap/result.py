r"""Result value returned by the JSON and raw helpers."""

from __future__ import annotations

__all__ = ["Result"]

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    import httpx

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """The outcome of a successful request.

    Headers are returned with every result, so callers never need to read
    shared state on the client to inspect the response of the call they
    just made.

    Attributes:
        data: The decoded JSON value for the JSON helpers, or the raw
            body bytes for the raw helpers.
        response: The closed ``httpx.Response``.
    """

    data: T
    response: httpx.Response

    @property
    def headers(self) -> httpx.Headers:
        """The response headers."""
        return self.response.headers

    @property
    def status_code(self) -> int:
        """The response status code."""
        return self.response.status_code

    @property
    def url(self) -> str:
        """The final URL of the request."""
        return str(self.response.url)
