r"""Utility functions for response handling and logging.

This package provides helpers that classify HTTP responses by status
code and an opt-in structured logging layer.
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "get_correlation_id",
    "handle_response",
    "handle_response_async",
    "is_error_status",
    "log_structured",
    "set_correlation_id",
]

from httpwrap.utils.response import handle_response, handle_response_async, is_error_status
from httpwrap.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)
