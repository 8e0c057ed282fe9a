from __future__ import annotations

import httpx
import pytest

from httpwrap.core import validate_client_params, validate_timeout

######################################
#     Tests for validate_timeout     #
######################################


@pytest.mark.parametrize("timeout", [0.1, 1, 10.0, httpx.Timeout(None)])
def test_validate_timeout_valid(timeout: float | httpx.Timeout) -> None:
    validate_timeout(timeout)


@pytest.mark.parametrize("timeout", [0, 0.0, -1])
def test_validate_timeout_invalid(timeout: float) -> None:
    with pytest.raises(ValueError, match=rf"timeout must be > 0, got {timeout}"):
        validate_timeout(timeout)


############################################
#     Tests for validate_client_params     #
############################################


@pytest.mark.parametrize("max_error_body_size", [0, 1, 65536])
def test_validate_client_params_valid(max_error_body_size: int) -> None:
    validate_client_params(max_error_body_size=max_error_body_size, websocket_open_timeout=1.0)


def test_validate_client_params_without_websocket_timeout() -> None:
    validate_client_params(max_error_body_size=0)


def test_validate_client_params_negative_max_error_body_size() -> None:
    with pytest.raises(ValueError, match=r"max_error_body_size must be >= 0, got -5"):
        validate_client_params(max_error_body_size=-5)


@pytest.mark.parametrize("websocket_open_timeout", [0, -2.0])
def test_validate_client_params_invalid_websocket_open_timeout(
    websocket_open_timeout: float,
) -> None:
    with pytest.raises(ValueError, match=r"websocket_open_timeout must be > 0"):
        validate_client_params(max_error_body_size=0, websocket_open_timeout=websocket_open_timeout)
