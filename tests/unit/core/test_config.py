r"""Unit tests for the ClientConfig dataclass."""

from __future__ import annotations

import httpx
import pytest
from coola.equality import objects_are_equal

from httpwrap.core import DEFAULT_MAX_ERROR_BODY_SIZE, DEFAULT_TIMEOUT, ClientConfig

##################################
#     Tests for ClientConfig     #
##################################


def test_client_config_defaults() -> None:
    config = ClientConfig()

    assert config.timeout == DEFAULT_TIMEOUT
    assert config.follow_redirects is False
    assert config.max_error_body_size == DEFAULT_MAX_ERROR_BODY_SIZE
    assert config.websocket_open_timeout == DEFAULT_TIMEOUT


@pytest.mark.parametrize("timeout", [0.5, 30, httpx.Timeout(5.0, connect=1.0)])
def test_client_config_timeout(timeout: float | httpx.Timeout) -> None:
    assert ClientConfig(timeout=timeout).timeout == timeout


@pytest.mark.parametrize("max_error_body_size", [0, 1, 1024])
def test_client_config_max_error_body_size(max_error_body_size: int) -> None:
    assert ClientConfig(max_error_body_size=max_error_body_size).max_error_body_size == (
        max_error_body_size
    )


@pytest.mark.parametrize("timeout", [0, -1.0])
def test_client_config_invalid_timeout(timeout: float) -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        ClientConfig(timeout=timeout)


def test_client_config_invalid_max_error_body_size() -> None:
    with pytest.raises(ValueError, match=r"max_error_body_size must be >= 0, got -1"):
        ClientConfig(max_error_body_size=-1)


def test_client_config_invalid_websocket_open_timeout() -> None:
    with pytest.raises(ValueError, match=r"websocket_open_timeout must be > 0, got 0"):
        ClientConfig(websocket_open_timeout=0)


def test_client_config_merge() -> None:
    config = ClientConfig(timeout=5.0)
    merged = config.merge(timeout=30.0, follow_redirects=True)

    assert merged.timeout == 30.0
    assert merged.follow_redirects is True
    assert config.timeout == 5.0
    assert config.follow_redirects is False


def test_client_config_merge_ignores_none() -> None:
    config = ClientConfig(max_error_body_size=10)
    assert config.merge(max_error_body_size=None).max_error_body_size == 10


def test_client_config_merge_validates() -> None:
    with pytest.raises(ValueError, match=r"timeout must be > 0"):
        ClientConfig().merge(timeout=-1)


def test_client_config_to_dict() -> None:
    assert objects_are_equal(
        ClientConfig(timeout=3.0, max_error_body_size=16).to_dict(),
        {
            "timeout": 3.0,
            "follow_redirects": False,
            "max_error_body_size": 16,
            "websocket_open_timeout": DEFAULT_TIMEOUT,
        },
    )


def test_client_config_transport_kwargs() -> None:
    assert ClientConfig(timeout=3.0, follow_redirects=True).transport_kwargs() == {
        "timeout": 3.0,
        "follow_redirects": True,
    }
