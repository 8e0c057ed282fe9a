r"""Unit tests for package initialization and metadata."""

from __future__ import annotations

import httpwrap


def test_package_version_is_string() -> None:
    assert isinstance(httpwrap.__version__, str)


def test_package_version_format() -> None:
    assert "." in httpwrap.__version__


def test_all_exports_defined() -> None:
    for name in httpwrap.__all__:
        assert hasattr(httpwrap, name), f"{name} is in __all__ but not defined in module"


def test_all_exports() -> None:
    assert sorted(httpwrap.__all__) == [
        "AsyncClient",
        "Client",
        "ClientConfig",
        "HttpRequestError",
        "Result",
        "__version__",
        "get_default_client",
        "set_default_client",
    ]
