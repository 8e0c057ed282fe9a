from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
import pytest_asyncio

from tests.helpers import FILE_CONTENT, create_async_client, create_client

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator
    from pathlib import Path

    from httpwrap import AsyncClient, Client


@pytest.fixture
def client() -> Generator[Client, None, None]:
    """Create a Client backed by the in-memory echo application."""
    with create_client() as client:
        yield client


@pytest_asyncio.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Create an AsyncClient backed by the in-memory echo
    application."""
    async with create_async_client() as client:
        yield client


@pytest.fixture
def sample_file(tmp_path: Path) -> Path:
    """Create the file uploaded by the multipart tests."""
    path = tmp_path.joinpath("file.txt")
    path.write_bytes(FILE_CONTENT)
    return path


@pytest.fixture
def reset_default_client(monkeypatch: pytest.MonkeyPatch) -> None:
    """Start each test without a process-wide default client."""
    monkeypatch.setattr("httpwrap.default._default_client", None)
