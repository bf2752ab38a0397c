"""Pytest fixtures for REEN MCP server tests."""

from typing import AsyncGenerator

import pytest
from fastmcp import Client, FastMCP

from reen_mcp import client as client_module
from reen_mcp.client import ReenClient
from reen_mcp.config import get_settings
from reen_mcp.server import create_mcp_server
from reen_mcp.tests.mocks import MockBackend

TEST_TOKEN = "reen_" + "0123456789abcdef" * 4
TEST_BASE_URL = "https://backend.test"


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Settings are cached per process; isolate each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Replace the backoff sleep handed to tenacity with a recorder (seconds)."""
    recorded: list[float] = []

    async def fake_sleep(seconds: float) -> None:
        recorded.append(seconds)

    monkeypatch.setattr(client_module, "_sleep", fake_sleep)
    return recorded


@pytest.fixture
def backend() -> MockBackend:
    """Create scripted backend."""
    return MockBackend()


@pytest.fixture
def reen_client(backend: MockBackend, sleeps: list[float]) -> ReenClient:
    """Create client wired to the scripted backend, without real backoff."""
    return ReenClient(
        token=TEST_TOKEN,
        base_url=f"{TEST_BASE_URL}/",
        transport=backend.transport,
    )


@pytest.fixture
def mcp_server(reen_client: ReenClient) -> FastMCP:
    """Create MCP server with the test client attached."""
    return create_mcp_server(reen_client)


@pytest.fixture
async def mcp_client(mcp_server: FastMCP) -> AsyncGenerator[Client, None]:
    """Create MCP client connected to test server."""
    async with Client(mcp_server) as client:
        yield client
