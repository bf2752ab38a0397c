"""Mock backend for testing."""

from reen_mcp.tests.mocks.mock_backend import MockBackend

__all__ = ["MockBackend"]
