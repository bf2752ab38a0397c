"""REEN MCP Server - MCP bridge to the REEN project-management backend."""

from reen_mcp.client import ReenClient
from reen_mcp.constants import SERVER_VERSION as __version__
from reen_mcp.core.errors import ReenApiError

__all__ = ["ReenApiError", "ReenClient", "__version__"]
