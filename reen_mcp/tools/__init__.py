"""Tools module - MCP tool implementations."""

from reen_mcp.tools.auth import register_auth_tools

__all__ = ["register_auth_tools"]
