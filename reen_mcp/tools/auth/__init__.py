"""Auth tools module."""

from reen_mcp.tools.auth.tools import register_auth_tools

__all__ = ["register_auth_tools"]
