"""Auth MCP tools implementation."""

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError
from fastmcp.server.context import Context

from reen_mcp.core.errors import ReenApiError
from reen_mcp.tools.auth.models import WhoamiResponse


def register_auth_tools(mcp: FastMCP) -> None:
    """Register auth tools with the MCP server.

    Tools access the REEN client via ctx.fastmcp.reen_client.
    """

    @mcp.tool(
        name="whoami",
        description="Get current authenticated user info (sanity check)",
    )
    async def whoami(ctx: Context) -> WhoamiResponse:
        """Return the user the configured API token belongs to."""
        client = getattr(ctx.fastmcp, "reen_client", None)
        if client is None:
            raise ToolError("REEN client not available")

        await ctx.debug("Fetching /api/auth/me")
        try:
            data = await client.get("/api/auth/me")
        except ReenApiError as e:
            raise ToolError(e.message) from e

        return WhoamiResponse.model_validate(data)
