"""FastMCP server initialization and configuration."""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastmcp import FastMCP

from reen_mcp.client import ReenClient
from reen_mcp.constants import SERVER_INSTRUCTIONS, SERVER_NAME, SERVER_VERSION
from reen_mcp.core.logger import log
from reen_mcp.tools import register_auth_tools

logger = logging.getLogger(__name__)


@asynccontextmanager
async def server_lifespan(server: FastMCP) -> AsyncIterator[None]:
    """Log session start and shutdown on the diagnostic channel."""
    log("Server started, waiting for requests")
    try:
        yield
    finally:
        log("Shutting down")


def create_mcp_server(client: ReenClient) -> FastMCP:
    """Create MCP server with the REEN client attached and tools registered.

    The client is attached to the server instance; tools read it from
    ctx.fastmcp.reen_client, so the Operation Catalog never touches a global.

    Args:
        client: Configured REEN backend client.

    Returns:
        FastMCP: Server instance ready for stdio transport.
    """
    mcp = FastMCP(
        name=SERVER_NAME,
        version=SERVER_VERSION,
        instructions=SERVER_INSTRUCTIONS,
        lifespan=server_lifespan,
    )
    mcp.reen_client = client  # type: ignore[attr-defined]

    register_auth_tools(mcp)

    logger.debug("MCP server created, tools registered")
    return mcp
