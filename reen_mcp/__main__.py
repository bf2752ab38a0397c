"""Entry point for running the MCP server.

Runs the REEN MCP server over stdio. stdout carries JSON-RPC frames only;
all diagnostics go to stderr.

Usage:
    python -m reen_mcp

Environment Variables:
    REEN_API_TOKEN: REEN API token (required)
    REEN_API_URL: Backend base URL (default: 'https://backend.reen.tech')
    LOG_LEVEL: Diagnostic log level (default: 'INFO')
"""

import sys

from pydantic import ValidationError

from reen_mcp.client import ReenClient
from reen_mcp.config import Settings, get_settings
from reen_mcp.constants import MISSING_TOKEN_MESSAGE, SERVER_NAME, SERVER_VERSION
from reen_mcp.core.logger import configure_logging, log, redact
from reen_mcp.core.telemetry import init_telemetry
from reen_mcp.server import create_mcp_server


def load_settings() -> Settings:
    """Load settings or halt the process with a readable message.

    Exits with status 1 before any client is constructed when the token is
    missing or the configuration is otherwise invalid.
    """
    try:
        return get_settings()
    except ValidationError as e:
        if any(err["loc"] == ("reen_api_token",) for err in e.errors()):
            sys.stderr.write(MISSING_TOKEN_MESSAGE)
        else:
            sys.stderr.write(redact(f"Error: invalid configuration: {e}\n"))
        sys.exit(1)


def main() -> None:
    """Run the MCP server in stdio mode."""
    settings = load_settings()

    configure_logging(settings.log_level)
    init_telemetry(settings)

    client = ReenClient.from_settings(settings)
    mcp = create_mcp_server(client)

    log(f"Starting {SERVER_NAME} v{SERVER_VERSION}")
    log(f"API: {client.base_url}")

    try:
        mcp.run(transport="stdio")
    except Exception as e:
        sys.stderr.write(redact(f"Fatal: {e}\n"))
        sys.exit(1)


if __name__ == "__main__":
    main()
