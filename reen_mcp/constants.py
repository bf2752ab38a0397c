"""Constants for REEN MCP Server."""

SERVER_NAME = "reen-mcp-server"
SERVER_VERSION = "0.1.0"
USER_AGENT = f"{SERVER_NAME}/{SERVER_VERSION}"

DEFAULT_BASE_URL = "https://backend.reen.tech"

# Retry policy
MAX_RETRIES = 3
INITIAL_BACKOFF_MS = 1000

# Diagnostic line prefix (stdout is reserved for JSON-RPC)
LOG_TAG = "[reen-mcp]"

MISSING_TOKEN_MESSAGE = (
    "Error: REEN_API_TOKEN environment variable is required.\n"
    "Get your token at https://reen.tech -> Settings -> API Tokens.\n"
)

# MCP Server Instructions
SERVER_INSTRUCTIONS = """
REEN MCP Server - bridge to the REEN project-management backend.

The backend manages Gantt plans, tasks and subtasks, plan narratives,
Ex-Help requests and multi-model conferences.

Use whoami first to confirm the configured API token is valid.
"""
