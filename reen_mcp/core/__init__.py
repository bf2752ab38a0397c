"""Core module - errors, logging, observability."""

from reen_mcp.core.errors import McpError, ReenApiError
from reen_mcp.core.logger import configure_logging, log, redact

__all__ = [
    "McpError",
    "ReenApiError",
    "configure_logging",
    "log",
    "redact",
]
