"""Error classes for MCP server."""

from typing import Any


class McpError(Exception):
    """Base exception for MCP server errors."""

    def __init__(
        self,
        error: str,
        message: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.error = error
        self.message = message
        self.details = details
        super().__init__(message)


class ReenApiError(McpError):
    """Failed request to the REEN backend.

    ``retryable`` marks outcomes that are plausibly transient (rate limiting,
    server overload, network instability). ``status`` is the HTTP status code
    when a response was received, ``None`` for transport-level failures.
    """

    def __init__(
        self,
        message: str,
        retryable: bool = False,
        status: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.retryable = retryable
        self.status = status
        super().__init__(
            error="reen_api_error",
            message=message,
            details=details,
        )
