"""Pydantic models for auth tools."""

from pydantic import Field

from reen_mcp.core.models import BaseMcpModel


class WhoamiResponse(BaseMcpModel):
    """Authenticated user as reported by the backend."""

    username: str = Field(description="Account username")
    role: str = Field(description="Account role")
    email: str | None = Field(default=None, description="Account email")
