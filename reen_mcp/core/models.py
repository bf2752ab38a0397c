"""Shared Pydantic base models for MCP server."""

from pydantic import BaseModel, ConfigDict


class BaseMcpModel(BaseModel):
    """Base model with common configuration for all MCP models.

    Backend payloads are open-ended, so unknown fields are kept.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        use_enum_values=True,
        extra="allow",
    )
