"""Configuration management using pydantic-settings."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from reen_mcp.constants import DEFAULT_BASE_URL


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # REEN backend
    reen_api_token: str = Field(description="REEN API token (reen_...)")
    reen_api_url: str = Field(
        default=DEFAULT_BASE_URL, description="REEN backend base URL"
    )
    request_timeout: float = Field(
        default=30.0, description="Per-attempt HTTP timeout in seconds"
    )

    # Logging and Observability
    log_level: str = Field(
        default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)"
    )
    enable_tracing: bool = Field(
        default=False, description="Enable OpenTelemetry tracing (default: False)"
    )
    otel_exporter_otlp_endpoint: str = Field(
        default="",
        description="OpenTelemetry OTLP exporter endpoint",
    )
    otel_service_name: str = Field(
        default="reen-mcp-server",
        description="Service name for telemetry",
    )

    @field_validator("reen_api_token")
    @classmethod
    def _token_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("REEN_API_TOKEN must not be empty")
        return value

    @field_validator("reen_api_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.removesuffix("/") or DEFAULT_BASE_URL


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()  # type: ignore[call-arg]
