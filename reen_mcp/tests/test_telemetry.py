"""Tests for tracing initialization."""

import pytest

from reen_mcp.config import Settings
from reen_mcp.core import telemetry
from reen_mcp.tests.conftest import TEST_TOKEN


def _settings(**overrides: object) -> Settings:
    return Settings(
        _env_file=None,  # type: ignore[call-arg]
        reen_api_token=TEST_TOKEN,
        **overrides,  # type: ignore[arg-type]
    )


def test_disabled_leaves_provider_untouched(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test nothing is installed when tracing is off."""
    calls: list[object] = []
    monkeypatch.setattr(telemetry.trace, "set_tracer_provider", calls.append)

    telemetry.init_telemetry(_settings(enable_tracing=False))

    assert calls == []


def test_otlp_endpoint_gets_traces_suffix(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test the OTLP exporter is pointed at /v1/traces."""
    endpoints: list[str] = []
    providers: list[object] = []

    class FakeExporter:
        def __init__(self, endpoint: str) -> None:
            endpoints.append(endpoint)

        def export(self, spans):  # noqa: ARG002
            return None

        def shutdown(self) -> None:
            pass

    monkeypatch.setattr(telemetry, "OTLPSpanExporter", FakeExporter)
    monkeypatch.setattr(telemetry.trace, "set_tracer_provider", providers.append)

    telemetry.init_telemetry(
        _settings(enable_tracing=True, otel_exporter_otlp_endpoint="http://otel:4318/")
    )

    assert endpoints == ["http://otel:4318/v1/traces"]
    assert len(providers) == 1


def test_failure_is_swallowed(monkeypatch: pytest.MonkeyPatch) -> None:
    """Test tracing setup errors never stop the server."""

    def broken(provider: object) -> None:
        raise RuntimeError("collector unreachable")

    monkeypatch.setattr(telemetry.trace, "set_tracer_provider", broken)

    telemetry.init_telemetry(_settings(enable_tracing=True))
