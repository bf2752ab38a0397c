"""OpenTelemetry integration for distributed tracing."""

import logging
import sys

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter

from reen_mcp.config import Settings

logger = logging.getLogger(__name__)

tracer = trace.get_tracer("reen_mcp")


def init_telemetry(settings: Settings, service_name: str | None = None) -> None:
    """Initialize OpenTelemetry tracing with OTLP or console exporter.

    Config:
    - enable_tracing: master switch (default: False)
    - otel_exporter_otlp_endpoint: OTLP collector address; when empty, spans
      are printed by the console exporter
    - otel_service_name: service.name resource attribute

    Failures are logged and swallowed; the bridge runs without tracing.

    Args:
        settings: Application settings
        service_name: Service name override (default: from settings)
    """
    try:
        if not settings.enable_tracing:
            logger.debug("Tracing disabled (enable_tracing=false)")
            return

        service_name = service_name or settings.otel_service_name or "reen-mcp-server"

        resource = Resource(attributes={"service.name": service_name})
        provider = TracerProvider(resource=resource)

        otlp_endpoint = settings.otel_exporter_otlp_endpoint
        if otlp_endpoint:
            logger.info(f"Initializing OTLP exporter: {otlp_endpoint}")
            # Add /v1/traces suffix if not present
            endpoint_url = (
                otlp_endpoint
                if "/v1/traces" in otlp_endpoint
                else f"{otlp_endpoint.rstrip('/')}/v1/traces"
            )
            exporter = OTLPSpanExporter(endpoint=endpoint_url)
        else:
            # stdout carries JSON-RPC, keep console spans on stderr
            logger.info("OTLP endpoint not set, using console exporter on stderr")
            exporter = ConsoleSpanExporter(out=sys.stderr)
        provider.add_span_processor(BatchSpanProcessor(exporter))

        trace.set_tracer_provider(provider)
        logger.info(f"OpenTelemetry initialized for service: {service_name}")

    except Exception as e:
        logger.warning(f"Failed to initialize OpenTelemetry: {e}")
        logger.info("Continuing without tracing...")
