"""Prometheus metrics for REEN MCP Server."""

import logging
import os
from contextlib import contextmanager

from prometheus_client import Counter, Histogram

logger = logging.getLogger(__name__)


# Read directly from the environment: metrics are created at import time,
# before settings are validated.
MONITORING_ENABLED = os.getenv("ENABLE_MONITORING", "false").lower() in (
    "1",
    "true",
    "yes",
)

if MONITORING_ENABLED:
    logger.info("Prometheus metrics enabled (ENABLE_MONITORING=true)")

    # One increment per network attempt
    API_CALLS = Counter(
        "reen_api_calls_total",
        "HTTP attempts against the REEN backend",
        ["method", "status"],  # status: success | retryable | fatal
    )

    API_RETRIES = Counter(
        "reen_api_retries_total",
        "Retries issued after a retryable failure",
        ["method"],
    )

    # Logical request duration, backoff included
    API_DURATION = Histogram(
        "reen_api_request_duration_seconds",
        "REEN backend request duration in seconds",
        ["method"],
        buckets=[0.1, 0.5, 1.0, 2.0, 5.0, 10.0, 30.0, 60.0],
    )
else:
    logger.info("Prometheus metrics disabled (ENABLE_MONITORING=false)")

    # Create no-op metrics that do nothing when monitoring is disabled
    class _NoOpMetric:
        """No-op metric that does nothing."""

        def labels(self, **kwargs):  # noqa: ARG002
            return self

        def inc(self, amount=1):  # noqa: ARG002
            pass

        def time(self):
            @contextmanager
            def _noop():
                yield

            return _noop()

    API_CALLS = _NoOpMetric()
    API_RETRIES = _NoOpMetric()
    API_DURATION = _NoOpMetric()
