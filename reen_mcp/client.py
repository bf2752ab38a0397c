"""HTTP client for the REEN backend API.

Retries on 429/5xx and transient network failures with exponential backoff.
Tokens are redacted from every diagnostic line.
"""

import asyncio
import json
from dataclasses import dataclass
from enum import Enum
from typing import Any

import httpx
from opentelemetry import trace
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_result,
    stop_after_attempt,
    wait_exponential,
)

from reen_mcp.config import Settings
from reen_mcp.constants import (
    DEFAULT_BASE_URL,
    INITIAL_BACKOFF_MS,
    MAX_RETRIES,
    USER_AGENT,
)
from reen_mcp.core.errors import ReenApiError
from reen_mcp.core.logger import log
from reen_mcp.core.metrics import API_CALLS, API_DURATION, API_RETRIES
from reen_mcp.core.telemetry import tracer

# Typed transport failures that are worth another attempt
RETRYABLE_EXCEPTIONS: tuple[type[BaseException], ...] = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
    ConnectionError,
    TimeoutError,
)

# Fallback for opaque errors that only carry a message
RETRYABLE_SIGNATURES = (
    "econnreset",
    "econnrefused",
    "etimedout",
    "fetch failed",
    "connection reset",
    "connection refused",
    "timed out",
    "http 429",
    "http 5",
)

# Backoff sleep, passed to tenacity so it can be replaced in tests
_sleep = asyncio.sleep


class OutcomeKind(str, Enum):
    SUCCESS = "success"
    RETRYABLE = "retryable"
    FATAL = "fatal"


@dataclass(frozen=True)
class AttemptOutcome:
    """Result of a single network attempt."""

    kind: OutcomeKind
    value: Any = None
    error: ReenApiError | None = None

    @classmethod
    def success(cls, value: Any) -> "AttemptOutcome":
        return cls(OutcomeKind.SUCCESS, value=value)

    @classmethod
    def failure(cls, error: ReenApiError) -> "AttemptOutcome":
        kind = OutcomeKind.RETRYABLE if error.retryable else OutcomeKind.FATAL
        return cls(kind, error=error)


def is_retryable(error: BaseException) -> bool:
    """Decide whether a dispatch error is plausibly transient."""
    if isinstance(error, RETRYABLE_EXCEPTIONS):
        return True
    message = str(error).lower()
    return any(signature in message for signature in RETRYABLE_SIGNATURES)


def _is_retryable_outcome(outcome: AttemptOutcome) -> bool:
    return outcome.kind is OutcomeKind.RETRYABLE


def _raise_last_error(retry_state: RetryCallState) -> Any:
    """Surface the last classified failure once the budget is spent."""
    outcome: AttemptOutcome = retry_state.outcome.result()  # type: ignore[union-attr]
    raise outcome.error or ReenApiError("Request failed")


class ReenClient:
    """Resilient executor for REEN backend requests.

    Base URL and token are fixed at construction; instances hold no other
    state, so concurrent requests on one client are independent.
    """

    def __init__(
        self,
        token: str,
        base_url: str | None = None,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or DEFAULT_BASE_URL).removesuffix("/")
        self._token = token
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "ReenClient":
        return cls(
            token=settings.reen_api_token,
            base_url=settings.reen_api_url,
            timeout=settings.request_timeout,
            transport=transport,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(base_url={self.base_url!r})"

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self._token}",
            "Content-Type": "application/json",
            "User-Agent": USER_AGENT,
        }

    async def request(self, method: str, path: str, body: Any = None) -> Any:
        """Execute a request against the REEN API with retry.

        Up to MAX_RETRIES retries follow a retryable outcome, waiting
        1s, 2s and 4s before each.

        Args:
            method: HTTP method (GET, POST, PUT, PATCH, DELETE)
            path: Path relative to the base URL, starting with "/"
            body: JSON-serializable payload; ``None`` sends no body at all

        Returns:
            Decoded JSON response (``None`` for an empty body).

        Raises:
            ReenApiError: Non-retryable failure, or retry budget exhausted.
            ValueError: Path does not start with "/".
        """
        if not path.startswith("/"):
            raise ValueError(f"Path must start with '/': {path!r}")

        method = method.upper()
        url = f"{self.base_url}{path}"
        # Serialized once so every attempt sends identical bytes
        content = json.dumps(body).encode("utf-8") if body is not None else None

        def before_attempt(retry_state: RetryCallState) -> None:
            attempt = retry_state.attempt_number
            trace.get_current_span().set_attribute("reen.attempts", attempt)
            if attempt > 1:
                log(f"Retry {attempt - 1}/{MAX_RETRIES} for {method} {path}")
                API_RETRIES.labels(method=method).inc()

        retrying = AsyncRetrying(
            stop=stop_after_attempt(MAX_RETRIES + 1),
            wait=wait_exponential(multiplier=INITIAL_BACKOFF_MS / 1000),
            retry=retry_if_result(_is_retryable_outcome),
            before=before_attempt,
            retry_error_callback=_raise_last_error,
            sleep=_sleep,
        )

        with (
            tracer.start_as_current_span("reen.request") as span,
            API_DURATION.labels(method=method).time(),
        ):
            span.set_attribute("http.method", method)
            span.set_attribute("reen.path", path)

            outcome = await retrying(self._attempt, method, url, content)

            if outcome.kind is OutcomeKind.SUCCESS:
                return outcome.value
            raise outcome.error or ReenApiError("Request failed")

    async def _attempt(
        self, method: str, url: str, content: bytes | None
    ) -> AttemptOutcome:
        """Dispatch one attempt and record its outcome."""
        outcome = await self._dispatch(method, url, content)

        API_CALLS.labels(method=method, status=outcome.kind.value).inc()
        if outcome.error is not None and outcome.error.status is not None:
            trace.get_current_span().set_attribute(
                "http.status_code", outcome.error.status
            )
        return outcome

    async def _dispatch(
        self, method: str, url: str, content: bytes | None
    ) -> AttemptOutcome:
        try:
            async with httpx.AsyncClient(
                transport=self._transport,
                timeout=self.timeout,
                follow_redirects=True,
            ) as client:
                response = await client.request(
                    method, url, content=content, headers=self._headers()
                )
        except (httpx.HTTPError, OSError) as e:
            error = ReenApiError(
                str(e) or e.__class__.__name__,
                retryable=is_retryable(e),
                details={"exception": e.__class__.__name__},
            )
            error.__cause__ = e
            return AttemptOutcome.failure(error)

        return self._classify_response(response)

    def _classify_response(self, response: httpx.Response) -> AttemptOutcome:
        status = response.status_code

        if status == 429 or status >= 500:
            return AttemptOutcome.failure(
                ReenApiError(
                    f"HTTP {status}: {response.reason_phrase}",
                    retryable=True,
                    status=status,
                )
            )

        if not response.is_success:
            try:
                text = response.text
            except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError):
                text = ""
            return AttemptOutcome.failure(
                ReenApiError(
                    f"HTTP {status}: {text or response.reason_phrase}",
                    status=status,
                )
            )

        if not response.content:
            return AttemptOutcome.success(None)
        try:
            return AttemptOutcome.success(response.json())
        except ValueError as e:
            error = ReenApiError(
                f"Invalid JSON in HTTP {status} response: {e}", status=status
            )
            error.__cause__ = e
            return AttemptOutcome.failure(error)

    async def get(self, path: str) -> Any:
        return await self.request("GET", path)

    async def post(self, path: str, body: Any = None) -> Any:
        return await self.request("POST", path, body)

    async def put(self, path: str, body: Any = None) -> Any:
        return await self.request("PUT", path, body)

    async def patch(self, path: str, body: Any = None) -> Any:
        return await self.request("PATCH", path, body)

    async def delete(self, path: str, body: Any = None) -> Any:
        return await self.request("DELETE", path, body)
