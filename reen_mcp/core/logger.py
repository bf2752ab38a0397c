"""Credential-safe diagnostic logging.

stdout carries MCP JSON-RPC frames, so every diagnostic line goes to stderr.
API tokens are redacted from the formatted line before it is written.
"""

import logging
import re
import sys

from reen_mcp.constants import LOG_TAG

LOGGER_NAME = "reen_mcp"

TOKEN_PATTERN = re.compile(r"reen_[a-f0-9]{64}")
REDACTED_TOKEN = "reen_***REDACTED***"

logger = logging.getLogger(LOGGER_NAME)


def redact(text: str) -> str:
    """Replace every REEN API token in text with a placeholder."""
    return TOKEN_PATTERN.sub(REDACTED_TOKEN, text)


class RedactingFormatter(logging.Formatter):
    """Formatter that redacts tokens from the fully rendered record.

    Redacting after formatting covers %-args and exception text as well as
    the message itself.
    """

    def format(self, record: logging.LogRecord) -> str:
        return redact(super().format(record))


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever sys.stderr is at emit time."""

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def configure_logging(level: str | int = logging.INFO) -> logging.Logger:
    """Install the redacting stderr handler on the package logger.

    Safe to call more than once; the handler is installed only once and the
    level is updated on every call.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        handler = _StderrHandler()
        handler.setFormatter(RedactingFormatter(f"{LOG_TAG} %(message)s"))
        logger.addHandler(handler)

    logger.setLevel(level)
    logger.propagate = False
    return logger


def log(message: str) -> None:
    """Write one tagged, redacted diagnostic line to stderr.

    Emitted at INFO or the configured level, whichever is higher, so the
    line is written regardless of LOG_LEVEL. Never raises: emit errors are
    routed to ``logging.Handler.handleError``.
    """
    if not any(isinstance(h, _StderrHandler) for h in logger.handlers):
        configure_logging()
    logger.log(max(logging.INFO, logger.getEffectiveLevel()), message)
