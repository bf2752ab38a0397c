"""Tests for credential-safe diagnostic logging."""

import logging

import pytest

from reen_mcp.core.logger import (
    REDACTED_TOKEN,
    _StderrHandler,
    configure_logging,
    log,
    logger,
    redact,
)


class TestRedact:
    """Tests for redact function."""

    def test_redacts_token(self) -> None:
        """Test a full token is replaced."""
        token = "reen_" + "a" * 64
        assert redact(f"token={token}") == "token=reen_***REDACTED***"

    def test_redacts_every_occurrence(self) -> None:
        """Test multiple tokens in one line."""
        first = "reen_" + "0" * 64
        second = "reen_" + "f1" * 32
        result = redact(f"{first} and {second}")
        assert result == f"{REDACTED_TOKEN} and {REDACTED_TOKEN}"

    @pytest.mark.parametrize(
        "text",
        [
            "reen_" + "a" * 63,  # too short
            "reen_" + "A" * 64,  # uppercase hex is not token-shaped
            "plain message",
            "",
        ],
    )
    def test_leaves_other_text(self, text: str) -> None:
        """Test non-token text passes through unchanged."""
        assert redact(text) == text


class TestLog:
    """Tests for log function."""

    def test_writes_tagged_redacted_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test a token in a message never reaches stderr."""
        log("token=reen_" + "a" * 64)

        captured = capsys.readouterr()
        assert "[reen-mcp] token=reen_***REDACTED***\n" in captured.err
        assert "a" * 64 not in captured.err
        assert captured.out == ""

    def test_redacts_format_args(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test tokens passed as logging args are redacted too."""
        configure_logging()
        token = "reen_" + "b" * 64

        logging.getLogger("reen_mcp.client").info("using %s", token)

        captured = capsys.readouterr()
        assert "[reen-mcp] using reen_***REDACTED***" in captured.err
        assert token not in captured.err

    def test_written_when_level_is_above_info(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Test LOG_LEVEL never silences diagnostic notices."""
        configure_logging("ERROR")
        try:
            log("Starting reen-mcp-server v0.1.0")
        finally:
            configure_logging("INFO")

        assert "[reen-mcp] Starting reen-mcp-server v0.1.0\n" in capsys.readouterr().err

    def test_never_raises_on_broken_stream(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a failing diagnostic channel is not propagated."""

        class BrokenStream:
            def write(self, text: str) -> int:
                raise BrokenPipeError("stderr closed")

            def flush(self) -> None:
                raise BrokenPipeError("stderr closed")

        monkeypatch.setattr("sys.stderr", BrokenStream())

        log("still fine")

    def test_never_raises_without_stream(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a missing stderr is a silent no-op."""
        monkeypatch.setattr("sys.stderr", None)

        log("nowhere to go")


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_idempotent(self) -> None:
        """Test repeated calls install a single handler."""
        configure_logging()
        configure_logging("DEBUG")

        assert sum(isinstance(h, _StderrHandler) for h in logger.handlers) == 1
        assert logger.level == logging.DEBUG
        assert logger.propagate is False

        configure_logging("INFO")

    def test_unknown_level_defaults_to_info(self) -> None:
        """Test invalid level names fall back to INFO."""
        configure_logging("LOUD")
        assert logger.level == logging.INFO
