"""Integration tests for ConsoleAdapter and StubEmailService.

Tests cover:
- JSON output from real structlog
- Level filtering
- Error context fields
- Bound context
- Stub email log lines never carry the full reset token

Architecture:
- Fresh ConsoleAdapter per test (bypasses the container singleton)
- stdout is patched before the adapter is built
"""

import json
import sys
from io import StringIO
from unittest.mock import patch

import pytest

from src.infrastructure.email import StubEmailService
from src.infrastructure.logging import ConsoleAdapter


def _lines(output: StringIO) -> list[dict]:
    return [json.loads(line) for line in output.getvalue().splitlines() if line]


@pytest.mark.integration
class TestConsoleAdapter:
    """Real structlog output."""

    def test_json_mode_produces_valid_json(self):
        captured = StringIO()

        with patch.object(sys, "stdout", captured):
            adapter = ConsoleAdapter(use_json=True)
            adapter.info("Token issued", token_id="abc", count=2)

        [log] = _lines(captured)
        assert log["event"] == "Token issued"
        assert log["token_id"] == "abc"
        assert log["count"] == 2
        assert log["level"] == "info"
        assert "timestamp" in log

    def test_level_filters_lower_levels(self):
        captured = StringIO()

        with patch.object(sys, "stdout", captured):
            adapter = ConsoleAdapter(use_json=True, level="WARNING")
            adapter.debug("hidden debug")
            adapter.info("hidden info")
            adapter.warning("shown warning")

        assert [log["event"] for log in _lines(captured)] == ["shown warning"]

    def test_error_adds_exception_context(self):
        captured = StringIO()

        with patch.object(sys, "stdout", captured):
            adapter = ConsoleAdapter(use_json=True)
            adapter.error("Token store failure", error=RuntimeError("db down"))

        [log] = _lines(captured)
        assert log["error_type"] == "RuntimeError"
        assert log["error_message"] == "db down"

    def test_bind_carries_context(self):
        captured = StringIO()

        with patch.object(sys, "stdout", captured):
            adapter = ConsoleAdapter(use_json=True).bind(request_id="r-1")
            adapter.info("bound")

        [log] = _lines(captured)
        assert log["request_id"] == "r-1"


@pytest.mark.integration
class TestStubEmailService:
    """Stub delivery through the real logger."""

    async def test_reset_email_logs_preview_only(self):
        captured = StringIO()
        secret = "d" * 64

        with patch.object(sys, "stdout", captured):
            service = StubEmailService(logger=ConsoleAdapter(use_json=True))
            await service.send_password_reset_email(
                to_email="reader@example.com",
                reset_url=f"http://localhost:4200/reset-password?token={secret}",
            )

        assert service.sent == [("password_reset", "reader@example.com")]
        assert secret not in captured.getvalue()
        [log] = _lines(captured)
        assert log["token_preview"] == "dddddddd..."

    async def test_password_changed_notification(self, mock_logger):
        service = StubEmailService(logger=mock_logger)

        await service.send_password_changed_notification(to_email="reader@example.com")

        assert service.sent == [("password_changed", "reader@example.com")]
        mock_logger.info.assert_called_once()
