"""Unit tests for structlog configuration."""

import logging

import pytest
import structlog

from aqua_client.observability import (
    configure_structlog,
    get_logger_for_service,
    redact_credentials,
)
from aqua_client.observability.logging import (
    LOG_LEVEL_ENV,
    REDACTED,
    _log_level_from_env,
)


@pytest.mark.usefixtures("reset_structlog")
class TestConfigureStructlog:
    """Tests for configure_structlog."""

    def test_production_renders_json(self) -> None:
        """Production output is JSON for log aggregation."""
        configure_structlog(environment="production")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self) -> None:
        """Any other environment gets the console renderer."""
        configure_structlog(environment="development")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_production_output_is_json(self, capsys: pytest.CaptureFixture) -> None:
        """Emitted entries carry level, timestamp and bound service."""
        configure_structlog(environment="production")

        get_logger_for_service("AquaClient").warning("aqua_unexpected_status")

        out = capsys.readouterr().out
        assert '"event": "aqua_unexpected_status"' in out
        assert '"service": "AquaClient"' in out
        assert '"component": "client"' in out
        assert '"level": "warning"' in out


class TestLogLevel:
    """Tests for LOG_LEVEL handling."""

    def test_default_is_info(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)

        assert _log_level_from_env() == logging.INFO

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "debug")

        assert _log_level_from_env() == logging.DEBUG

    def test_unknown_level_falls_back(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(LOG_LEVEL_ENV, "chatty")

        assert _log_level_from_env() == logging.INFO


class TestRedactCredentials:
    """Bearer credentials never reach rendered output."""

    def test_masks_credential_keys(self) -> None:
        """authorization and token keys are masked case-insensitively."""
        event = {
            "event": "aqua_request",
            "Authorization": "Bearer secret-token",
            "token": "secret-token",
            "url": "https://aqua.test",
        }

        redacted = redact_credentials(None, "info", event)

        assert redacted["Authorization"] == REDACTED
        assert redacted["token"] == REDACTED
        assert redacted["url"] == "https://aqua.test"

    @pytest.mark.usefixtures("reset_structlog")
    def test_configured_output_is_redacted(
        self, capsys: pytest.CaptureFixture
    ) -> None:
        """The installed chain masks a token bound by the caller."""
        configure_structlog(environment="production")

        get_logger_for_service("Sync").warning("aqua_sync", token="secret-token")

        out = capsys.readouterr().out
        assert "secret-token" not in out
        assert REDACTED in out
