"""Observability helpers for applications embedding the Aqua client."""

from aqua_client.observability.logging import (
    configure_structlog,
    get_logger_for_service,
    redact_credentials,
)

__all__: list[str] = [
    "configure_structlog",
    "get_logger_for_service",
    "redact_credentials",
]
