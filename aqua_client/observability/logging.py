"""structlog setup for applications that embed the Aqua client.

The client binds ``service``/``component``/``endpoint`` to its logger and
emits ``aqua_*`` events; how they are rendered is up to the host process,
which calls ``configure_structlog`` once at startup. ``production`` gives
one JSON object per line, anything else gives colored console output.

Bearer credentials never reach the output: any ``authorization`` or
``token`` key in an event is masked before rendering.
"""

import logging
import os
from typing import Any

import structlog
from structlog.typing import Processor

LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"

REDACTED = "[redacted]"
_CREDENTIAL_KEYS = frozenset({"authorization", "token"})


def _log_level_from_env() -> int:
    """Numeric level named by LOG_LEVEL; unknown names mean INFO."""
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def redact_credentials(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Mask bearer tokens in an event before it is rendered."""
    for key in event_dict:
        if key.lower() in _CREDENTIAL_KEYS:
            event_dict[key] = REDACTED
    return event_dict


def configure_structlog(environment: str = "production") -> None:
    """Install the processor chain and renderer for ``environment``."""
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        redact_credentials,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        renderer: Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [renderer],
        wrapper_class=structlog.make_filtering_bound_logger(_log_level_from_env()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "client"
) -> structlog.BoundLogger:
    """Logger with ``service`` and ``component`` already bound."""
    return structlog.get_logger().bind(service=service_name, component=component)
