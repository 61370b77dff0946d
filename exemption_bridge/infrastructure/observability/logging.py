"""Structured logging configuration with structlog.

Supports production (JSON) and development (console) output modes.

Log Entry Format (production):
    {
        "timestamp": "2024-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "exemption_negotiation_completed",
        "correlation_id": "uuid",
        "service": "ExemptionNegotiator",
        "state": "prompted",
        "granted": true
    }

Usage:
    from exemption_bridge.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")  # JSON output
    configure_structlog(environment="development")  # Console output
"""

import logging
import os
from typing import TextIO, cast

import structlog
from structlog.typing import Processor

from exemption_bridge.application.observability.correlation import (
    correlation_id_processor,
)

# Environment variable for log level (default: INFO)
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def _get_log_level() -> int:
    """Get the configured log level from environment.

    Returns:
        The logging level integer (e.g., logging.INFO).
    """
    level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
    return getattr(logging, level_name, logging.INFO)


def configure_structlog(
    environment: str = "production", stream: TextIO | None = None
) -> None:
    """Configure structlog for the application.

    Should be called once at startup (API app factory, CLI callback).

    Args:
        environment: 'production' for JSON output, 'development' for console.
                    Defaults to 'production'.
        stream: Where log lines are written. Defaults to stdout; the CLI
                passes stderr so command output stays parseable.
    """
    shared_processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        cast(Processor, correlation_id_processor),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if environment == "production":
        final_processor: Processor = structlog.processors.JSONRenderer()
    else:
        final_processor = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=shared_processors + [final_processor],
        wrapper_class=structlog.make_filtering_bound_logger(_get_log_level()),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream),
        cache_logger_on_first_use=True,
    )


def get_logger_for_service(
    service_name: str, component: str = "exemption"
) -> structlog.BoundLogger:
    """Get a pre-bound logger for a service or adapter.

    Args:
        service_name: The name of the service (typically class name).
        component: The component type (default: "exemption").

    Returns:
        A BoundLogger with service and component bound.
    """
    return structlog.get_logger().bind(
        service=service_name,
        component=component,
    )
