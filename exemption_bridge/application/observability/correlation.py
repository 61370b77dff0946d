"""Correlation ID management for request tracing.

A correlation ID ties together every log line emitted while serving one
method-channel call, whether it arrived over HTTP or from the CLI.

Usage:
    # At request start (middleware, CLI command)
    correlation_id = request.headers.get("X-Correlation-ID")
    set_correlation_id(correlation_id or generate_correlation_id())

    # In services
    log = structlog.get_logger().bind(correlation_id=get_correlation_id())

    # In structlog configuration
    processors = [..., correlation_id_processor, ...]
"""

from contextvars import ContextVar
from typing import Any
from uuid import uuid4

# Empty string default avoids None handling at every call site
_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation ID (UUID4).

    Returns:
        A new UUID4 string suitable for correlation tracking.
    """
    return str(uuid4())


def get_correlation_id() -> str:
    """Get the current correlation ID from context.

    Returns:
        The current correlation ID or empty string if not set.
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID in the current context.

    Args:
        correlation_id: The correlation ID to set.
    """
    _correlation_id.set(correlation_id)


def correlation_id_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor to add correlation_id to every log entry.

    Args:
        logger: The logger instance (unused, required by structlog).
        method_name: The logging method name (unused, required by structlog).
        event_dict: The event dictionary to modify.

    Returns:
        The event dictionary with correlation_id added.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict
