"""Bootstrap wiring for logging configuration."""

from __future__ import annotations

from typing import TextIO

from exemption_bridge.infrastructure.observability import (
    configure_structlog as _configure_structlog,
)


def configure_structlog(environment: str, stream: TextIO | None = None) -> None:
    """Configure structlog for the given environment."""
    _configure_structlog(environment=environment, stream=stream)


__all__ = ["configure_structlog"]
