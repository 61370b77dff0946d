"""Application-level observability helpers (correlation context)."""

from exemption_bridge.application.observability.correlation import (
    correlation_id_processor,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
)

__all__: list[str] = [
    "correlation_id_processor",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
]
