"""API middleware components."""

from exemption_bridge.api.middleware.logging_middleware import LoggingMiddleware

__all__: list[str] = ["LoggingMiddleware"]
