"""API routes."""

from exemption_bridge.api.routes.health import router as health_router
from exemption_bridge.api.routes.method_channel import router as method_channel_router

__all__: list[str] = ["health_router", "method_channel_router"]
