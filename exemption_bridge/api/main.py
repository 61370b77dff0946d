"""FastAPI application entry point for Exemption Bridge."""

from __future__ import annotations

from fastapi import FastAPI

from exemption_bridge import __version__
from exemption_bridge.api.middleware.logging_middleware import LoggingMiddleware
from exemption_bridge.api.routes.health import router as health_router
from exemption_bridge.api.routes.method_channel import router as method_channel_router


def create_app() -> FastAPI:
    """Create the FastAPI application."""
    application = FastAPI(
        title="Exemption Bridge API",
        description="Battery optimization exemption negotiation",
        version=__version__,
    )
    application.add_middleware(LoggingMiddleware)
    application.include_router(health_router)
    application.include_router(method_channel_router)
    return application


app = create_app()
