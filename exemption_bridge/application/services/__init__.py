"""Application services for Exemption Bridge."""

from exemption_bridge.application.services.exemption_negotiator import (
    ExemptionNegotiator,
)
from exemption_bridge.application.services.method_channel import (
    MethodChannel,
    MethodHandler,
)

__all__: list[str] = ["ExemptionNegotiator", "MethodChannel", "MethodHandler"]
