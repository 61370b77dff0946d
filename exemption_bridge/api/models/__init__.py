"""API response models."""

from exemption_bridge.api.models.health import HealthResponse
from exemption_bridge.api.models.method_channel import MethodCallResponse

__all__: list[str] = ["HealthResponse", "MethodCallResponse"]
