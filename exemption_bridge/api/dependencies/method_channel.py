"""Method channel dependency for API endpoints.

The channel is a process-wide singleton built from environment
configuration on first use. Tests replace it through
`app.dependency_overrides[get_method_channel]` or `set_method_channel()`.
"""

from __future__ import annotations

from exemption_bridge.application.services.method_channel import MethodChannel
from exemption_bridge.bootstrap.exemption import build_from_config
from exemption_bridge.config.bridge_config import ExemptionBridgeConfig

# Global singleton (built lazily from the environment)
_method_channel: MethodChannel | None = None


def get_method_channel() -> MethodChannel:
    """Get the method channel instance.

    Returns:
        The configured MethodChannel.
    """
    global _method_channel
    if _method_channel is None:
        _method_channel = build_from_config(ExemptionBridgeConfig.from_environment())
    return _method_channel


def set_method_channel(channel: MethodChannel | None) -> None:
    """Set the method channel instance (None resets to lazy construction).

    Args:
        channel: MethodChannel to serve.
    """
    global _method_channel
    _method_channel = channel
