"""Application ports for Exemption Bridge.

Infrastructure adapters and stubs implement these interfaces.
"""

from exemption_bridge.application.ports.platform_capability import (
    PlatformCapabilityGateProtocol,
)
from exemption_bridge.application.ports.power_policy import PowerPolicyQueryProtocol
from exemption_bridge.application.ports.settings_prompt import SettingsPromptProtocol

__all__: list[str] = [
    "PlatformCapabilityGateProtocol",
    "PowerPolicyQueryProtocol",
    "SettingsPromptProtocol",
]
