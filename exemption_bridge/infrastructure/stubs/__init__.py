"""In-memory stubs of the platform ports for development and testing.

WARNING: These stubs are NOT for production use.
"""

from exemption_bridge.infrastructure.stubs.platform_capability_stub import (
    PlatformCapabilityGateStub,
)
from exemption_bridge.infrastructure.stubs.power_policy_stub import (
    PowerPolicyQueryStub,
)
from exemption_bridge.infrastructure.stubs.settings_prompt_stub import (
    SettingsPromptStub,
)

__all__: list[str] = [
    "PlatformCapabilityGateStub",
    "PowerPolicyQueryStub",
    "SettingsPromptStub",
]
