"""Platform adapters implementing the application ports."""

from exemption_bridge.infrastructure.adapters.adb_platform import (
    AdbPlatformCapabilityGate,
    AdbPowerPolicyQuery,
    AdbSettingsPrompt,
)
from exemption_bridge.infrastructure.adapters.adb_shell import AdbCommandError, AdbShell

__all__: list[str] = [
    "AdbCommandError",
    "AdbPlatformCapabilityGate",
    "AdbPowerPolicyQuery",
    "AdbSettingsPrompt",
    "AdbShell",
]
