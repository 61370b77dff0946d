"""Bootstrap wiring for the exemption negotiator and its method channel.

Usage:
    config = ExemptionBridgeConfig.from_environment()
    negotiator = build_negotiator(config)
    channel = build_method_channel(negotiator, config.channel_name)
    channel.invoke("requestBatteryOptimizationExemption").result  # bool
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from exemption_bridge.application.ports.platform_capability import (
    PlatformCapabilityGateProtocol,
)
from exemption_bridge.application.ports.power_policy import PowerPolicyQueryProtocol
from exemption_bridge.application.ports.settings_prompt import SettingsPromptProtocol
from exemption_bridge.application.services.exemption_negotiator import (
    ExemptionNegotiator,
)
from exemption_bridge.application.services.method_channel import MethodChannel
from exemption_bridge.config.bridge_config import ExemptionBridgeConfig
from exemption_bridge.infrastructure.adapters.adb_platform import (
    AdbPlatformCapabilityGate,
    AdbPowerPolicyQuery,
    AdbSettingsPrompt,
)
from exemption_bridge.infrastructure.adapters.adb_shell import AdbShell
from exemption_bridge.infrastructure.stubs.platform_capability_stub import (
    PlatformCapabilityGateStub,
)
from exemption_bridge.infrastructure.stubs.power_policy_stub import (
    PowerPolicyQueryStub,
)
from exemption_bridge.infrastructure.stubs.settings_prompt_stub import (
    SettingsPromptStub,
)

# Method names the caller may use; the first is what the mobile app sends
REQUEST_EXEMPTION_METHOD = "requestBatteryOptimizationExemption"
REQUEST_EXEMPTION_ALIAS = "requestExemption"
EXEMPTION_METHODS = (REQUEST_EXEMPTION_METHOD, REQUEST_EXEMPTION_ALIAS)


@dataclass(frozen=True)
class PlatformPorts:
    """The three platform collaborators of the negotiator."""

    capability_gate: PlatformCapabilityGateProtocol
    power_policy: PowerPolicyQueryProtocol
    settings_prompt: SettingsPromptProtocol


def build_ports(config: ExemptionBridgeConfig) -> PlatformPorts:
    """Build ADB-backed platform ports, or in-memory stubs if configured.

    Args:
        config: Bridge configuration.

    Returns:
        PlatformPorts sharing one AdbShell (or three fresh stubs).
    """
    if config.use_stubs:
        return PlatformPorts(
            capability_gate=PlatformCapabilityGateStub(
                min_sdk_version=config.min_sdk_version
            ),
            power_policy=PowerPolicyQueryStub(),
            settings_prompt=SettingsPromptStub(),
        )

    shell = AdbShell(
        adb_path=config.adb_path,
        serial=config.device_serial,
        timeout_seconds=config.command_timeout_seconds,
    )
    return PlatformPorts(
        capability_gate=AdbPlatformCapabilityGate(
            shell, min_sdk_version=config.min_sdk_version
        ),
        power_policy=AdbPowerPolicyQuery(shell),
        settings_prompt=AdbSettingsPrompt(shell),
    )


def build_negotiator(
    config: ExemptionBridgeConfig, ports: PlatformPorts | None = None
) -> ExemptionNegotiator:
    """Build a negotiator for config.application_id.

    Args:
        config: Bridge configuration.
        ports: Pre-built platform ports; built from config if omitted.
    """
    ports = ports or build_ports(config)
    return ExemptionNegotiator(
        application_id=config.application_id,
        capability_gate=ports.capability_gate,
        power_policy=ports.power_policy,
        settings_prompt=ports.settings_prompt,
    )


def build_method_channel(
    negotiator: ExemptionNegotiator, channel_name: str
) -> MethodChannel:
    """Build the method channel exposing the negotiator.

    Both exemption method names answer with the negotiation's boolean.
    """

    def request_exemption(arguments: Mapping[str, Any]) -> bool:
        return negotiator.request_exemption().granted

    channel = MethodChannel(channel_name)
    for method in EXEMPTION_METHODS:
        channel.register(method, request_exemption)
    return channel


def build_from_config(config: ExemptionBridgeConfig) -> MethodChannel:
    """Build the fully wired method channel for a configuration."""
    return build_method_channel(build_negotiator(config), config.channel_name)
