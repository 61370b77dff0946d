"""Configuration module for Exemption Bridge.

Available Configurations:
- ExemptionBridgeConfig: negotiator, method channel and ADB adapter settings
"""

from exemption_bridge.config.bridge_config import (
    DEFAULT_BRIDGE_CONFIG,
    TEST_BRIDGE_CONFIG,
    ExemptionBridgeConfig,
)

__all__ = [
    "ExemptionBridgeConfig",
    "DEFAULT_BRIDGE_CONFIG",
    "TEST_BRIDGE_CONFIG",
]
