"""Domain errors for Exemption Bridge.

Provides specific exception classes for different failure scenarios.
All exceptions inherit from ExemptionBridgeError.
"""

from exemption_bridge.domain.errors.platform_query import PlatformQueryError
from exemption_bridge.domain.errors.prompt_launch import PromptLaunchError

__all__: list[str] = ["PlatformQueryError", "PromptLaunchError"]
