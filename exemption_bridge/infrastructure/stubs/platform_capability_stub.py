"""Platform capability gate stub for development and testing.

Simulates a platform at a configurable SDK level.
"""

from __future__ import annotations

from exemption_bridge.application.ports.platform_capability import (
    PlatformCapabilityGateProtocol,
)
from exemption_bridge.domain.errors.platform_query import PlatformQueryError

DEFAULT_STUB_SDK_VERSION = 34
DEFAULT_STUB_MIN_SDK_VERSION = 23


class PlatformCapabilityGateStub(PlatformCapabilityGateProtocol):
    """Stub implementation of PlatformCapabilityGateProtocol.

    Example:
        stub = PlatformCapabilityGateStub(sdk_version=22)
        stub.supports_exemption()  # False

        stub.set_failure(True)
        stub.supports_exemption()  # Raises PlatformQueryError
    """

    def __init__(
        self,
        sdk_version: int = DEFAULT_STUB_SDK_VERSION,
        min_sdk_version: int = DEFAULT_STUB_MIN_SDK_VERSION,
    ) -> None:
        """Initialize the stub.

        Args:
            sdk_version: Simulated platform SDK level.
            min_sdk_version: First SDK level supporting exemption.
        """
        self._sdk_version = sdk_version
        self._min_sdk_version = min_sdk_version
        self._should_fail = False
        self.call_count = 0

    def supports_exemption(self) -> bool:
        """Report support based on the simulated SDK level."""
        self.call_count += 1
        if self._should_fail:
            raise PlatformQueryError("sdk_version", "Simulated capability failure")
        return self._sdk_version >= self._min_sdk_version

    # Test control methods

    def set_sdk_version(self, sdk_version: int) -> None:
        """Change the simulated SDK level."""
        self._sdk_version = sdk_version

    def set_failure(self, should_fail: bool) -> None:
        """Enable or disable query failure simulation."""
        self._should_fail = should_fail
