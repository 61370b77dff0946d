"""Platform capability gate port definition.

Defines the abstract interface for checking whether the running platform
version supports power-management exemption at all.
"""

from abc import ABC, abstractmethod


class PlatformCapabilityGateProtocol(ABC):
    """Abstract protocol for the platform capability gate.

    Production implementations:
    - AdbPlatformCapabilityGate: reads the SDK level of an Android device

    Development/Testing:
    - PlatformCapabilityGateStub: configurable answer and failure
    """

    @abstractmethod
    def supports_exemption(self) -> bool:
        """Report whether the exemption feature exists on this platform.

        Returns:
            True if the platform version introduced the exemption feature.

        Raises:
            PlatformQueryError: If the platform version cannot be read.
        """
        ...
