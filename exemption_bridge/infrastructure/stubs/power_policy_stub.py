"""Power policy query stub for development and testing.

Holds the exempt application set in memory.
"""

from __future__ import annotations

from exemption_bridge.application.ports.power_policy import PowerPolicyQueryProtocol
from exemption_bridge.domain.errors.platform_query import PlatformQueryError


class PowerPolicyQueryStub(PowerPolicyQueryProtocol):
    """Stub implementation of PowerPolicyQueryProtocol.

    Example:
        stub = PowerPolicyQueryStub()
        stub.is_exempt("com.example.app")  # False

        stub.add_exempt("com.example.app")
        stub.is_exempt("com.example.app")  # True
    """

    def __init__(self, exempt: set[str] | None = None) -> None:
        """Initialize the stub.

        Args:
            exempt: Application ids that start out exempted.
        """
        self._exempt: set[str] = set(exempt or ())
        self._should_fail = False
        self.queried: list[str] = []

    def is_exempt(self, application_id: str) -> bool:
        """Check the in-memory exempt set."""
        self.queried.append(application_id)
        if self._should_fail:
            raise PlatformQueryError("whitelist", "Simulated status failure")
        return application_id in self._exempt

    # Test control methods

    def add_exempt(self, application_id: str) -> None:
        """Mark an application as exempted."""
        self._exempt.add(application_id)

    def remove_exempt(self, application_id: str) -> None:
        """Remove an application's exemption."""
        self._exempt.discard(application_id)

    def set_failure(self, should_fail: bool) -> None:
        """Enable or disable query failure simulation."""
        self._should_fail = should_fail
