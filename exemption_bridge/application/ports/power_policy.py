"""Power policy query port definition.

Read-only access to the platform's exemption list.
"""

from abc import ABC, abstractmethod


class PowerPolicyQueryProtocol(ABC):
    """Abstract protocol for querying exemption status.

    The platform is the source of truth. Implementations MUST query it on
    every call and MUST NOT cache the answer.

    Production implementations:
    - AdbPowerPolicyQuery: parses the device idle whitelist

    Development/Testing:
    - PowerPolicyQueryStub: in-memory exempt set
    """

    @abstractmethod
    def is_exempt(self, application_id: str) -> bool:
        """Check whether an application is already exempted.

        Args:
            application_id: Platform identifier of the application
                (package name on Android).

        Returns:
            True if the application is exempt from power optimization.

        Raises:
            PlatformQueryError: If the status cannot be read.
        """
        ...
