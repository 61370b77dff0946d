"""Platform query errors.

Raised by platform adapters when the capability gate or the exemption
status cannot be read. The negotiator absorbs these into a False outcome.
"""

from __future__ import annotations

from exemption_bridge.domain.exceptions import ExemptionBridgeError


class PlatformQueryError(ExemptionBridgeError):
    """Raised when a read-only platform query fails.

    Attributes:
        query: Name of the failed query (e.g. "sdk_version", "whitelist").
        reason: Platform-provided failure description.
    """

    def __init__(self, query: str, reason: str) -> None:
        self.query = query
        self.reason = reason
        super().__init__(f"Platform query '{query}' failed: {reason}")
