"""Domain models for Exemption Bridge."""

from exemption_bridge.domain.models.exemption import (
    TERMINAL_OUTCOMES,
    ExemptionOutcome,
    ExemptionRequest,
    NegotiationState,
)
from exemption_bridge.domain.models.method_call import (
    MethodCallResult,
    MethodCallStatus,
)

__all__: list[str] = [
    "TERMINAL_OUTCOMES",
    "ExemptionOutcome",
    "ExemptionRequest",
    "MethodCallResult",
    "MethodCallStatus",
    "NegotiationState",
]
