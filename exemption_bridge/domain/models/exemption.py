"""Exemption negotiation values.

Both values are ephemeral: created at call time, consumed immediately and
never stored. The platform remains the source of truth for exemption state.

Usage:
    from exemption_bridge.domain.models.exemption import (
        ExemptionOutcome,
        NegotiationState,
    )

    outcome = ExemptionOutcome.terminal(
        NegotiationState.PROMPTED,
        application_id="com.example.app",
    )
    outcome.granted  # True
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum


class NegotiationState(str, Enum):
    """States of the exemption negotiation state machine.

    Transient states:
    - CAPABILITY_CHECK: call start, querying the capability gate
    - STATUS_CHECK: capability present, querying exemption status
    - DIRECT_PROMPT: not exempt, launching the per-application prompt
    - FALLBACK_PROMPT: direct prompt failed, launching the general list

    Terminal states:
    - ALREADY_OK: capability absent or already exempt
    - PROMPTED: direct prompt shown
    - FALLBACK_SHOWN: general list shown, user must act manually
    - FAILED: nothing could be shown or the platform could not be read
    """

    CAPABILITY_CHECK = "capability_check"
    STATUS_CHECK = "status_check"
    ALREADY_OK = "already_ok"
    DIRECT_PROMPT = "direct_prompt"
    PROMPTED = "prompted"
    FALLBACK_PROMPT = "fallback_prompt"
    FALLBACK_SHOWN = "fallback_shown"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        """Check if this state ends the negotiation."""
        return self in TERMINAL_OUTCOMES


# Terminal state -> caller-visible boolean.
# PROMPTED reports True once the prompt is shown, before the user decides.
TERMINAL_OUTCOMES: dict[NegotiationState, bool] = {
    NegotiationState.ALREADY_OK: True,
    NegotiationState.PROMPTED: True,
    NegotiationState.FALLBACK_SHOWN: False,
    NegotiationState.FAILED: False,
}


@dataclass(frozen=True)
class ExemptionRequest:
    """Zero-argument trigger: the caller wants exemption now.

    Attributes:
        requested_at: When the request was created (UTC).
    """

    requested_at: datetime

    @classmethod
    def now(cls) -> ExemptionRequest:
        """Create a request stamped with the current time."""
        return cls(requested_at=datetime.now(timezone.utc))


@dataclass(frozen=True)
class ExemptionOutcome:
    """Result of one negotiation.

    Only `granted` crosses the caller boundary. The remaining fields exist
    for logging and tests.

    Attributes:
        granted: True if exemption is held or the direct prompt was shown.
        state: The terminal state the negotiation ended in.
        application_id: The application the negotiation was run for.
        failure_reason: Description of the last absorbed failure, if any.
    """

    granted: bool
    state: NegotiationState
    application_id: str
    failure_reason: str | None = None

    def __post_init__(self) -> None:
        """Validate the outcome matches its terminal state."""
        if not self.state.is_terminal:
            raise ValueError(f"Outcome state must be terminal, got {self.state.value}")
        if TERMINAL_OUTCOMES[self.state] is not self.granted:
            raise ValueError(
                f"State {self.state.value} reports "
                f"{TERMINAL_OUTCOMES[self.state]}, got {self.granted}"
            )

    @classmethod
    def terminal(
        cls,
        state: NegotiationState,
        application_id: str,
        failure_reason: str | None = None,
    ) -> ExemptionOutcome:
        """Build the outcome for a terminal state.

        Args:
            state: A terminal NegotiationState.
            application_id: The application the negotiation was run for.
            failure_reason: Description of an absorbed failure, if any.

        Returns:
            ExemptionOutcome with `granted` derived from the state.

        Raises:
            ValueError: If the state is not terminal.
        """
        if not state.is_terminal:
            raise ValueError(f"Outcome state must be terminal, got {state.value}")
        return cls(
            granted=TERMINAL_OUTCOMES[state],
            state=state,
            application_id=application_id,
            failure_reason=failure_reason,
        )

    def to_dict(self) -> dict[str, object]:
        """Serialize for logging and CLI output."""
        return {
            "granted": self.granted,
            "state": self.state.value,
            "application_id": self.application_id,
            "failure_reason": self.failure_reason,
        }
