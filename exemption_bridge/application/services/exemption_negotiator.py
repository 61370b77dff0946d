"""Exemption negotiator service - battery optimization exemption requests.

Decides, synchronously, which exemption action to take and reports one
boolean outcome. Each state of the negotiation is its own method returning
either a terminal outcome or None (continue to the next state):

    CapabilityCheck -> StatusCheck -> DirectPrompt -> FallbackPrompt

| Terminal state  | Entered when                          | granted |
|-----------------|---------------------------------------|---------|
| ALREADY_OK      | capability absent OR already exempted | True    |
| PROMPTED        | direct prompt launched                | True    |
| FALLBACK_SHOWN  | direct failed, fallback launched      | False   |
| FAILED          | nothing shown or platform unreadable  | False   |

Rules:
1. ALWAYS ANSWER - every collaborator failure is absorbed into an outcome
2. ONE SCREEN - the fallback is only attempted after the direct prompt fails
3. NO STATE - the platform is queried fresh on every call
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from exemption_bridge.application.services.base import LoggingMixin
from exemption_bridge.domain.models.exemption import (
    ExemptionOutcome,
    ExemptionRequest,
    NegotiationState,
)

if TYPE_CHECKING:
    from exemption_bridge.application.ports.platform_capability import (
        PlatformCapabilityGateProtocol,
    )
    from exemption_bridge.application.ports.power_policy import (
        PowerPolicyQueryProtocol,
    )
    from exemption_bridge.application.ports.settings_prompt import (
        SettingsPromptProtocol,
    )


class ExemptionNegotiator(LoggingMixin):
    """Negotiates power-management exemption for one application.

    Example:
        >>> negotiator = ExemptionNegotiator(
        ...     application_id="com.example.app",
        ...     capability_gate=PlatformCapabilityGateStub(),
        ...     power_policy=PowerPolicyQueryStub(),
        ...     settings_prompt=SettingsPromptStub(),
        ... )
        >>> negotiator.request_exemption().granted
        True
    """

    def __init__(
        self,
        application_id: str,
        capability_gate: PlatformCapabilityGateProtocol,
        power_policy: PowerPolicyQueryProtocol,
        settings_prompt: SettingsPromptProtocol,
    ) -> None:
        """Initialize the negotiator.

        Args:
            application_id: Identifier of the application requesting exemption.
            capability_gate: Reports whether the platform supports exemption.
            power_policy: Reports current exemption status.
            settings_prompt: Launches the direct and fallback settings screens.
        """
        self._application_id = application_id
        self._capability_gate = capability_gate
        self._power_policy = power_policy
        self._settings_prompt = settings_prompt
        self._init_logger()

    @property
    def application_id(self) -> str:
        """Identifier of the application this negotiator acts for."""
        return self._application_id

    def request_exemption(
        self, request: ExemptionRequest | None = None
    ) -> ExemptionOutcome:
        """Run one negotiation and report its outcome.

        Never raises. Platform failures become a False outcome.

        Args:
            request: The triggering request; created on the fly if omitted.

        Returns:
            ExemptionOutcome for the terminal state reached.
        """
        request = request or ExemptionRequest.now()
        log = self._log_operation(
            "request_exemption",
            application_id=self._application_id,
            requested_at=request.requested_at.isoformat(),
        )
        log.debug("exemption_negotiation_started")

        outcome = (
            self.check_capability()
            or self.check_status()
            or self.attempt_direct_prompt()
            or self.attempt_fallback_prompt()
        )

        failed = outcome.state == NegotiationState.FAILED
        log_method = log.warning if failed else log.info
        log_method(
            "exemption_negotiation_completed",
            state=outcome.state.value,
            granted=outcome.granted,
            failure_reason=outcome.failure_reason,
        )
        return outcome

    def check_capability(self) -> ExemptionOutcome | None:
        """CapabilityCheck: platforms without the feature need nothing.

        Returns:
            ALREADY_OK if the feature does not exist, FAILED if the gate
            could not be read, None to continue to the status check.
        """
        log = self._log_operation(
            "check_capability", state=NegotiationState.CAPABILITY_CHECK.value
        )
        try:
            supported = self._capability_gate.supports_exemption()
        except Exception as exc:
            log.warning("capability_query_failed", error=str(exc))
            return self._outcome(NegotiationState.FAILED, failure_reason=str(exc))

        if not supported:
            log.info("exemption_not_applicable")
            return self._outcome(NegotiationState.ALREADY_OK)
        return None

    def check_status(self) -> ExemptionOutcome | None:
        """StatusCheck: an already exempted application needs no prompt.

        Returns:
            ALREADY_OK if exempt, FAILED if the status could not be read,
            None to continue to the direct prompt.
        """
        log = self._log_operation(
            "check_status", state=NegotiationState.STATUS_CHECK.value
        )
        try:
            exempt = self._power_policy.is_exempt(self._application_id)
        except Exception as exc:
            log.warning("status_query_failed", error=str(exc))
            return self._outcome(NegotiationState.FAILED, failure_reason=str(exc))

        if exempt:
            log.info("already_exempt")
            return self._outcome(NegotiationState.ALREADY_OK)
        return None

    def attempt_direct_prompt(self) -> ExemptionOutcome | None:
        """DirectPrompt: show the per-application exemption prompt.

        A shown prompt reports True without waiting for the user's choice.

        Returns:
            PROMPTED on success, None to continue to the fallback prompt.
        """
        log = self._log_operation(
            "attempt_direct_prompt", state=NegotiationState.DIRECT_PROMPT.value
        )
        try:
            self._settings_prompt.launch_direct(self._application_id)
        except Exception as exc:
            log.warning("direct_prompt_failed", error=str(exc))
            return None

        log.info("direct_prompt_shown")
        return self._outcome(NegotiationState.PROMPTED)

    def attempt_fallback_prompt(self) -> ExemptionOutcome:
        """FallbackPrompt: show the general battery optimization list.

        Returns:
            FALLBACK_SHOWN on success (user must act manually), FAILED otherwise.
        """
        log = self._log_operation(
            "attempt_fallback_prompt", state=NegotiationState.FALLBACK_PROMPT.value
        )
        try:
            self._settings_prompt.launch_fallback()
        except Exception as exc:
            log.warning("fallback_prompt_failed", error=str(exc))
            return self._outcome(NegotiationState.FAILED, failure_reason=str(exc))

        log.info("fallback_prompt_shown")
        return self._outcome(NegotiationState.FALLBACK_SHOWN)

    def _outcome(
        self, state: NegotiationState, failure_reason: str | None = None
    ) -> ExemptionOutcome:
        return ExemptionOutcome.terminal(
            state,
            application_id=self._application_id,
            failure_reason=failure_reason,
        )
