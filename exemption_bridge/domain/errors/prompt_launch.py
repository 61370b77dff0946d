"""Prompt launch errors.

A prompt-launch failure means the requested system settings screen could
not be shown, for any underlying platform reason (missing activity,
malformed request, device unreachable).

This is the only error class the negotiation state machine branches on.
It is always caught at the launch point and never reaches the caller.
"""

from __future__ import annotations

from exemption_bridge.domain.exceptions import ExemptionBridgeError


class PromptLaunchError(ExemptionBridgeError):
    """Raised when a settings surface could not be launched.

    Attributes:
        surface: Which surface was attempted ("direct" or "fallback").
        application_id: Target application, None for the fallback list.
        reason: Platform-provided failure description.
    """

    def __init__(
        self,
        surface: str,
        reason: str,
        application_id: str | None = None,
    ) -> None:
        """Initialize the error.

        Args:
            surface: Which surface was attempted ("direct" or "fallback").
            reason: Platform-provided failure description.
            application_id: Target application for the direct prompt.
        """
        self.surface = surface
        self.reason = reason
        self.application_id = application_id

        target = f" for {application_id}" if application_id else ""
        super().__init__(f"Could not launch {surface} prompt{target}: {reason}")
