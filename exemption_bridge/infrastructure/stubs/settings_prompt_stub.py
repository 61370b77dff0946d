"""Settings prompt stub for development and testing.

Records every launch attempt, successful or not, so tests can assert on
which surfaces were tried and in what order.
"""

from __future__ import annotations

from exemption_bridge.application.ports.settings_prompt import SettingsPromptProtocol
from exemption_bridge.domain.errors.prompt_launch import PromptLaunchError

SURFACE_DIRECT = "direct"
SURFACE_FALLBACK = "fallback"


class SettingsPromptStub(SettingsPromptProtocol):
    """Stub implementation of SettingsPromptProtocol.

    Attributes:
        attempts: Every launch attempt as (surface, application_id or None).
        shown: Only the attempts that succeeded.

    Example:
        stub = SettingsPromptStub()
        stub.set_direct_failure(True)
        stub.launch_direct("com.example.app")  # Raises PromptLaunchError
        stub.launch_fallback()
        stub.attempts  # [("direct", "com.example.app"), ("fallback", None)]
    """

    def __init__(self) -> None:
        self._direct_fails = False
        self._fallback_fails = False
        self.attempts: list[tuple[str, str | None]] = []
        self.shown: list[tuple[str, str | None]] = []

    def launch_direct(self, application_id: str) -> None:
        """Record a direct prompt launch, failing if configured."""
        self.attempts.append((SURFACE_DIRECT, application_id))
        if self._direct_fails:
            raise PromptLaunchError(
                SURFACE_DIRECT,
                "Simulated direct prompt failure",
                application_id=application_id,
            )
        self.shown.append((SURFACE_DIRECT, application_id))

    def launch_fallback(self) -> None:
        """Record a fallback list launch, failing if configured."""
        self.attempts.append((SURFACE_FALLBACK, None))
        if self._fallback_fails:
            raise PromptLaunchError(SURFACE_FALLBACK, "Simulated fallback failure")
        self.shown.append((SURFACE_FALLBACK, None))

    # Test control methods

    def set_direct_failure(self, should_fail: bool) -> None:
        """Enable or disable direct prompt failure simulation."""
        self._direct_fails = should_fail

    def set_fallback_failure(self, should_fail: bool) -> None:
        """Enable or disable fallback failure simulation."""
        self._fallback_fails = should_fail

    def clear(self) -> None:
        """Forget recorded attempts."""
        self.attempts.clear()
        self.shown.clear()
