"""Settings prompt port definition.

Launches one of the two user-facing system screens. A launch is
fire-and-forget: the caller only learns whether the screen was shown,
never what the user chose on it.
"""

from abc import ABC, abstractmethod


class SettingsPromptProtocol(ABC):
    """Abstract protocol for launching exemption settings surfaces.

    Production implementations:
    - AdbSettingsPrompt: starts the settings activities through `am start`

    Development/Testing:
    - SettingsPromptStub: records launches and simulates failures
    """

    @abstractmethod
    def launch_direct(self, application_id: str) -> None:
        """Launch the per-application exemption prompt.

        Args:
            application_id: Application the prompt is targeted at.

        Raises:
            PromptLaunchError: If the prompt could not be shown.
        """
        ...

    @abstractmethod
    def launch_fallback(self) -> None:
        """Launch the general battery optimization settings list.

        Raises:
            PromptLaunchError: If the list could not be shown.
        """
        ...
