"""Base exception classes for the Exemption Bridge domain layer."""


class ExemptionBridgeError(Exception):
    """Base exception for all domain errors.

    All domain-specific exceptions MUST inherit from this class.
    This enables consistent error handling across the application.

    Subclasses:
    - PromptLaunchError: a settings surface could not be shown
    - PlatformQueryError: capability or exemption status could not be read
    """

    def __init__(self, message: str = "") -> None:
        """Initialize the exception with an optional message.

        Args:
            message: Human-readable error description.
        """
        super().__init__(message)
