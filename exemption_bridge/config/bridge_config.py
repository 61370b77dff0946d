"""Exemption bridge configuration.

This module defines configuration for the exemption negotiator, its method
channel and the Android platform adapters, with environment variable
overrides.

Environment Variables:
- EXEMPTION_APPLICATION_ID: Package requesting exemption
  (default: com.example.students_task_manager)
- EXEMPTION_CHANNEL_NAME: Method channel name (default: notification_permissions)
- EXEMPTION_MIN_SDK_VERSION: First SDK level with exemption support
  (default: 23, min: 1, max: 100)
- EXEMPTION_USE_STUBS: Use in-memory platform stubs instead of ADB (default: false)
- ADB_PATH: adb executable (default: adb)
- ANDROID_SERIAL: Target device serial (default: unset, single attached device)
- ADB_COMMAND_TIMEOUT_SECONDS: Per-command timeout (default: 10, min: 1, max: 120)
- ENVIRONMENT: Log rendering mode, production or development (default: production)
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_bool_env(key: str, default: bool) -> bool:
    """Get boolean environment variable with default.

    Accepts 1/true/yes/on and 0/false/no/off, case-insensitive.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


# =============================================================================
# Method channel
# =============================================================================

DEFAULT_APPLICATION_ID = "com.example.students_task_manager"
DEFAULT_CHANNEL_NAME = "notification_permissions"

# Dotted package name, at least two segments (e.g. com.example)
APPLICATION_ID_PATTERN = re.compile(
    r"^[A-Za-z][A-Za-z0-9_]*(\.[A-Za-z][A-Za-z0-9_]*)+$"
)

# =============================================================================
# Capability gate
# =============================================================================

# Android 6.0 (API 23) introduced Doze and battery optimization exemptions
DEFAULT_MIN_SDK_VERSION = 23
MIN_SDK_VERSION_FLOOR = 1
MAX_SDK_VERSION_CEILING = 100

# =============================================================================
# ADB adapter
# =============================================================================

DEFAULT_ADB_PATH = "adb"
DEFAULT_COMMAND_TIMEOUT_SECONDS = 10
MIN_COMMAND_TIMEOUT_SECONDS = 1
MAX_COMMAND_TIMEOUT_SECONDS = 120

VALID_ENVIRONMENTS = frozenset({"production", "development"})


@dataclass(frozen=True)
class ExemptionBridgeConfig:
    """Configuration for the exemption bridge.

    Attributes:
        application_id: Package name the exemption is requested for.
        channel_name: Method channel name callers address.
        min_sdk_version: First SDK level supporting exemption.
                         Default: 23. Range: 1-100.
        adb_path: adb executable name or path.
        device_serial: Target device serial, None for the only attached device.
        command_timeout_seconds: Timeout for each adb invocation.
                                 Default: 10. Range: 1-120.
        environment: "production" (JSON logs) or "development" (console logs).
        use_stubs: Wire in-memory platform stubs instead of ADB adapters.
    """

    application_id: str = DEFAULT_APPLICATION_ID
    channel_name: str = DEFAULT_CHANNEL_NAME
    min_sdk_version: int = DEFAULT_MIN_SDK_VERSION
    adb_path: str = DEFAULT_ADB_PATH
    device_serial: str | None = None
    command_timeout_seconds: int = DEFAULT_COMMAND_TIMEOUT_SECONDS
    environment: str = "production"
    use_stubs: bool = False

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not APPLICATION_ID_PATTERN.match(self.application_id):
            raise ValueError(
                "application_id must be a dotted package name, "
                f"got {self.application_id!r}"
            )
        if not self.channel_name:
            raise ValueError("channel_name must not be empty")
        if not MIN_SDK_VERSION_FLOOR <= self.min_sdk_version <= MAX_SDK_VERSION_CEILING:
            raise ValueError(
                f"min_sdk_version must be between {MIN_SDK_VERSION_FLOOR} "
                f"and {MAX_SDK_VERSION_CEILING}, got {self.min_sdk_version}"
            )
        if not self.adb_path:
            raise ValueError("adb_path must not be empty")
        if (
            not MIN_COMMAND_TIMEOUT_SECONDS
            <= self.command_timeout_seconds
            <= MAX_COMMAND_TIMEOUT_SECONDS
        ):
            raise ValueError(
                "command_timeout_seconds must be between "
                f"{MIN_COMMAND_TIMEOUT_SECONDS} and {MAX_COMMAND_TIMEOUT_SECONDS}, "
                f"got {self.command_timeout_seconds}"
            )
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )

    @classmethod
    def from_environment(cls) -> ExemptionBridgeConfig:
        """Create config from environment variables with defaults.

        Invalid values fall back to defaults; numeric values are clamped.

        Returns:
            ExemptionBridgeConfig with values from environment or defaults.
        """
        application_id = os.environ.get("EXEMPTION_APPLICATION_ID", "").strip()
        if not APPLICATION_ID_PATTERN.match(application_id):
            application_id = DEFAULT_APPLICATION_ID

        channel_name = (
            os.environ.get("EXEMPTION_CHANNEL_NAME", "").strip() or DEFAULT_CHANNEL_NAME
        )

        min_sdk = _get_int_env("EXEMPTION_MIN_SDK_VERSION", DEFAULT_MIN_SDK_VERSION)
        # Clamp to valid range
        min_sdk = max(MIN_SDK_VERSION_FLOOR, min(min_sdk, MAX_SDK_VERSION_CEILING))

        timeout = _get_int_env(
            "ADB_COMMAND_TIMEOUT_SECONDS", DEFAULT_COMMAND_TIMEOUT_SECONDS
        )
        # Clamp to valid range
        timeout = max(
            MIN_COMMAND_TIMEOUT_SECONDS, min(timeout, MAX_COMMAND_TIMEOUT_SECONDS)
        )

        environment = os.environ.get("ENVIRONMENT", "production").strip().lower()
        if environment not in VALID_ENVIRONMENTS:
            environment = "production"

        return cls(
            application_id=application_id,
            channel_name=channel_name,
            min_sdk_version=min_sdk,
            adb_path=os.environ.get("ADB_PATH", "").strip() or DEFAULT_ADB_PATH,
            device_serial=os.environ.get("ANDROID_SERIAL", "").strip() or None,
            command_timeout_seconds=timeout,
            environment=environment,
            use_stubs=_get_bool_env("EXEMPTION_USE_STUBS", False),
        )


# Pre-defined configurations for common use cases

# Default production config (ADB adapters, JSON logs)
DEFAULT_BRIDGE_CONFIG = ExemptionBridgeConfig()

# Testing config: in-memory stubs, console logs, shortest timeout
TEST_BRIDGE_CONFIG = ExemptionBridgeConfig(
    command_timeout_seconds=MIN_COMMAND_TIMEOUT_SECONDS,
    environment="development",
    use_stubs=True,
)
