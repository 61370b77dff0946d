"""Android platform adapters over ADB.

Implements the three platform ports against a device reached through
AdbShell:

- Capability: `getprop ro.build.version.sdk` compared with the minimum SDK
- Status: `dumpsys deviceidle whitelist`, lines of `<kind>,<package>,<uid>`
- Direct prompt: `am start -a ...REQUEST_IGNORE_BATTERY_OPTIMIZATIONS
  -d package:<id>`
- Fallback prompt: `am start -a ...IGNORE_BATTERY_OPTIMIZATION_SETTINGS`

`am start` may exit 0 while printing "Error:" when the intent cannot be
resolved, so its output is inspected as well as its exit status.
"""

from __future__ import annotations

from exemption_bridge.application.ports.platform_capability import (
    PlatformCapabilityGateProtocol,
)
from exemption_bridge.application.ports.power_policy import PowerPolicyQueryProtocol
from exemption_bridge.application.ports.settings_prompt import SettingsPromptProtocol
from exemption_bridge.domain.errors.platform_query import PlatformQueryError
from exemption_bridge.domain.errors.prompt_launch import PromptLaunchError
from exemption_bridge.infrastructure.adapters.adb_shell import AdbCommandError, AdbShell

ACTION_REQUEST_IGNORE_BATTERY_OPTIMIZATIONS = (
    "android.settings.REQUEST_IGNORE_BATTERY_OPTIMIZATIONS"
)
ACTION_IGNORE_BATTERY_OPTIMIZATION_SETTINGS = (
    "android.settings.IGNORE_BATTERY_OPTIMIZATION_SETTINGS"
)

# Line prefixes `am start` prints when an activity could not be started
LAUNCH_FAILURE_PREFIXES = ("Error:", "Error type", "Exception", "java.lang.")

# First line of `am start` output, echoing the intent (including its data URI)
INTENT_ECHO_PREFIX = "Starting:"

# Whitelists that make `isIgnoringBatteryOptimizations` report true
EXEMPT_WHITELIST_KINDS = frozenset({"system", "user"})


def parse_sdk_version(output: str) -> int:
    """Parse the output of `getprop ro.build.version.sdk`.

    Raises:
        ValueError: If the output is not a single integer.
    """
    return int(output.strip())


def parse_whitelist(output: str) -> set[str]:
    """Extract exempted package names from `dumpsys deviceidle whitelist`.

    Each entry line looks like `user,com.example.app,10123`. Only the
    `system` and `user` whitelists exempt an application from battery
    optimization; `system-excidle` entries are exempt from idle mode alone
    and are skipped, as are lines that do not match.
    """
    packages: set[str] = set()
    for line in output.splitlines():
        parts = [part.strip() for part in line.split(",")]
        if len(parts) >= 2 and parts[0] in EXEMPT_WHITELIST_KINDS and parts[1]:
            packages.add(parts[1])
    return packages


def find_launch_failure(output: str) -> str | None:
    """Return the first line of `am start` output reporting a failure.

    The echoed intent line is skipped since it contains the package id.
    """
    for line in output.splitlines():
        line = line.strip()
        if line.startswith(INTENT_ECHO_PREFIX):
            continue
        if line.startswith(LAUNCH_FAILURE_PREFIXES):
            return line
    return None


class AdbPlatformCapabilityGate(PlatformCapabilityGateProtocol):
    """Capability gate reading the device SDK level."""

    def __init__(self, shell: AdbShell, min_sdk_version: int = 23) -> None:
        self._shell = shell
        self._min_sdk_version = min_sdk_version

    def sdk_version(self) -> int:
        """Read the device SDK level.

        Raises:
            PlatformQueryError: If adb fails or prints something unexpected.
        """
        try:
            output = self._shell.run("getprop", "ro.build.version.sdk")
            return parse_sdk_version(output)
        except AdbCommandError as exc:
            raise PlatformQueryError("sdk_version", str(exc)) from exc
        except ValueError as exc:
            raise PlatformQueryError(
                "sdk_version", f"unexpected getprop output: {exc}"
            ) from exc

    def supports_exemption(self) -> bool:
        return self.sdk_version() >= self._min_sdk_version


class AdbPowerPolicyQuery(PowerPolicyQueryProtocol):
    """Exemption status from the device idle whitelist."""

    def __init__(self, shell: AdbShell) -> None:
        self._shell = shell

    def is_exempt(self, application_id: str) -> bool:
        try:
            output = self._shell.run("dumpsys", "deviceidle", "whitelist")
        except AdbCommandError as exc:
            raise PlatformQueryError("whitelist", str(exc)) from exc
        return application_id in parse_whitelist(output)


class AdbSettingsPrompt(SettingsPromptProtocol):
    """Launches the exemption settings activities with `am start`."""

    def __init__(self, shell: AdbShell) -> None:
        self._shell = shell

    def launch_direct(self, application_id: str) -> None:
        self._start(
            "direct",
            [
                "-a",
                ACTION_REQUEST_IGNORE_BATTERY_OPTIMIZATIONS,
                "-d",
                f"package:{application_id}",
            ],
            application_id=application_id,
        )

    def launch_fallback(self) -> None:
        self._start("fallback", ["-a", ACTION_IGNORE_BATTERY_OPTIMIZATION_SETTINGS])

    def _start(
        self,
        surface: str,
        intent_args: list[str],
        application_id: str | None = None,
    ) -> None:
        try:
            output = self._shell.run("am", "start", *intent_args)
        except AdbCommandError as exc:
            raise PromptLaunchError(
                surface, str(exc), application_id=application_id
            ) from exc

        failure = find_launch_failure(output)
        if failure is not None:
            raise PromptLaunchError(surface, failure, application_id=application_id)
