"""Unit tests for the ADB platform adapters.

The shell is replaced with a MagicMock returning canned device output.
"""

from unittest.mock import MagicMock

import pytest

from exemption_bridge.domain.errors.platform_query import PlatformQueryError
from exemption_bridge.domain.errors.prompt_launch import PromptLaunchError
from exemption_bridge.infrastructure.adapters.adb_platform import (
    ACTION_IGNORE_BATTERY_OPTIMIZATION_SETTINGS,
    ACTION_REQUEST_IGNORE_BATTERY_OPTIMIZATIONS,
    AdbPlatformCapabilityGate,
    AdbPowerPolicyQuery,
    AdbSettingsPrompt,
    find_launch_failure,
    parse_sdk_version,
    parse_whitelist,
)
from exemption_bridge.infrastructure.adapters.adb_shell import AdbCommandError, AdbShell

WHITELIST_OUTPUT = """\
system-excidle,com.android.shell,2000
system,com.google.android.gms,10010
user,com.example.students_task_manager,10123
"""

# `am start` echo for a package id containing a failure word
MARKER_PACKAGE_ECHO = (
    "Starting: Intent { act=android.settings.REQUEST_IGNORE_BATTERY_OPTIMIZATIONS "
    "dat=package:com.example.NoException }\n"
)


@pytest.fixture
def shell() -> MagicMock:
    return MagicMock(spec=AdbShell)


class TestParsers:
    def test_parse_sdk_version(self) -> None:
        assert parse_sdk_version("34\r\n") == 34

    def test_parse_sdk_version_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            parse_sdk_version("error: device offline")

    def test_parse_whitelist(self) -> None:
        assert parse_whitelist(WHITELIST_OUTPUT) == {
            "com.google.android.gms",
            "com.example.students_task_manager",
        }

    def test_parse_whitelist_ignores_other_lines(self) -> None:
        assert parse_whitelist("\nDeviceIdle whitelist:\n") == set()

    def test_parse_whitelist_skips_except_idle_entries(self) -> None:
        """`system-excidle` entries do not exempt from battery optimization."""
        output = "system-excidle,com.example.app,10123\n"
        assert parse_whitelist(output) == set()

    def test_find_launch_failure_ignores_intent_echo(self) -> None:
        """The echoed intent may contain failure words in the package id."""
        assert find_launch_failure(MARKER_PACKAGE_ECHO) is None

    @pytest.mark.parametrize(
        "line",
        [
            "Error: Activity not started, unable to resolve Intent",
            "Error type 3",
            "java.lang.SecurityException: Permission Denial: starting Intent",
        ],
    )
    def test_find_launch_failure_reports_error_line(self, line: str) -> None:
        output = f"Starting: Intent {{ act=... }}\n{line}\n"
        assert find_launch_failure(output) == line


class TestAdbPlatformCapabilityGate:
    @pytest.mark.parametrize(
        ("sdk", "expected"), [("22", False), ("23", True), ("34", True)]
    )
    def test_supports_exemption(
        self, shell: MagicMock, sdk: str, expected: bool
    ) -> None:
        shell.run.return_value = f"{sdk}\n"
        gate = AdbPlatformCapabilityGate(shell, min_sdk_version=23)

        assert gate.supports_exemption() is expected
        shell.run.assert_called_once_with("getprop", "ro.build.version.sdk")

    def test_adb_failure_raises_query_error(self, shell: MagicMock) -> None:
        shell.run.side_effect = AdbCommandError(["adb"], "exit status 1")

        with pytest.raises(PlatformQueryError) as exc_info:
            AdbPlatformCapabilityGate(shell).supports_exemption()
        assert exc_info.value.query == "sdk_version"

    def test_unparseable_output_raises_query_error(self, shell: MagicMock) -> None:
        shell.run.return_value = "\n"

        with pytest.raises(PlatformQueryError, match="unexpected getprop output"):
            AdbPlatformCapabilityGate(shell).sdk_version()


class TestAdbPowerPolicyQuery:
    def test_listed_package_is_exempt(self, shell: MagicMock) -> None:
        shell.run.return_value = WHITELIST_OUTPUT
        query = AdbPowerPolicyQuery(shell)

        assert query.is_exempt("com.example.students_task_manager") is True
        shell.run.assert_called_once_with("dumpsys", "deviceidle", "whitelist")

    def test_unlisted_package_is_not_exempt(self, shell: MagicMock) -> None:
        shell.run.return_value = WHITELIST_OUTPUT
        assert AdbPowerPolicyQuery(shell).is_exempt("com.example") is False

    def test_except_idle_only_package_is_not_exempt(self, shell: MagicMock) -> None:
        shell.run.return_value = WHITELIST_OUTPUT
        assert AdbPowerPolicyQuery(shell).is_exempt("com.android.shell") is False

    def test_queries_every_call(self, shell: MagicMock) -> None:
        shell.run.return_value = WHITELIST_OUTPUT
        query = AdbPowerPolicyQuery(shell)

        query.is_exempt("a.b")
        query.is_exempt("a.b")

        assert shell.run.call_count == 2

    def test_adb_failure_raises_query_error(self, shell: MagicMock) -> None:
        shell.run.side_effect = AdbCommandError(["adb"], "timed out after 10s")

        with pytest.raises(PlatformQueryError, match="whitelist"):
            AdbPowerPolicyQuery(shell).is_exempt("a.b")


class TestAdbSettingsPrompt:
    def test_launch_direct_targets_package(self, shell: MagicMock) -> None:
        shell.run.return_value = "Starting: Intent { act=... }\n"

        AdbSettingsPrompt(shell).launch_direct("com.example.app")

        shell.run.assert_called_once_with(
            "am",
            "start",
            "-a",
            ACTION_REQUEST_IGNORE_BATTERY_OPTIMIZATIONS,
            "-d",
            "package:com.example.app",
        )

    def test_launch_fallback_has_no_target(self, shell: MagicMock) -> None:
        shell.run.return_value = "Starting: Intent { act=... }\n"

        AdbSettingsPrompt(shell).launch_fallback()

        shell.run.assert_called_once_with(
            "am", "start", "-a", ACTION_IGNORE_BATTERY_OPTIMIZATION_SETTINGS
        )

    def test_package_id_containing_failure_word_launches(
        self, shell: MagicMock
    ) -> None:
        """A shown prompt whose echoed intent names the package is a success."""
        shell.run.return_value = MARKER_PACKAGE_ECHO

        AdbSettingsPrompt(shell).launch_direct("com.example.NoException")

        shell.run.assert_called_once()

    def test_unresolved_intent_raises(self, shell: MagicMock) -> None:
        """`am start` can exit 0 while reporting an error."""
        shell.run.return_value = (
            "Starting: Intent { act=... }\n"
            "Error: Activity not started, unable to resolve Intent\n"
        )

        with pytest.raises(PromptLaunchError) as exc_info:
            AdbSettingsPrompt(shell).launch_direct("com.example.app")

        assert exc_info.value.surface == "direct"
        assert exc_info.value.application_id == "com.example.app"
        assert exc_info.value.reason.startswith("Error: Activity not started")

    def test_adb_failure_raises_launch_error(self, shell: MagicMock) -> None:
        shell.run.side_effect = AdbCommandError(["adb"], "exit status 255")

        with pytest.raises(PromptLaunchError) as exc_info:
            AdbSettingsPrompt(shell).launch_fallback()

        assert exc_info.value.surface == "fallback"
        assert exc_info.value.application_id is None
