"""Android Debug Bridge shell runner.

Runs `adb [-s SERIAL] shell ...` with a timeout and returns the combined
output. Every failure mode (missing binary, timeout, non-zero exit) is
raised as AdbCommandError so the platform adapters can translate it.
"""

from __future__ import annotations

import subprocess
from typing import Callable, Sequence

from exemption_bridge.domain.exceptions import ExemptionBridgeError
from exemption_bridge.infrastructure.observability.logging import (
    get_logger_for_service,
)

CommandRunner = Callable[..., subprocess.CompletedProcess[str]]


class AdbCommandError(ExemptionBridgeError):
    """Raised when an adb invocation fails.

    Attributes:
        command: The argument list that was run.
        returncode: Process exit status, None if it never completed.
        output: Whatever the process printed.
    """

    def __init__(
        self,
        command: Sequence[str],
        reason: str,
        returncode: int | None = None,
        output: str = "",
    ) -> None:
        self.command = list(command)
        self.returncode = returncode
        self.output = output
        super().__init__(f"adb command {' '.join(self.command)!r} failed: {reason}")


class AdbShell:
    """Runs shell commands on one Android device.

    Example:
        >>> shell = AdbShell(serial="emulator-5554")
        >>> shell.run("getprop", "ro.build.version.sdk")
        '34\\n'
    """

    def __init__(
        self,
        adb_path: str = "adb",
        serial: str | None = None,
        timeout_seconds: float = 10,
        runner: CommandRunner = subprocess.run,
    ) -> None:
        """Initialize the shell.

        Args:
            adb_path: adb executable name or path.
            serial: Target device serial, None for the only attached device.
            timeout_seconds: Timeout for each invocation.
            runner: subprocess.run compatible callable (replaced in tests).
        """
        self._adb_path = adb_path
        self._serial = serial
        self._timeout_seconds = timeout_seconds
        self._runner = runner
        self._log = get_logger_for_service(self.__class__.__name__, component="adapter")

    def build_command(self, *args: str) -> list[str]:
        """Build the full argument list for a shell command."""
        command = [self._adb_path]
        if self._serial:
            command.extend(["-s", self._serial])
        command.append("shell")
        command.extend(args)
        return command

    def run(self, *args: str) -> str:
        """Run a shell command on the device.

        Args:
            *args: Shell command and its arguments.

        Returns:
            Combined stdout and stderr.

        Raises:
            AdbCommandError: If adb is missing, times out or exits non-zero.
        """
        command = self.build_command(*args)
        log = self._log.bind(command=" ".join(command))
        try:
            completed = self._runner(
                command,
                capture_output=True,
                text=True,
                timeout=self._timeout_seconds,
                check=False,
            )
        except FileNotFoundError as exc:
            raise AdbCommandError(command, f"adb executable not found: {exc}") from exc
        except subprocess.TimeoutExpired as exc:
            raise AdbCommandError(
                command, f"timed out after {self._timeout_seconds}s"
            ) from exc

        output = (completed.stdout or "") + (completed.stderr or "")
        if completed.returncode != 0:
            log.debug("adb_command_failed", returncode=completed.returncode)
            raise AdbCommandError(
                command,
                f"exit status {completed.returncode}",
                returncode=completed.returncode,
                output=output,
            )
        log.debug("adb_command_completed")
        return output
