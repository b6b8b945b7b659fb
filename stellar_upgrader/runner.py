"""Running shell commands on behalf of the upgrader."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass


class UpgradeError(Exception):
    """Raised when an upgrade step or a security check fails."""


@dataclass(frozen=True)
class ShellResult:
    """Outcome of a shell command; text is None where it was not valid UTF-8."""

    returncode: int
    stdout: str | None
    stderr: str | None

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def _decode(data: bytes) -> str | None:
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        return None


def run_shell(command: str) -> ShellResult:
    """Run a command through the system shell and capture its output."""
    try:
        completed = subprocess.run(command, shell=True, capture_output=True, check=False)
    except OSError as exc:
        raise UpgradeError(f"Failed to execute command: {exc}") from exc
    return ShellResult(
        returncode=completed.returncode,
        stdout=_decode(completed.stdout),
        stderr=_decode(completed.stderr),
    )


def execute_command(command: str) -> None:
    """Run a command, echo its output, and raise with its stderr if it fails."""
    result = run_shell(command)
    if result.ok:
        if result.stdout is not None and result.stdout.strip():
            print(result.stdout)
        return
    if result.stderr is not None:
        raise UpgradeError(result.stderr)
    raise UpgradeError("Command failed with unknown error")