"""Blocking subprocess execution with Result-based error handling.

Two flavors:
- ``run`` captures output (git plumbing whose stdout is parsed)
- ``run_silent`` lets output stream to the terminal (changelog preview)

Neither raises for a failing command: a non-zero exit or a missing
executable comes back as ``Err(ProcessError)``. No call is timed out.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path

from relprep.core.result import Err, Ok, Result

__all__ = ["ProcessError", "SPAWN_FAILED", "format_command", "run", "run_silent"]

# Return code recorded when the process could not be started.
SPAWN_FAILED = -1


def format_command(cmd: list[str] | tuple[str, ...]) -> str:
    """Render a command for display, quoting arguments with spaces."""
    return " ".join(f'"{part}"' if " " in part else part for part in cmd)


@dataclass(frozen=True, slots=True)
class ProcessError:
    """Error from a failed subprocess execution.

    Attributes:
        command: The command that was executed.
        returncode: Exit code, or ``SPAWN_FAILED`` if it never started.
            Negative values other than ``SPAWN_FAILED`` mean the process
            was killed by that signal.
        stdout: Standard output (empty when not captured).
        stderr: Standard error (empty when not captured).
    """

    command: tuple[str, ...]
    returncode: int
    stdout: str
    stderr: str

    def __str__(self) -> str:
        cmd_str = " ".join(self.command[:3])
        if len(self.command) > 3:
            cmd_str += " ..."
        return f"{cmd_str} failed (exit {self.returncode})"


def run(cmd: list[str], cwd: Path) -> Result[str, ProcessError]:
    """Execute a command and return its stdout.

    Args:
        cmd: Command and arguments to execute.
        cwd: Working directory for the command.

    Returns:
        Ok(stdout) on success, Err(ProcessError) on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=SPAWN_FAILED,
                stdout="",
                stderr=str(e),
            )
        )

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout=proc.stdout,
                stderr=proc.stderr,
            )
        )

    return Ok(proc.stdout)


def run_silent(cmd: list[str], cwd: Path) -> Result[None, ProcessError]:
    """Execute a command without capturing output.

    Output streams to the terminal, so on failure the error carries only the
    exit code; the tool has already printed its own diagnostics.

    Returns:
        Ok(None) on success, Err(ProcessError) on failure.
    """
    try:
        proc = subprocess.run(
            cmd,
            cwd=str(cwd),
            check=False,
        )
    except OSError as e:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=SPAWN_FAILED,
                stdout="",
                stderr=str(e),
            )
        )

    if proc.returncode != 0:
        return Err(
            ProcessError(
                command=tuple(cmd),
                returncode=proc.returncode,
                stdout="",
                stderr="",
            )
        )

    return Ok(None)
