"""Error types for release preparation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from relprep.git.repository import GitError
from relprep.platform.process import ProcessError

ReleaseErrorKind = Literal["invalid_arguments", "tool_failure"]


@dataclass(frozen=True, slots=True)
class ReleaseError:
    """Canonical release error payload.

    ``returncode`` is the exit status of the failing external tool, kept so
    the CLI can propagate it unchanged. It is None for argument errors.
    """

    kind: ReleaseErrorKind
    message: str
    hint: str | None = None
    returncode: int | None = None


def invalid_arguments(message: str, *, hint: str | None = None) -> ReleaseError:
    return ReleaseError(kind="invalid_arguments", message=message, hint=hint)


def from_process_error(step: str, e: ProcessError) -> ReleaseError:
    return ReleaseError(
        kind="tool_failure",
        message=f"{step}: {e}",
        hint=e.stderr.strip() or None,
        returncode=e.returncode,
    )


def from_git_error(step: str, e: GitError) -> ReleaseError:
    return ReleaseError(
        kind="tool_failure",
        message=f"{step}: git {e.command} failed (exit {e.returncode})",
        hint=e.message or None,
        returncode=e.returncode,
    )
