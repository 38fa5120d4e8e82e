"""Error presentation utilities.

Centralized error formatting and exit code mapping for consistent UX.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from relprep.core.errors import ErrorCode
from relprep.output.console import Style
from relprep.platform.process import SPAWN_FAILED
from relprep.release.errors import ReleaseError

if TYPE_CHECKING:
    from relprep.output.console import ConsoleProtocol

__all__ = ["print_release_error", "release_error_exit_code"]


def print_release_error(error: ReleaseError, console: ConsoleProtocol) -> None:
    """Print a release error to the console."""
    console.error(error.message)
    if error.hint:
        console.print(f"hint: {error.hint}", Style.DIM)


def release_error_exit_code(error: ReleaseError) -> int:
    """Get the process exit code for a release error.

    A failing tool's own exit status is propagated. A tool killed by signal N
    exits with 128 + N, as a shell reports it. A tool that could not be
    started at all has no usable status and maps to ENV_ERROR.
    """
    match error:
        case ReleaseError(kind="invalid_arguments"):
            return int(ErrorCode.USER_ERROR)
        case ReleaseError(returncode=int(rc)) if rc > 0:
            return rc
        case ReleaseError(returncode=int(rc)) if rc < 0 and rc != SPAWN_FAILED:
            return 128 - rc
    return int(ErrorCode.ENV_ERROR)
