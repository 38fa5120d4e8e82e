"""Platform abstraction layer."""

from .process import (
    SPAWN_FAILED,
    ProcessError,
    format_command,
    run,
    run_silent,
)

__all__ = [
    "SPAWN_FAILED",
    "ProcessError",
    "format_command",
    "run",
    "run_silent",
]
