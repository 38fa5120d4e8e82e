"""Release request and outcome types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

EXECUTE_FLAG = "--execute"


class ReleaseMode(Enum):
    PREVIEW = "preview"
    EXECUTE = "execute"


class PrepareOutcome(Enum):
    """How a successful run ended."""

    PREVIEWED = "previewed"
    COMMITTED = "committed"
    UNCHANGED = "unchanged"


@dataclass(frozen=True, slots=True)
class ReleaseRequest:
    """Validated invocation: which version, and whether to mutate anything."""

    version: str
    mode: ReleaseMode = ReleaseMode.PREVIEW

    @property
    def is_execute(self) -> bool:
        return self.mode is ReleaseMode.EXECUTE


@dataclass(frozen=True, slots=True)
class ChangelogDelta:
    """Whether the staged changelog differs from the last commit."""

    path: Path
    has_changes: bool
