"""Release preparation.

- request: argument validation into a ReleaseRequest
- preparer: preview / regenerate / stage / diff gate / commit
- model, errors: shared types
"""

from __future__ import annotations

from relprep.release.errors import ReleaseError
from relprep.release.model import (
    EXECUTE_FLAG,
    ChangelogDelta,
    PrepareOutcome,
    ReleaseMode,
    ReleaseRequest,
)
from relprep.release.preparer import ReleaseRepository, check_changelog_delta, prepare_release
from relprep.release.request import parse_release_args

__all__ = [
    "EXECUTE_FLAG",
    "ChangelogDelta",
    "PrepareOutcome",
    "ReleaseError",
    "ReleaseMode",
    "ReleaseRepository",
    "ReleaseRequest",
    "check_changelog_delta",
    "parse_release_args",
    "prepare_release",
]
