"""Git operations.

Usage:
    from relprep.git import Repository

    repo = Repository(Path("/path/to/repo"))
    match repo.has_staged_changes(Path("CHANGELOG.md")):
        case Ok(True):
            ...
        case Ok(False):
            ...
        case Err(e):
            ...
"""

from relprep.git.repository import (
    GitError,
    Repository,
    StatusEntry,
)

__all__ = [
    "GitError",
    "Repository",
    "StatusEntry",
]
