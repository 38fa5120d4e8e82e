"""Git repository handle.

The release workflow never touches git through ambient state: it receives a
``Repository`` bound to one working tree and calls its methods. Every
operation that can fail returns a Result.

Usage:
    repo = Repository(Path("/path/to/repo"))

    match repo.stage(Path("CHANGELOG.md")):
        case Err(e):
            print(f"git add failed: {e.message}")
        case Ok(_):
            pass

    match repo.has_staged_changes(Path("CHANGELOG.md")):
        case Ok(True):
            repo.commit("chore(release): update changelog for 1.2.0", paths=(path,))
        case Ok(False):
            print("nothing to commit")
        case Err(e):
            print(e.message)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from relprep.core.result import Err, Ok, Result
from relprep.platform.process import ProcessError
from relprep.platform.process import run as run_process

__all__ = [
    "GitError",
    "Repository",
    "StatusEntry",
]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


@dataclass(frozen=True, slots=True)
class StatusEntry:
    """A single line of ``git status --porcelain=v1``.

    Attributes:
        xy: Two-character status code (e.g., "M ", " M", "??")
        path: File path
    """

    xy: str
    path: str

    @property
    def is_staged(self) -> bool:
        """True if the index differs from HEAD for this path."""
        return self.xy != "??" and self.xy[0] != " "


class Repository:
    """A git working tree.

    Attributes:
        path: Path to the repository root
    """

    def __init__(self, path: Path) -> None:
        self.path = path

    def exists(self) -> bool:
        """Check if this is a valid git repository."""
        result = self._run(["rev-parse", "--git-dir"])
        return isinstance(result, Ok)

    def current_branch(self) -> str | None:
        """Get current branch name.

        Returns None if detached HEAD or error.
        """
        result = self._run(["rev-parse", "--abbrev-ref", "HEAD"])
        match result:
            case Ok(stdout):
                branch = stdout.strip()
                return None if branch == "HEAD" else branch
            case Err(_):
                # Unborn branch (no commits yet)
                fallback = self._run(["symbolic-ref", "--short", "HEAD"])
                if isinstance(fallback, Ok):
                    return fallback.value.strip() or None
                return None

    def stage(self, path: Path) -> Result[None, GitError]:
        """Add ``path`` to the index (``git add``)."""
        result = self._run(["add", "--", self._pathspec(path)])
        if isinstance(result, Err):
            return Err(self._error("add", result.error, "git add failed"))
        return Ok(None)

    def status_entries(self, path: Path | None = None) -> Result[list[StatusEntry], GitError]:
        """Porcelain status entries, optionally limited to one path."""
        args = ["status", "--porcelain=v1"]
        if path is not None:
            args += ["--", self._pathspec(path)]

        result = self._run(args)
        if isinstance(result, Err):
            return Err(self._error("status", result.error, "git status failed"))

        entries: list[StatusEntry] = []
        for line in result.value.splitlines():
            entry = self._parse_entry(line)
            if entry:
                entries.append(entry)
        return Ok(entries)

    def has_staged_changes(self, path: Path) -> Result[bool, GitError]:
        """Whether the staged content of ``path`` differs from the last commit.

        In a repository without commits any staged file counts as a change.
        """
        result = self.status_entries(path)
        if isinstance(result, Err):
            return result
        return Ok(any(e.is_staged for e in result.value))

    def commit(self, message: str, *, paths: Sequence[Path]) -> Result[str, GitError]:
        """Commit exactly ``paths`` with ``message``.

        Other staged files are left in the index untouched.

        Returns:
            Ok(output) on success
            Err(GitError) on failure (no identity configured, hook rejected, etc.)
        """
        args = ["commit", "-m", message]
        if paths:
            args += ["--", *(self._pathspec(p) for p in paths)]

        result = self._run(args)
        if isinstance(result, Err):
            return Err(self._error("commit", result.error, "git commit failed"))
        return Ok(result.value.strip())

    def _pathspec(self, path: Path) -> str:
        """Render ``path`` relative to the repository root when possible."""
        if not path.is_absolute():
            return path.as_posix()
        try:
            return path.relative_to(self.path).as_posix()
        except ValueError:
            return str(path)

    def _error(self, command: str, e: ProcessError, fallback: str) -> GitError:
        return GitError(
            command=command,
            message=e.stderr.strip() or e.stdout.strip() or fallback,
            returncode=e.returncode,
        )

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        """Run a git command in this repository."""
        return run_process(["git", "-C", str(self.path), *args], cwd=self.path)

    def _parse_entry(self, line: str) -> StatusEntry | None:
        """Parse a single status entry line."""
        if len(line) < 4:
            return None

        # Format: XY path or XY "path with spaces"
        if line.startswith("?? "):
            return StatusEntry(xy="??", path=line[3:])

        return StatusEntry(xy=line[:2], path=line[3:])
