"""Release preparation workflow.

Preview always runs. In execute mode the changelog is regenerated with the
target version as its newest tag, staged, and committed only when the staged
file differs from the last commit. The first failing step ends the run; no
step is retried and nothing is rolled back.

The workflow never bumps versions, tags, pushes or publishes. Those belong to
the release tool the caller runs afterwards.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from relprep.changelog.generator import ChangelogGenerator
from relprep.core.config import Settings
from relprep.core.result import Err, Ok, Result
from relprep.git.repository import GitError
from relprep.output.console import ConsoleProtocol
from relprep.release.errors import ReleaseError, from_git_error, from_process_error
from relprep.release.model import ChangelogDelta, PrepareOutcome, ReleaseRequest

__all__ = ["ReleaseRepository", "check_changelog_delta", "prepare_release"]


class ReleaseRepository(Protocol):
    """The version-control operations the workflow needs."""

    def stage(self, path: Path) -> Result[None, GitError]: ...

    def has_staged_changes(self, path: Path) -> Result[bool, GitError]: ...

    def commit(self, message: str, *, paths: Sequence[Path]) -> Result[str, GitError]: ...


def check_changelog_delta(
    repo: ReleaseRepository, path: Path
) -> Result[ChangelogDelta, ReleaseError]:
    """Diff gate: compare the staged changelog against the last commit."""
    result = repo.has_staged_changes(path)
    if isinstance(result, Err):
        return Err(from_git_error("checking changelog changes", result.error))
    return Ok(ChangelogDelta(path=path, has_changes=result.value))


def prepare_release(
    request: ReleaseRequest,
    *,
    generator: ChangelogGenerator,
    repo: ReleaseRepository,
    console: ConsoleProtocol,
    changelog: Path,
    settings: Settings,
) -> Result[PrepareOutcome, ReleaseError]:
    """Run the release-preparation workflow for ``request``.

    Args:
        request: Validated version and mode
        generator: Changelog generator (preview and tag-scoped generation)
        repo: Repository the changelog is staged and committed in
        console: Progress output
        changelog: Changelog artifact path
        settings: Provides the commit message template

    Returns:
        Ok(PrepareOutcome) on success, Err(ReleaseError) for the first failing step
    """
    preview = generator.preview()
    if isinstance(preview, Err):
        return Err(from_process_error("changelog preview failed", preview.error))

    if not request.is_execute:
        return Ok(PrepareOutcome.PREVIEWED)

    console.header(f"Starting pre-release process for version {request.version}...")

    console.print("Generating changelog...")
    generated = generator.generate(tag=request.version, output=changelog)
    if isinstance(generated, Err):
        return Err(from_process_error("changelog generation failed", generated.error))

    staged = repo.stage(changelog)
    if isinstance(staged, Err):
        return Err(from_git_error("staging changelog failed", staged.error))

    delta = check_changelog_delta(repo, changelog)
    if isinstance(delta, Err):
        return delta

    if not delta.value.has_changes:
        console.info("No changes in changelog.")
        return Ok(PrepareOutcome.UNCHANGED)

    console.print("Committing the new changelog...")
    committed = repo.commit(settings.commit_message_for(request.version), paths=(changelog,))
    if isinstance(committed, Err):
        return Err(from_git_error("committing changelog failed", committed.error))

    console.success(f"changelog committed for {request.version}")
    return Ok(PrepareOutcome.COMMITTED)
