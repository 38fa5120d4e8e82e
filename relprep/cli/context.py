"""CLI context: repository root, settings and console for one run."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from relprep.core.config import Settings, resolve_settings
from relprep.core.errors import ErrorCode
from relprep.core.result import Err
from relprep.git.repository import Repository
from relprep.output.console import ConsoleProtocol, RichConsole


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    repo: Repository
    settings: Settings
    console: ConsoleProtocol

    @property
    def changelog(self) -> Path:
        return self.settings.changelog_path(self.root)


def build_context(*, repo_root: Path | None = None, config_path: Path | None = None) -> CLIContext:
    try:
        root = (repo_root or Path.cwd()).expanduser().resolve()
    except OSError as e:
        typer.echo(f"error: invalid --repo: {e}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    repo = Repository(root)
    if not root.is_dir() or not repo.exists():
        typer.echo(f"error: not a git repository: {root}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    settings_result = resolve_settings(root, config_path)
    if isinstance(settings_result, Err):
        typer.echo(f"error: {settings_result.error.message}", err=True)
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))

    return CLIContext(
        root=root,
        repo=repo,
        settings=settings_result.value,
        console=RichConsole(),
    )
