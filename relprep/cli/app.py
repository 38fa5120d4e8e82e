"""Typer entry point for the relprep command."""

from __future__ import annotations

from pathlib import Path

import typer

from relprep import __version__
from relprep.changelog.generator import GitCliffGenerator
from relprep.cli.context import build_context
from relprep.core.errors import ErrorCode
from relprep.core.result import Err
from relprep.output.console import Style
from relprep.output.errors import print_release_error, release_error_exit_code
from relprep.release.model import EXECUTE_FLAG, PrepareOutcome
from relprep.release.preparer import prepare_release
from relprep.release.request import parse_release_args


app = typer.Typer(
    add_completion=False,
    rich_markup_mode="rich",
)


def _show_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def prepare(
    args: list[str] | None = typer.Argument(
        None,
        metavar=f"VERSION [{EXECUTE_FLAG}]",
        help=f"Target version, then {EXECUTE_FLAG} to write and commit the changelog.",
        show_default=False,
    ),
    repo: Path | None = typer.Option(
        None,
        "--repo",
        help="Repository root (defaults to the current directory)",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Settings file (defaults to relprep.toml or [tool.relprep] in pyproject.toml)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_show_version,
        is_eager=True,
        help="Show relprep version and exit.",
    ),
) -> None:
    """Preview the changelog for a release, and with --execute commit it."""
    parsed = parse_release_args(list(args or []))
    if isinstance(parsed, Err):
        error = parsed.error
        typer.echo(f"error: {error.message}", err=True)
        if error.hint:
            typer.echo(error.hint, err=True)
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    request = parsed.value
    ctx = build_context(repo_root=repo, config_path=config)

    branch = ctx.repo.current_branch()
    if branch is not None:
        ctx.console.print(f"repo: {ctx.root} ({branch})", Style.DIM)

    generator = GitCliffGenerator(ctx.root, command=ctx.settings.generator, console=ctx.console)
    result = prepare_release(
        request,
        generator=generator,
        repo=ctx.repo,
        console=ctx.console,
        changelog=ctx.changelog,
        settings=ctx.settings,
    )
    if isinstance(result, Err):
        print_release_error(result.error, ctx.console)
        raise typer.Exit(code=release_error_exit_code(result.error))

    match result.value:
        case PrepareOutcome.PREVIEWED:
            ctx.console.print(
                f"preview only; re-run with {EXECUTE_FLAG} to write and commit the changelog",
                Style.DIM,
            )
        case PrepareOutcome.COMMITTED | PrepareOutcome.UNCHANGED:
            ctx.console.print(
                f"changelog ready; run the release tool for {request.version} next",
                Style.DIM,
            )


def main() -> None:
    app()
