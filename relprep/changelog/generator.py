"""Changelog generator adapters.

relprep does not derive changelog entries itself. It drives an external
generator through two call shapes:

- ``preview()``: print the pending entries, write nothing
- ``generate(tag=..., output=...)``: (over)write the changelog file, treating
  ``tag`` as the boundary of the newest section

``GitCliffGenerator`` maps those onto ``git cliff`` and ``git cliff --tag <tag>
-o <output>``. The command prefix is configurable so other cliff-compatible
front ends can be used.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from relprep.core.config import DEFAULT_GENERATOR
from relprep.core.result import Result
from relprep.output.console import ConsoleProtocol, Style
from relprep.platform.process import ProcessError, format_command, run_silent

__all__ = ["ChangelogGenerator", "GitCliffGenerator"]


class ChangelogGenerator(Protocol):
    """External changelog-generation capability."""

    def preview(self) -> Result[None, ProcessError]:
        """Show pending changelog entries without writing any file."""
        ...

    def generate(self, *, tag: str, output: Path) -> Result[None, ProcessError]:
        """Write the changelog to ``output`` with ``tag`` as the newest release."""
        ...


class GitCliffGenerator:
    """Changelog generator backed by ``git cliff``."""

    def __init__(
        self,
        root: Path,
        *,
        command: Sequence[str] = DEFAULT_GENERATOR,
        console: ConsoleProtocol | None = None,
    ) -> None:
        self.root = root
        self.command = tuple(command)
        self._console = console

    def preview_command(self) -> list[str]:
        return [*self.command]

    def generate_command(self, *, tag: str, output: Path) -> list[str]:
        return [*self.command, "--tag", tag, "-o", str(output)]

    def preview(self) -> Result[None, ProcessError]:
        return self._run(self.preview_command())

    def generate(self, *, tag: str, output: Path) -> Result[None, ProcessError]:
        return self._run(self.generate_command(tag=tag, output=output))

    def _run(self, cmd: list[str]) -> Result[None, ProcessError]:
        if self._console is not None:
            self._console.print(format_command(cmd), Style.DIM)
        return run_silent(cmd, cwd=self.root)
