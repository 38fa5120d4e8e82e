from __future__ import annotations

from pathlib import Path

import pytest

from relprep.changelog.generator import GitCliffGenerator
from relprep.core.result import Err, Ok, Result
from relprep.output.console import MockConsole, Style
from relprep.platform.process import ProcessError


def _capture(
    monkeypatch: pytest.MonkeyPatch, result: Result[None, ProcessError]
) -> list[dict[str, object]]:
    import relprep.changelog.generator as generator_mod

    calls: list[dict[str, object]] = []

    def fake_run_silent(cmd: list[str], cwd: Path) -> Result[None, ProcessError]:
        calls.append({"cmd": cmd, "cwd": cwd})
        return result

    monkeypatch.setattr(generator_mod, "run_silent", fake_run_silent)
    return calls


def test_preview_runs_git_cliff_without_arguments(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    calls = _capture(monkeypatch, Ok(None))

    assert GitCliffGenerator(tmp_path).preview() == Ok(None)
    assert calls == [{"cmd": ["git", "cliff"], "cwd": tmp_path}]


def test_generate_passes_tag_and_output(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _capture(monkeypatch, Ok(None))
    output = tmp_path / "CHANGELOG.md"

    GitCliffGenerator(tmp_path).generate(tag="1.2.0", output=output)

    assert calls[0]["cmd"] == ["git", "cliff", "--tag", "1.2.0", "-o", str(output)]


def test_custom_command_prefix(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    calls = _capture(monkeypatch, Ok(None))

    gen = GitCliffGenerator(tmp_path, command=["git-cliff", "--config", "cliff.toml"])
    gen.generate(tag="v2.0.0", output=Path("CHANGES.md"))

    assert calls[0]["cmd"] == [
        "git-cliff",
        "--config",
        "cliff.toml",
        "--tag",
        "v2.0.0",
        "-o",
        "CHANGES.md",
    ]


def test_failure_is_returned(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    error = ProcessError(("git", "cliff"), 1, "", "")
    _capture(monkeypatch, Err(error))

    assert GitCliffGenerator(tmp_path).preview() == Err(error)


def test_echoes_command_to_console(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _capture(monkeypatch, Ok(None))
    console = MockConsole()

    GitCliffGenerator(tmp_path, console=console).generate(tag="1.2.0", output=Path("CHANGELOG.md"))

    assert console.outputs[0].message == "git cliff --tag 1.2.0 -o CHANGELOG.md"
    assert console.outputs[0].style == Style.DIM
