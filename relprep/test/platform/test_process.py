"""Tests for relprep.platform.process module."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from relprep.core.result import Err, Ok
from relprep.platform.process import SPAWN_FAILED, ProcessError, format_command, run, run_silent

PY = sys.executable


class TestProcessError:
    def test_str_short_command(self) -> None:
        error = ProcessError(
            command=("git", "add"),
            returncode=128,
            stdout="",
            stderr="fatal: not a git repository",
        )
        assert str(error) == "git add failed (exit 128)"

    def test_str_long_command_truncated(self) -> None:
        error = ProcessError(("git", "cliff", "--tag", "1.2.0", "-o", "CHANGELOG.md"), 1, "", "")
        assert str(error) == "git cliff --tag ... failed (exit 1)"


def test_format_command_quotes_spaces() -> None:
    assert format_command(["git", "commit", "-m", "a b"]) == 'git commit -m "a b"'


class TestRun:
    def test_success_returns_stdout(self, tmp_path: Path) -> None:
        result = run([PY, "-c", "print('hello')"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert "hello" in result.value

    def test_failure_keeps_returncode_and_stderr(self, tmp_path: Path) -> None:
        result = run(
            [PY, "-c", "import sys; sys.stderr.write('bad'); sys.exit(42)"],
            cwd=tmp_path,
        )

        assert isinstance(result, Err)
        assert result.error.returncode == 42
        assert "bad" in result.error.stderr

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run(["nonexistent_command_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == SPAWN_FAILED
        assert result.error.stderr

    def test_uses_cwd(self, tmp_path: Path) -> None:
        (tmp_path / "marker.txt").write_text("x", encoding="utf-8")

        result = run([PY, "-c", "import os; print(os.listdir('.'))"], cwd=tmp_path)

        assert isinstance(result, Ok)
        assert "marker.txt" in result.value


class TestRunSilent:
    def test_success(self, tmp_path: Path) -> None:
        assert run_silent([PY, "-c", "pass"], cwd=tmp_path) == Ok(None)

    @pytest.mark.parametrize("code", [1, 3])
    def test_failure_propagates_exit_code(self, tmp_path: Path, code: int) -> None:
        result = run_silent([PY, "-c", f"import sys; sys.exit({code})"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == code

    def test_command_not_found(self, tmp_path: Path) -> None:
        result = run_silent(["nonexistent_command_12345"], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == SPAWN_FAILED

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
    def test_killed_by_signal_reports_negative_code(self, tmp_path: Path) -> None:
        script = "import os, signal; os.kill(os.getpid(), signal.SIGTERM)"

        result = run_silent([PY, "-c", script], cwd=tmp_path)

        assert isinstance(result, Err)
        assert result.error.returncode == -15
