from __future__ import annotations

import pytest

from relprep.core.result import Err, Ok
from relprep.release.model import ReleaseMode, ReleaseRequest
from relprep.release.request import MISSING_VERSION_MESSAGE, parse_release_args


@pytest.mark.parametrize("args", [[], [""], ["", "--execute"]])
def test_missing_version(args: list[str]) -> None:
    result = parse_release_args(args)

    assert isinstance(result, Err)
    assert result.error.kind == "invalid_arguments"
    assert result.error.message == MISSING_VERSION_MESSAGE
    assert result.error.returncode is None


def test_version_only_is_preview() -> None:
    assert parse_release_args(["1.2.0"]) == Ok(ReleaseRequest("1.2.0", ReleaseMode.PREVIEW))


def test_execute_flag() -> None:
    result = parse_release_args(["1.2.0", "--execute"])

    assert result == Ok(ReleaseRequest("1.2.0", ReleaseMode.EXECUTE))
    assert isinstance(result, Ok)
    assert result.value.is_execute


@pytest.mark.parametrize("flag", ["", "--exec", "execute", "--EXECUTE", " --execute", "-e"])
def test_other_flags_stay_in_preview(flag: str) -> None:
    result = parse_release_args(["1.2.0", flag])

    assert isinstance(result, Ok)
    assert result.value.mode is ReleaseMode.PREVIEW


def test_extra_arguments_ignored() -> None:
    result = parse_release_args(["1.2.0", "--execute", "whatever"])
    assert result == Ok(ReleaseRequest("1.2.0", ReleaseMode.EXECUTE))


def test_version_not_trimmed_or_validated() -> None:
    assert parse_release_args([" "]) == Ok(ReleaseRequest(" ", ReleaseMode.PREVIEW))
    assert parse_release_args(["next"]) == Ok(ReleaseRequest("next", ReleaseMode.PREVIEW))
