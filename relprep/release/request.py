"""Validate positional arguments into a ReleaseRequest."""

from __future__ import annotations

from collections.abc import Sequence

from relprep.core.result import Err, Ok, Result
from relprep.release.errors import ReleaseError, invalid_arguments
from relprep.release.model import EXECUTE_FLAG, ReleaseMode, ReleaseRequest

MISSING_VERSION_MESSAGE = "Missing new version"


def parse_release_args(args: Sequence[str]) -> Result[ReleaseRequest, ReleaseError]:
    """Turn raw positional arguments into a ReleaseRequest.

    ``args[0]`` is the version and must be non-empty. ``args[1]`` selects
    execute mode only when it is exactly ``--execute``; anything else, or
    nothing, means preview. Further arguments are ignored.

    The version string is not trimmed or checked against any versioning
    scheme: it is handed to the changelog generator as given.
    """
    version = args[0] if args else ""
    if not version:
        return Err(
            invalid_arguments(
                MISSING_VERSION_MESSAGE,
                hint=f"usage: relprep <version> [{EXECUTE_FLAG}]",
            )
        )

    flag = args[1] if len(args) > 1 else ""
    mode = ReleaseMode.EXECUTE if flag == EXECUTE_FLAG else ReleaseMode.PREVIEW
    return Ok(ReleaseRequest(version=version, mode=mode))
