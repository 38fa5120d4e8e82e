"""Exit codes for the relprep CLI.

Failures of an external tool are not listed here: their own exit status is
propagated unchanged.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Process exit codes owned by relprep.

    - 0: Success (including "no changes in changelog")
    - 1: User error (missing version argument)
    - 2: Environment error (not a git repository, bad config, tool not found)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
