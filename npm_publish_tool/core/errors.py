"""Process exit codes.

Every failure the tool reports (bad project directory, failed install,
failed copy, failed git command) exits with FAILURE. Argument errors raised
by the command-line parser keep click's own code (2), and an interactive
cancellation gets the conventional interrupt code.
"""

from enum import IntEnum

__all__ = ["ErrorCode"]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands. These values are part of the CLI contract."""

    OK = 0
    FAILURE = 1
    CANCELLED = 130
