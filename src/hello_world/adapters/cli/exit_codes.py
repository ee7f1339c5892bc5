"""POSIX-conventional exit codes for CLI error paths.

Signal codes (130, 141, 143) are informational only; ``lib_cli_exit_tools``
translates signals to exit codes on its own.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following errno and sysexits.h conventions.

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
        >>> ExitCode.SUCCESS
        <ExitCode.SUCCESS: 0>
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130
    BROKEN_PIPE = 141
    SIGNAL_TERM = 143


__all__ = ["ExitCode"]
