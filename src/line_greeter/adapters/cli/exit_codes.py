"""POSIX-conventional exit codes for CLI error paths.

Greeting commands always finish with :attr:`ExitCode.SUCCESS`, including
after end-of-input and after a reported read failure. The remaining codes
belong to the configuration surface around them.

Contents:
    * :class:`ExitCode` - IntEnum of all exit codes used by this application.
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    """Exit codes following sysexits.h and errno conventions.

    * 0–1: generic success / failure
    * 2: click usage error
    * 22: EINVAL
    * 78: EX_CONFIG (sysexits.h)
    * 130: interrupted by SIGINT (informational, set by lib_cli_exit_tools)

    Example:
        >>> int(ExitCode.CONFIG_ERROR)
        78
    """

    SUCCESS = 0
    GENERAL_ERROR = 1
    USAGE_ERROR = 2
    INVALID_ARGUMENT = 22
    CONFIG_ERROR = 78
    SIGNAL_INT = 130


__all__ = ["ExitCode"]
