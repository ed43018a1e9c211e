"""Settings shared by the root group and its greeting and config commands.

Contents:
    * :data:`CLICK_CONTEXT_SETTINGS` - ``-h`` as an alias for ``--help`` everywhere.
    * :data:`TRACEBACK_SUMMARY_LIMIT` - Error text budget without ``--traceback``.
    * :data:`TRACEBACK_VERBOSE_LIMIT` - Error text budget with ``--traceback``.
"""

from __future__ import annotations

from typing import Final

#: Passed as ``context_settings`` to the root group and inherited by subcommands.
CLICK_CONTEXT_SETTINGS: Final[dict[str, list[str]]] = {"help_option_names": ["-h", "--help"]}

#: Enough for the exception type and message of a failed greeting run.
TRACEBACK_SUMMARY_LIMIT: Final[int] = 500

#: Room for the full stack when ``--traceback`` is given.
TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000

__all__ = [
    "CLICK_CONTEXT_SETTINGS",
    "TRACEBACK_SUMMARY_LIMIT",
    "TRACEBACK_VERBOSE_LIMIT",
]
