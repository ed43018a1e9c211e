"""Process-level wrapper around the root command group.

Both ``line-greeter`` and ``python -m line_greeter`` end up in :func:`main`,
which turns every way a run can end into a single exit status:

* normal return, ``--help`` and ``--version`` give 0;
* click usage errors print their message and give 2;
* a command that already reported its own failure raises ``SystemExit``
  with the code to use (22 for ``config --section``, 78 for a bad
  ``[greeter]`` section), which is returned unchanged;
* anything else is printed by ``lib_cli_exit_tools``, truncated unless
  ``--traceback`` was given, and mapped to an exit code by it.

Contents:
    * :func:`main` - Run the CLI and return its exit code.
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING

import click
import lib_cli_exit_tools
import lib_log_rich.runtime

from line_greeter import __init__conf__

from .constants import TRACEBACK_SUMMARY_LIMIT, TRACEBACK_VERBOSE_LIMIT
from .context import (
    apply_traceback_preferences,
    restore_traceback_state,
    snapshot_traceback_state,
)

if TYPE_CHECKING:
    from line_greeter.composition import AppServices


def _report_unexpected(exc: BaseException) -> int:
    """Print ``exc`` in the detail selected by ``--traceback`` and return its exit code.

    Args:
        exc: The exception that escaped the command group.

    Returns:
        Exit code chosen by ``lib_cli_exit_tools`` for the exception type.
    """
    verbose = bool(getattr(lib_cli_exit_tools.config, "traceback", False))
    apply_traceback_preferences(verbose)
    limit = TRACEBACK_VERBOSE_LIMIT if verbose else TRACEBACK_SUMMARY_LIMIT
    lib_cli_exit_tools.print_exception_message(trace_back=verbose, length_limit=limit)
    return lib_cli_exit_tools.get_system_exit_code(exc)


def _exit_status(exc: SystemExit) -> int:
    """Return the status ``exc`` would give the interpreter (None is 0, non-int is 1)."""
    if exc.code is None:
        return 0
    if isinstance(exc.code, int):
        return exc.code
    return 1


def _run_cli(argv: Sequence[str] | None, *, services_factory: Callable[[], AppServices]) -> int:
    """Invoke the root group with ``services_factory`` as ``ctx.obj``.

    ``lib_cli_exit_tools.run_cli`` has no way to pass ``obj``, so the group
    runs with ``standalone_mode=False`` and its outcomes are mapped here.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        services_factory: Callable returning the wired services.

    Returns:
        Exit code for the process.
    """
    from .root import cli

    args = list(argv) if argv is not None else sys.argv[1:]
    try:
        cli.main(args=args, prog_name=__init__conf__.shell_command, obj=services_factory, standalone_mode=False)
    except click.exceptions.Exit as exc:
        return exc.exit_code
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except SystemExit as exc:
        # Raised by commands after they printed their own ``Error:`` line.
        return _exit_status(exc)
    except BaseException as exc:
        return _report_unexpected(exc)
    return 0


def _shutdown_logging() -> None:
    """Flush and stop the lib_log_rich runtime when called on the main thread."""
    if threading.current_thread() is not threading.main_thread():
        return
    if lib_log_rich.runtime.is_initialised():
        lib_log_rich.runtime.shutdown()


def main(
    argv: Sequence[str] | None = None,
    *,
    restore_traceback: bool = True,
    services_factory: Callable[[], AppServices] | None = None,
) -> int:
    """Run the CLI once and return its exit code.

    Args:
        argv: Arguments without the program name; ``sys.argv[1:]`` when None.
        restore_traceback: Put the ``lib_cli_exit_tools`` traceback flags back
            to their values from before the run.
        services_factory: Returns the wired :class:`AppServices`. Callers
            outside the adapters layer pass ``build_production``.

    Returns:
        Process exit code; 0 for every greeting run, including one that
        ended early or reported a read failure.

    Raises:
        ValueError: ``services_factory`` was not given.

    Example:
        >>> from line_greeter.composition import build_production
        >>> main(["--version"], services_factory=build_production)  # doctest: +SKIP
        0
    """
    if services_factory is None:
        raise ValueError("services_factory is required. Pass build_production from composition layer.")

    previous_state = snapshot_traceback_state()
    try:
        return _run_cli(argv, services_factory=services_factory)
    finally:
        if restore_traceback:
            restore_traceback_state(previous_state)
        _shutdown_logging()


__all__ = ["main"]
