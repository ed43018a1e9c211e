"""Per-invocation CLI state and the process-wide traceback switches.

The root group receives a services factory in ``ctx.obj``. Once it has
built the services and loaded configuration it swaps that factory for a
:class:`CLIContext`, so ``greet``, ``echo``, ``ask`` and ``config`` read
one typed object instead of poking at ``ctx.obj`` themselves.

The traceback helpers wrap ``lib_cli_exit_tools.config``, which is global.
:func:`snapshot_traceback_state` and :func:`restore_traceback_state` let
:func:`line_greeter.adapters.cli.main.main` undo a ``--traceback`` run.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

import lib_cli_exit_tools
import rich_click as click
from lib_layered_config import Config

if TYPE_CHECKING:
    from line_greeter.composition import AppServices

TracebackState = tuple[bool, bool]
"""Captured traceback configuration: (traceback_enabled, force_color)."""


@dataclass(slots=True)
class CLIContext:
    """State the root group resolves once and every subcommand reads."""

    traceback: bool
    config: Config
    services: AppServices
    profile: str | None = None
    set_overrides: tuple[str, ...] = ()


def store_cli_context(
    ctx: click.Context,
    *,
    traceback: bool,
    config: Config,
    services: AppServices,
    profile: str | None = None,
    set_overrides: tuple[str, ...] = (),
) -> None:
    """Replace ``ctx.obj`` (the services factory) with a :class:`CLIContext`.

    Args:
        ctx: Click context of the root group.
        traceback: Whether verbose tracebacks were requested.
        config: Configuration with ``--set`` overrides applied.
        services: Services built from the factory.
        profile: Profile the configuration was loaded for.
        set_overrides: Raw ``--set`` strings, kept so a subcommand that
            reloads another profile can reapply them.

    Example:
        >>> from lib_layered_config import Config
        >>> from line_greeter.composition import build_testing
        >>> ctx = click.Context(click.Command("greet"))
        >>> store_cli_context(ctx, traceback=False, config=Config({}, {}), services=build_testing())
        >>> get_cli_context(ctx).profile is None
        True
    """
    ctx.obj = CLIContext(
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )


def get_cli_context(ctx: click.Context) -> CLIContext:
    """Return the :class:`CLIContext` stored by the root group.

    Args:
        ctx: Context of the running subcommand, or of the root group itself.

    Returns:
        The state :func:`store_cli_context` left in ``ctx.obj``.

    Raises:
        RuntimeError: ``ctx.obj`` still holds the services factory, which
            means the command was invoked without going through the root group.
    """
    if not isinstance(ctx.obj, CLIContext):
        raise RuntimeError("CLI context not initialized. Call store_cli_context first.")
    return ctx.obj


def apply_traceback_preferences(enabled: bool) -> None:
    """Turn full, coloured tracebacks on or off in ``lib_cli_exit_tools``.

    Example:
        >>> apply_traceback_preferences(True)
        >>> bool(lib_cli_exit_tools.config.traceback)
        True
        >>> apply_traceback_preferences(False)
    """
    lib_cli_exit_tools.config.traceback = bool(enabled)
    lib_cli_exit_tools.config.traceback_force_color = bool(enabled)


def snapshot_traceback_state() -> TracebackState:
    """Capture the current traceback flags for :func:`restore_traceback_state`."""
    return (
        bool(getattr(lib_cli_exit_tools.config, "traceback", False)),
        bool(getattr(lib_cli_exit_tools.config, "traceback_force_color", False)),
    )


def restore_traceback_state(state: TracebackState) -> None:
    """Reapply flags captured by :func:`snapshot_traceback_state`."""
    lib_cli_exit_tools.config.traceback, lib_cli_exit_tools.config.traceback_force_color = state


__all__ = [
    "CLIContext",
    "TracebackState",
    "apply_traceback_preferences",
    "get_cli_context",
    "restore_traceback_state",
    "snapshot_traceback_state",
    "store_cli_context",
]
