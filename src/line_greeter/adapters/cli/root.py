"""Root command group of the ``line-greeter`` console script.

The group resolves the global flags once, before ``greet``, ``echo``,
``ask``, ``info`` or ``config`` runs. The traceback preference is applied
first so that failures while loading a profile or merging ``--set`` values
are already reported in the requested detail.

Contents:
    * :func:`cli` - Root command group with global options.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import rich_click as click
from lib_layered_config import Config

from line_greeter import __init__conf__
from line_greeter.adapters.config.overrides import apply_overrides

from .constants import CLICK_CONTEXT_SETTINGS
from .context import apply_traceback_preferences, store_cli_context

if TYPE_CHECKING:
    from line_greeter.composition import AppServices


def _load_config(services: AppServices, profile: str | None, set_overrides: tuple[str, ...]) -> Config:
    """Load the layered configuration for ``profile`` and merge ``--set`` values.

    Args:
        services: Wired services; only ``get_config`` is used.
        profile: Profile name from ``--profile``, or None for the base layers.
        set_overrides: Raw ``SECTION.KEY=VALUE`` strings in command-line order.

    Returns:
        The configuration every subcommand sees.

    Raises:
        click.UsageError: An override string is malformed.
        ValueError: ``profile`` is not a safe profile name.
    """
    config = services.get_config(profile=profile)
    try:
        return apply_overrides(config, set_overrides)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


@click.group(
    help=__init__conf__.title,
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=True,
)
@click.version_option(
    version=__init__conf__.version,
    prog_name=__init__conf__.shell_command,
    message=f"{__init__conf__.shell_command} version {__init__conf__.version}",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Print the full Python traceback when a command fails",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Read configuration from profile/NAME/ in every layer",
)
@click.option(
    "--set",
    "set_overrides",
    multiple=True,
    default=(),
    metavar="SECTION.KEY=VALUE",
    help="Override a configuration setting (repeatable), e.g. greeter.pair_prompt='> '",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool, profile: str | None, set_overrides: tuple[str, ...]) -> None:
    """Resolve global options and hand a typed :class:`CLIContext` to subcommands.

    The ``ctx.obj`` passed in is the services factory chosen by the caller
    (``build_production`` for the console script, a test double in the
    suite). It is replaced by the resolved context before any subcommand
    runs. Without a subcommand the group prints its help and exits 0.

    Args:
        ctx: Click context whose ``obj`` holds the services factory.
        traceback: Print full tracebacks for unexpected errors.
        profile: Configuration profile to load.
        set_overrides: ``--set`` values merged on top of the loaded layers.

    Raises:
        RuntimeError: No services factory was passed as ``obj``.

    Example:
        >>> from click.testing import CliRunner
        >>> from line_greeter.composition import build_production
        >>> result = CliRunner().invoke(cli, ["greet"], input="a\\nb\\n", obj=build_production)
        >>> "Hello, a and b" in result.stdout
        True
    """
    apply_traceback_preferences(traceback)
    factory = ctx.obj
    if not callable(factory):
        raise RuntimeError("Services factory not provided. This is a bug.")
    services: AppServices = factory()  # type: ignore[assignment]  # Click's obj is typed as Any
    config = _load_config(services, profile, set_overrides)
    services.init_logging(config)
    store_cli_context(
        ctx,
        traceback=traceback,
        config=config,
        services=services,
        profile=profile,
        set_overrides=set_overrides,
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Commands import from package ancestors, so registration waits until ``cli`` exists.
def _register_commands() -> None:
    from .commands import cli_ask, cli_config, cli_echo, cli_greet, cli_info

    for command in (cli_greet, cli_echo, cli_ask, cli_info, cli_config):
        cli.add_command(command)


_register_commands()


__all__ = ["cli"]
