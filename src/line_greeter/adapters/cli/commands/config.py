"""``line-greeter config``: show the settings a greeting run would use.

Prints the merged ``[greeter]`` and ``[lib_log_rich]`` sections with the
layer each value came from, so a user can check why a prompt appears
before wiring the tool into a pipe.

Contents:
    * :func:`cli_config` - Render the merged configuration or one section.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click
from lib_layered_config import Config

from line_greeter.adapters.config.overrides import apply_overrides
from line_greeter.domain.enums import OutputFormat

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import CLIContext, get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


@click.command("config", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--format",
    "output_format",
    type=click.Choice([f.value for f in OutputFormat], case_sensitive=False),
    default=OutputFormat.HUMAN.value,
    help="Render as annotated TOML-like text (human) or as JSON",
)
@click.option(
    "--section",
    type=str,
    default=None,
    help="Render a single top-level section such as 'greeter'",
)
@click.option(
    "--profile",
    type=str,
    default=None,
    help="Load this profile instead of the one given to the root command",
)
@click.pass_context
def cli_config(ctx: click.Context, output_format: str, section: str | None, profile: str | None) -> None:
    """Show the configuration the greeting commands would run with.

    Layers are merged lowest first: bundled defaults, app, host, user,
    ``.env``, environment variables, then root ``--set`` overrides.
    An unknown ``--section`` prints an error and exits with code 22.
    """
    cli_ctx = get_cli_context(ctx)
    config, effective_profile = _resolve_config(cli_ctx, profile)
    fmt = OutputFormat(output_format.lower())

    extra = {"command": "config", "format": fmt.value, "profile": effective_profile}
    with lib_log_rich.runtime.bind(job_id="cli-config", extra=extra):
        logger.info("Displaying configuration", extra={"section": section})
        _render(cli_ctx, config, fmt=fmt, section=section, profile=effective_profile)


def _render(
    cli_ctx: CLIContext, config: Config, *, fmt: OutputFormat, section: str | None, profile: str | None
) -> None:
    """Hand ``config`` to the display service, mapping a missing section to exit code 22.

    Raises:
        SystemExit: ``section`` is not present in ``config``.
    """
    try:
        cli_ctx.services.display_config(config, output_format=fmt, section=section, profile=profile)
    except ValueError as exc:
        logger.debug("Unknown configuration section", extra={"section": section})
        click.echo(f"Error: {exc}", err=True)
        raise SystemExit(ExitCode.INVALID_ARGUMENT) from exc


def _resolve_config(cli_ctx: CLIContext, profile: str | None) -> tuple[Config, str | None]:
    """Return the config to show and the profile it belongs to.

    Without ``profile`` this is the root group's config. With it, the
    layers are reloaded for that profile and the root ``--set`` overrides
    applied again, so ``--set`` always wins over any file.

    Args:
        cli_ctx: State stored by the root group.
        profile: Profile given to ``config --profile``, if any.

    Returns:
        ``(config, profile)`` pair to render.
    """
    if not profile:
        return cli_ctx.config, cli_ctx.profile
    reloaded = cli_ctx.services.get_config(profile=profile)
    return apply_overrides(reloaded, cli_ctx.set_overrides), profile


__all__ = ["cli_config"]
