"""Greeting commands reading standard input.

Each command opens the line source and sink from the composed services,
reads the prompt for its mode from the ``[greeter]`` configuration
section, and delegates to the matching use case. All three exit with
status 0 whether a greeting, nothing, or the read-error message was
printed.

Contents:
    * :func:`cli_greet` - Read two lines, print ``Hello, a and b``.
    * :func:`cli_echo` - Read one line, print ``You entered: x``.
    * :func:`cli_ask` - Ask for a name, print ``Hello, x!``.
"""

from __future__ import annotations

import logging

import lib_log_rich.runtime
import rich_click as click

from line_greeter.application.greeter import run_greeting
from line_greeter.domain.enums import GreetingMode
from line_greeter.domain.errors import ConfigurationError

from ..constants import CLICK_CONTEXT_SETTINGS
from ..context import get_cli_context
from ..exit_codes import ExitCode

logger = logging.getLogger(__name__)


def _run_mode(ctx: click.Context, mode: GreetingMode) -> None:
    cli_ctx = get_cli_context(ctx)
    services = cli_ctx.services
    command = ctx.info_name or mode.value
    with lib_log_rich.runtime.bind(job_id=f"cli-{command}", extra={"command": command, "mode": mode.value}):
        try:
            greeter_config = services.load_greeter_config(cli_ctx.config)
        except ConfigurationError as exc:
            logger.error("Invalid greeter configuration", extra={"error": str(exc)})
            click.echo(f"Error: {exc}", err=True)
            raise SystemExit(ExitCode.CONFIG_ERROR) from exc

        emitted = run_greeting(
            mode,
            services.open_line_source(),
            services.open_line_sink(),
            prompt=greeter_config.prompt_for(mode),
        )
        logger.info("Greeting run finished", extra={"emitted": emitted is not None})


@click.command("greet", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_greet(ctx: click.Context) -> None:
    """Read two lines from stdin and print ``Hello, <first> and <second>``.

    Nothing is printed when input ends before the second line.
    """
    _run_mode(ctx, GreetingMode.PAIR)


@click.command("echo", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_echo(ctx: click.Context) -> None:
    """Read one line from stdin and print ``You entered: <line>``."""
    _run_mode(ctx, GreetingMode.ECHO)


@click.command("ask", context_settings=CLICK_CONTEXT_SETTINGS)
@click.pass_context
def cli_ask(ctx: click.Context) -> None:
    """Ask for a name on stdin and print ``Hello, <name>!``."""
    _run_mode(ctx, GreetingMode.ASK)


__all__ = ["cli_ask", "cli_echo", "cli_greet"]
