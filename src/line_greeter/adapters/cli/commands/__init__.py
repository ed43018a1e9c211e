"""CLI command implementations.

Collects all subcommand functions and re-exports them for registration
with the root CLI group.

Contents:
    * Greeting commands from :mod:`.greet`
    * Info command from :mod:`.info`
    * Config command from :mod:`.config`
"""

from __future__ import annotations

from .config import cli_config
from .greet import cli_ask, cli_echo, cli_greet
from .info import cli_info

__all__ = [
    "cli_ask",
    "cli_config",
    "cli_echo",
    "cli_greet",
    "cli_info",
]
