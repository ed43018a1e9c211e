"""In-memory configuration adapters for testing.

Satisfy the same Protocols as the production adapters without touching
the filesystem.
"""

from __future__ import annotations

from lib_layered_config import Config

from ...domain.enums import OutputFormat
from ..config.greeter import GreeterConfig, load_greeter_config


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def display_config_in_memory(
    config: Config,
    *,
    output_format: OutputFormat = OutputFormat.HUMAN,
    section: str | None = None,
    profile: str | None = None,
) -> None:
    """No-op display -- satisfies the DisplayConfig protocol."""


def load_greeter_config_in_memory(config: Config) -> GreeterConfig:
    """Parse the greeter section using the real Pydantic model."""
    return load_greeter_config(config)


__all__ = [
    "display_config_in_memory",
    "get_config_in_memory",
    "load_greeter_config_in_memory",
]
