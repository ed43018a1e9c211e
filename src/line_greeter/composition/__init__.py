"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.display import display_config
from ..adapters.config.greeter import load_greeter_config
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Stream services
from ..adapters.streams.text import open_stdin_source, open_stdout_sink

# Each production adapter must structurally satisfy its port Protocol.
if TYPE_CHECKING:
    from ..adapters.memory.streams import RecordingLineSink, ScriptedLineSource
    from ..application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LineSink,
        LineSource,
        LoadGreeterConfig,
        OpenLineSink,
        OpenLineSource,
    )

    _assert_get_config: GetConfig = get_config
    _assert_display_config: DisplayConfig = display_config
    _assert_load_greeter_config: LoadGreeterConfig = load_greeter_config
    _assert_init_logging: InitLogging = init_logging
    _assert_open_line_source: OpenLineSource = open_stdin_source
    _assert_open_line_sink: OpenLineSink = open_stdout_sink


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    display_config: DisplayConfig
    load_greeter_config: LoadGreeterConfig
    init_logging: InitLogging
    open_line_source: OpenLineSource
    open_line_sink: OpenLineSink


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        display_config=display_config,
        load_greeter_config=load_greeter_config,
        init_logging=init_logging,
        open_line_source=open_stdin_source,
        open_line_sink=open_stdout_sink,
    )


def build_testing(
    *,
    source: ScriptedLineSource | None = None,
    sink: RecordingLineSink | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        source: Line source handed to every command. When None, an empty
            ScriptedLineSource (immediate end-of-stream) is used.
        sink: Line sink receiving all output. When None, a fresh
            RecordingLineSink is created. Pass your own to assert on output.

    Returns:
        AppServices container with in-memory adapters.
    """
    from ..adapters.memory import (
        RecordingLineSink,
        ScriptedLineSource,
        display_config_in_memory,
        get_config_in_memory,
        init_logging_in_memory,
        load_greeter_config_in_memory,
    )

    line_source: LineSource = source if source is not None else ScriptedLineSource()
    line_sink: LineSink = sink if sink is not None else RecordingLineSink()

    return AppServices(
        get_config=get_config_in_memory,
        display_config=display_config_in_memory,
        load_greeter_config=load_greeter_config_in_memory,
        init_logging=init_logging_in_memory,
        open_line_source=lambda: line_source,
        open_line_sink=lambda: line_sink,
    )


__all__ = [
    # Configuration
    "get_config",
    "display_config",
    "load_greeter_config",
    # Logging
    "init_logging",
    # Streams
    "open_stdin_source",
    "open_stdout_sink",
    # Composition
    "AppServices",
    "build_production",
    "build_testing",
]
