"""In-memory adapter implementations for testing.

Lightweight implementations of all application ports that operate
entirely in memory -- no filesystem, no terminal, no logging runtime.

Contents:
    * :mod:`.config` - In-memory configuration adapters
    * :mod:`.streams` - Scripted line source and recording line sink
    * :mod:`.logging` - In-memory logging adapter
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import (
    display_config_in_memory,
    get_config_in_memory,
    load_greeter_config_in_memory,
)
from .logging import init_logging_in_memory
from .streams import RecordingLineSink, ScriptedLineSource

# Static conformance assertions
if TYPE_CHECKING:
    from line_greeter.application.ports import (
        DisplayConfig,
        GetConfig,
        InitLogging,
        LineSink,
        LineSource,
        LoadGreeterConfig,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_display_config: DisplayConfig = display_config_in_memory
    _assert_load_greeter_config: LoadGreeterConfig = load_greeter_config_in_memory
    _assert_init_logging: InitLogging = init_logging_in_memory
    _assert_line_source: LineSource = ScriptedLineSource()
    _assert_line_sink: LineSink = RecordingLineSink()

__all__ = [
    "RecordingLineSink",
    "ScriptedLineSource",
    "display_config_in_memory",
    "get_config_in_memory",
    "init_logging_in_memory",
    "load_greeter_config_in_memory",
]
