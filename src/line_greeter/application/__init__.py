"""Application layer - use cases and port definitions.

Contains use cases that orchestrate domain logic and port protocols that
define the interfaces for adapter implementations.

Contents:
    * :mod:`.ports` - Callable Protocol definitions for adapter functions
    * :mod:`.greeter` - Greeting use cases (pair, echo, ask)
"""

from __future__ import annotations

from .greeter import ask_name, echo_line, greet_pair, run_greeting
from .ports import (
    DisplayConfig,
    GetConfig,
    InitLogging,
    LineSink,
    LineSource,
    LoadGreeterConfig,
    OpenLineSink,
    OpenLineSource,
)

__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LineSink",
    "LineSource",
    "LoadGreeterConfig",
    "OpenLineSink",
    "OpenLineSource",
    "ask_name",
    "echo_line",
    "greet_pair",
    "run_greeting",
]
