"""Domain layer - pure business logic with no I/O or framework dependencies.

Contents:
    * :mod:`.behaviors` - Greeting templates and line handling
    * :mod:`.buffer` - The append-only input buffer
    * :mod:`.enums` - Domain enumerations (OutputFormat, GreetingMode)
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .behaviors import (
    DEFAULT_ASK_PROMPT,
    READ_ERROR_MESSAGE,
    build_echo,
    build_name_greeting,
    build_pair_greeting,
    strip_line_terminator,
)
from .buffer import PAIR_CAPACITY, InputBuffer
from .enums import GreetingMode, OutputFormat
from .errors import ConfigurationError, InputBufferFullError, InputReadError

__all__ = [
    # Behaviors
    "DEFAULT_ASK_PROMPT",
    "READ_ERROR_MESSAGE",
    "build_echo",
    "build_name_greeting",
    "build_pair_greeting",
    "strip_line_terminator",
    # Buffer
    "PAIR_CAPACITY",
    "InputBuffer",
    # Enums
    "GreetingMode",
    "OutputFormat",
    # Errors
    "ConfigurationError",
    "InputBufferFullError",
    "InputReadError",
]
