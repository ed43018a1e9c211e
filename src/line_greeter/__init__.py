"""Public package surface exposing greetings, use cases, and configuration.

Imports are routed through the architectural layers:
- Domain exports: greeting templates and the input buffer
- Application exports: the greeting use cases
- Composition exports: wired adapter services (configuration)
- Metadata: Package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.greeter import ask_name, echo_line, greet_pair

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain.behaviors import (
    READ_ERROR_MESSAGE,
    build_echo,
    build_name_greeting,
    build_pair_greeting,
)
from .domain.buffer import InputBuffer

__all__ = [
    "READ_ERROR_MESSAGE",
    "InputBuffer",
    "ask_name",
    "build_echo",
    "build_name_greeting",
    "build_pair_greeting",
    "echo_line",
    "get_config",
    "greet_pair",
    "print_info",
]
