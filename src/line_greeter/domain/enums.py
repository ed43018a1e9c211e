"""Type-safe domain enums for output formats and greeting modes."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format options for configuration display.

    Defines valid output format choices for the config command.
    Inherits from str to allow direct string comparison and Click integration.

    Attributes:
        HUMAN: Human-readable TOML-like output format.
        JSON: Machine-readable JSON output format.

    Example:
        >>> OutputFormat.HUMAN.value
        'human'
        >>> OutputFormat.JSON == "json"
        True
    """

    HUMAN = "human"
    JSON = "json"


class GreetingMode(str, Enum):
    """Which greeting behavior a run performs.

    Attributes:
        PAIR: Collect two lines, greet both.
        ECHO: Collect one line, echo it back.
        ASK: Ask for a name, greet it.

    Example:
        >>> GreetingMode.PAIR.value
        'pair'
        >>> GreetingMode("echo") is GreetingMode.ECHO
        True
    """

    PAIR = "pair"
    ECHO = "echo"
    ASK = "ask"


__all__ = [
    "GreetingMode",
    "OutputFormat",
]
