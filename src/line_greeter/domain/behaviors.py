"""Pure domain functions with no I/O or framework dependencies."""

from __future__ import annotations

from typing import Final

PAIR_GREETING_TEMPLATE: Final[str] = "Hello, {first} and {second}"
ECHO_TEMPLATE: Final[str] = "You entered: {line}"
NAME_GREETING_TEMPLATE: Final[str] = "Hello, {name}!"
READ_ERROR_MESSAGE: Final[str] = "An error occurred while reading input."
DEFAULT_ASK_PROMPT: Final[str] = "What is your name? "

_LINE_TERMINATORS: Final[tuple[str, ...]] = ("\r\n", "\n", "\r")


def strip_line_terminator(raw: str) -> str:
    r"""Remove exactly one trailing line terminator from ``raw``.

    Only the terminator is removed; leading and trailing spaces belong to
    the line and are kept so the greeting reproduces the input verbatim.

    Args:
        raw: A line as returned by a text stream, terminator included.

    Returns:
        The line content without its terminator.

    Examples:
        >>> strip_line_terminator("Alice\n")
        'Alice'
        >>> strip_line_terminator("Bob\r\n")
        'Bob'
        >>> strip_line_terminator("  spaced  \n")
        '  spaced  '
        >>> strip_line_terminator("last line without newline")
        'last line without newline'
        >>> strip_line_terminator("two\n\n")
        'two\n'
    """
    for terminator in _LINE_TERMINATORS:
        if raw.endswith(terminator):
            return raw[: -len(terminator)]
    return raw


def build_pair_greeting(first: str, second: str) -> str:
    """Return the greeting for two collected lines.

    Examples:
        >>> build_pair_greeting("Alice", "Bob")
        'Hello, Alice and Bob'
        >>> build_pair_greeting("a", "b")
        'Hello, a and b'
    """
    return PAIR_GREETING_TEMPLATE.format(first=first, second=second)


def build_echo(line: str) -> str:
    """Return the echo line for a single input.

    Example:
        >>> build_echo("something")
        'You entered: something'
    """
    return ECHO_TEMPLATE.format(line=line)


def build_name_greeting(name: str) -> str:
    """Return the greeting for a single answered name.

    Example:
        >>> build_name_greeting("Ada")
        'Hello, Ada!'
    """
    return NAME_GREETING_TEMPLATE.format(name=name)


__all__ = [
    "DEFAULT_ASK_PROMPT",
    "ECHO_TEMPLATE",
    "NAME_GREETING_TEMPLATE",
    "PAIR_GREETING_TEMPLATE",
    "READ_ERROR_MESSAGE",
    "build_echo",
    "build_name_greeting",
    "build_pair_greeting",
    "strip_line_terminator",
]
