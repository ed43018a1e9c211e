"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete configuration.

    Raised when the ``[greeter]`` section holds unknown keys or values of
    the wrong type. Caught at the CLI boundary to provide a short message
    and a dedicated exit code.

    Example:
        >>> from line_greeter.domain.errors import ConfigurationError
        >>> err = ConfigurationError("greeter.pair_prompt must be a string")
        >>> str(err)
        'greeter.pair_prompt must be a string'
    """


class InputReadError(Exception):
    """The input stream could not be read.

    Raised by line sources when the underlying stream is closed or the
    read itself fails. Greeting use cases catch it at the read site and
    print a fixed message instead of propagating it.

    Example:
        >>> from line_greeter.domain.errors import InputReadError
        >>> err = InputReadError("I/O operation on closed file.")
        >>> str(err)
        'I/O operation on closed file.'
    """


class InputBufferFullError(ValueError):
    """A line was appended to an input buffer that is already full.

    Example:
        >>> err = InputBufferFullError("input buffer already holds 2 line(s)")
        >>> isinstance(err, ValueError)
        True
    """


__all__ = [
    "ConfigurationError",
    "InputBufferFullError",
    "InputReadError",
]
