"""Line source and sink backed by text streams.

:class:`TextStreamLineSource` performs one blocking ``readline`` per call
and translates stream faults into :class:`InputReadError` so the use
cases see a single error kind. :class:`EchoLineSink` writes through
``click.echo`` which resolves ``sys.stdout`` at call time and flushes
after every write, keeping prompts visible before a blocking read.

Contents:
    * :class:`TextStreamLineSource` - ``LineSource`` over any ``TextIO``.
    * :class:`EchoLineSink` - ``LineSink`` over stdout.
    * :func:`open_stdin_source` - production ``OpenLineSource``.
    * :func:`open_stdout_sink` - production ``OpenLineSink``.
"""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import click

from line_greeter.domain.behaviors import strip_line_terminator
from line_greeter.domain.errors import InputReadError

logger = logging.getLogger(__name__)


class TextStreamLineSource:
    """Read lines from a text stream until end-of-stream or :meth:`close`.

    Args:
        stream: Text stream to read from.
        close_stream: Close ``stream`` itself on :meth:`close`. Leave False
            for process-wide streams such as stdin.

    Example:
        >>> import io
        >>> source = TextStreamLineSource(io.StringIO("Alice\\nBob\\n"))
        >>> source.read_line()
        'Alice'
        >>> source.close()
        >>> source.read_line() is None
        True
    """

    def __init__(self, stream: TextIO, *, close_stream: bool = False) -> None:
        self._stream = stream
        self._close_stream = close_stream
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def read_line(self) -> str | None:
        """Return the next line without its terminator, ``None`` at end-of-stream.

        Raises:
            InputReadError: The stream is closed or the read failed.
        """
        if self._closed:
            return None
        try:
            raw = self._stream.readline()
        except (OSError, ValueError) as exc:
            raise InputReadError(str(exc) or type(exc).__name__) from exc
        if raw == "":
            return None
        return strip_line_terminator(raw)

    def close(self) -> None:
        """Stop reading. Closes the stream only when it is owned."""
        if self._closed:
            return
        self._closed = True
        if self._close_stream:
            self._stream.close()
        logger.debug("Line source closed", extra={"closed_stream": self._close_stream})


class EchoLineSink:
    """Write greeting output to stdout through ``click.echo``."""

    def write(self, text: str) -> None:
        click.echo(text, nl=False)

    def write_line(self, text: str) -> None:
        click.echo(text)


def open_stdin_source() -> TextStreamLineSource:
    """Return a line source over ``sys.stdin`` as it is bound at call time."""
    return TextStreamLineSource(sys.stdin)


def open_stdout_sink() -> EchoLineSink:
    """Return a line sink over the current standard output."""
    return EchoLineSink()


__all__ = [
    "EchoLineSink",
    "TextStreamLineSource",
    "open_stdin_source",
    "open_stdout_sink",
]
