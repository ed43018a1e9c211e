"""Greeting use cases orchestrating line sources, the input buffer, and sinks.

Each use case owns a fresh :class:`~line_greeter.domain.buffer.InputBuffer`
for the duration of one run, reads lines one at a time in arrival order,
emits at most one output line, and closes the source before returning.

Read failures are handled at the read site: the fixed
:data:`~line_greeter.domain.behaviors.READ_ERROR_MESSAGE` is written and the
run ends normally. End-of-stream before the buffer fills is not an error.

Contents:
    * :func:`greet_pair` - collect two lines, emit ``Hello, a and b``.
    * :func:`echo_line` - collect one line, emit ``You entered: x``.
    * :func:`ask_name` - prompt for a name, emit ``Hello, x!``.
    * :func:`run_greeting` - dispatch by :class:`GreetingMode`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..domain.behaviors import (
    DEFAULT_ASK_PROMPT,
    READ_ERROR_MESSAGE,
    build_echo,
    build_name_greeting,
    build_pair_greeting,
)
from ..domain.buffer import PAIR_CAPACITY, InputBuffer
from ..domain.enums import GreetingMode
from ..domain.errors import InputReadError
from .ports import LineSink, LineSource

logger = logging.getLogger(__name__)


def _collect(source: LineSource, sink: LineSink, buffer: InputBuffer, prompt: str) -> bool:
    """Fill ``buffer`` from ``source``, prompting before each read.

    Returns:
        True when the buffer filled, False when the stream ended first.

    Raises:
        InputReadError: Propagated from the source for the caller to report.
    """
    while not buffer.is_full:
        if prompt:
            sink.write(prompt)
        line = source.read_line()
        if line is None:
            logger.debug("End of input after %d of %d line(s)", len(buffer), buffer.capacity)
            return False
        buffer.append(line)
    return True


def _report_read_failure(sink: LineSink, exc: InputReadError) -> str:
    logger.info("Reading input failed", extra={"error": str(exc)})
    sink.write_line(READ_ERROR_MESSAGE)
    return READ_ERROR_MESSAGE


def greet_pair(source: LineSource, sink: LineSink, *, prompt: str = "") -> str | None:
    """Collect exactly two lines and greet both of them.

    Args:
        source: Line source to read from; closed before returning.
        sink: Line sink receiving the prompt (if any) and the greeting.
        prompt: Text written before every read. Empty disables prompting.

    Returns:
        The emitted line, or ``None`` when input ended before two lines
        arrived and nothing was written.

    Example:
        >>> from line_greeter.adapters.memory import RecordingLineSink, ScriptedLineSource
        >>> sink = RecordingLineSink()
        >>> greet_pair(ScriptedLineSource(["Alice", "Bob"]), sink)
        'Hello, Alice and Bob'
        >>> sink.output
        'Hello, Alice and Bob\\n'
    """
    buffer = InputBuffer(PAIR_CAPACITY)
    logger.info("Collecting %d lines for pair greeting", buffer.capacity)
    try:
        if not _collect(source, sink, buffer, prompt):
            return None
        first, second = buffer.lines
        greeting = build_pair_greeting(first, second)
        sink.write_line(greeting)
        logger.info("Pair greeting emitted")
        return greeting
    except InputReadError as exc:
        return _report_read_failure(sink, exc)
    finally:
        source.close()


def echo_line(source: LineSource, sink: LineSink, *, prompt: str = "") -> str:
    """Read a single line and echo it back with a fixed prefix.

    End-of-stream echoes an empty value; a failed read prints the fixed
    error message instead. Either way exactly one line is written.

    Example:
        >>> from line_greeter.adapters.memory import RecordingLineSink, ScriptedLineSource
        >>> echo_line(ScriptedLineSource(["something"]), RecordingLineSink())
        'You entered: something'
    """
    buffer = InputBuffer(1)
    try:
        _collect(source, sink, buffer, prompt)
        echoed = build_echo(buffer.lines[0] if buffer.is_full else "")
        sink.write_line(echoed)
        return echoed
    except InputReadError as exc:
        return _report_read_failure(sink, exc)
    finally:
        source.close()


def ask_name(source: LineSource, sink: LineSink, *, prompt: str = DEFAULT_ASK_PROMPT) -> str | None:
    """Ask for a name and greet it.

    Example:
        >>> from line_greeter.adapters.memory import RecordingLineSink, ScriptedLineSource
        >>> sink = RecordingLineSink()
        >>> ask_name(ScriptedLineSource(["Ada"]), sink)
        'Hello, Ada!'
        >>> sink.output
        'What is your name? Hello, Ada!\\n'
    """
    buffer = InputBuffer(1)
    try:
        if not _collect(source, sink, buffer, prompt):
            return None
        greeting = build_name_greeting(buffer.lines[0])
        sink.write_line(greeting)
        return greeting
    except InputReadError as exc:
        return _report_read_failure(sink, exc)
    finally:
        source.close()


def run_greeting(mode: GreetingMode, source: LineSource, sink: LineSink, *, prompt: str | None = None) -> str | None:
    """Run the use case selected by ``mode``.

    ``prompt=None`` keeps the use case's own default prompt.
    """
    use_case = _USE_CASES[mode]
    if prompt is None:
        return use_case(source, sink)
    return use_case(source, sink, prompt=prompt)


_USE_CASES: dict[GreetingMode, Callable[..., str | None]] = {
    GreetingMode.PAIR: greet_pair,
    GreetingMode.ECHO: echo_line,
    GreetingMode.ASK: ask_name,
}


__all__ = [
    "ask_name",
    "echo_line",
    "greet_pair",
    "run_greeting",
]
