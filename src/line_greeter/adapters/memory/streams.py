"""In-memory line source and sink for testing.

Contents:
    * :class:`ScriptedLineSource` - Replays a fixed list of lines, optionally failing.
    * :class:`RecordingLineSink` - Captures everything written.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field


class ScriptedLineSource:
    """Replay ``lines`` in order, then end-of-stream or ``fail_with``.

    Args:
        lines: Lines to hand out, without terminators.
        fail_with: Raised by every read after ``lines`` run out,
            instead of reporting end-of-stream.

    Attributes:
        reads: Number of :meth:`read_line` calls made.
        closed: Whether :meth:`close` was called.

    Example:
        >>> source = ScriptedLineSource(["a", "b", "c"])
        >>> source.read_line(), source.read_line()
        ('a', 'b')
        >>> source.close()
        >>> source.read_line() is None
        True
        >>> source.remaining
        ('c',)
    """

    def __init__(self, lines: Iterable[str] = (), *, fail_with: Exception | None = None) -> None:
        self._pending = list(lines)
        self._fail_with = fail_with
        self.reads = 0
        self.closed = False

    @property
    def remaining(self) -> tuple[str, ...]:
        """Lines never handed out."""
        return tuple(self._pending)

    def read_line(self) -> str | None:
        self.reads += 1
        if self.closed:
            return None
        if self._pending:
            return self._pending.pop(0)
        if self._fail_with is not None:
            raise self._fail_with
        return None

    def close(self) -> None:
        self.closed = True


def _empty_chunks() -> list[str]:
    return []


@dataclass
class RecordingLineSink:
    """Collect writes for assertions.

    Example:
        >>> sink = RecordingLineSink()
        >>> sink.write("> ")
        >>> sink.write_line("Hello, a and b")
        >>> sink.output
        '> Hello, a and b\\n'
    """

    chunks: list[str] = field(default_factory=_empty_chunks)

    @property
    def output(self) -> str:
        return "".join(self.chunks)

    def write(self, text: str) -> None:
        self.chunks.append(text)

    def write_line(self, text: str) -> None:
        self.chunks.append(text + "\n")



__all__ = [
    "RecordingLineSink",
    "ScriptedLineSource",
]
