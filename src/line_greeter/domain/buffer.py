"""Append-only line buffer that gates when a greeting may be emitted."""

from __future__ import annotations

from typing import Final

from .errors import InputBufferFullError

#: Number of lines the pair greeting collects.
PAIR_CAPACITY: Final[int] = 2


class InputBuffer:
    """Ordered, append-only collection of received lines with a fixed cap.

    The buffer starts empty, grows one line at a time in arrival order,
    and never shrinks. A greeting is due exactly when :attr:`is_full`
    turns true.

    Args:
        capacity: Maximum number of lines held. Must be positive.

    Raises:
        ValueError: If ``capacity`` is not positive.

    Example:
        >>> buffer = InputBuffer()
        >>> buffer.append("Alice")
        False
        >>> buffer.append("Bob")
        True
        >>> buffer.lines
        ('Alice', 'Bob')
    """

    __slots__ = ("_capacity", "_lines")

    def __init__(self, capacity: int = PAIR_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._lines: list[str] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def lines(self) -> tuple[str, ...]:
        """Snapshot of the collected lines in arrival order."""
        return tuple(self._lines)

    @property
    def is_full(self) -> bool:
        return len(self._lines) == self._capacity

    def append(self, line: str) -> bool:
        """Store ``line`` and report whether the buffer is now full.

        Raises:
            InputBufferFullError: If the buffer already holds ``capacity`` lines.
        """
        if self.is_full:
            raise InputBufferFullError(f"input buffer already holds {self._capacity} line(s)")
        self._lines.append(line)
        return self.is_full

    def __len__(self) -> int:
        return len(self._lines)

    def __repr__(self) -> str:
        return f"InputBuffer(capacity={self._capacity}, lines={self._lines!r})"


__all__ = ["InputBuffer", "PAIR_CAPACITY"]
