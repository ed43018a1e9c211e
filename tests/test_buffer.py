"""InputBuffer stories: ordering, capacity, and the full signal."""

from __future__ import annotations

import pytest

from line_greeter.domain.buffer import PAIR_CAPACITY, InputBuffer
from line_greeter.domain.errors import InputBufferFullError


@pytest.mark.os_agnostic
def test_new_buffer_is_empty_with_pair_capacity() -> None:
    buffer = InputBuffer()

    assert len(buffer) == 0
    assert buffer.capacity == PAIR_CAPACITY == 2
    assert buffer.lines == ()
    assert buffer.is_full is False


@pytest.mark.os_agnostic
def test_append_reports_full_only_on_second_line() -> None:
    buffer = InputBuffer()

    assert buffer.append("first") is False
    assert buffer.append("second") is True
    assert buffer.is_full is True


@pytest.mark.os_agnostic
def test_lines_keep_arrival_order() -> None:
    buffer = InputBuffer()
    buffer.append("Bob")
    buffer.append("Alice")

    assert buffer.lines == ("Bob", "Alice")


@pytest.mark.os_agnostic
def test_append_beyond_capacity_raises_and_keeps_contents() -> None:
    buffer = InputBuffer()
    buffer.append("a")
    buffer.append("b")

    with pytest.raises(InputBufferFullError, match="already holds 2"):
        buffer.append("c")

    assert buffer.lines == ("a", "b")


@pytest.mark.os_agnostic
def test_lines_snapshot_is_detached_from_buffer() -> None:
    buffer = InputBuffer()
    buffer.append("a")
    snapshot = buffer.lines
    buffer.append("b")

    assert snapshot == ("a",)


@pytest.mark.os_agnostic
def test_single_line_buffer_fills_on_first_append() -> None:
    buffer = InputBuffer(1)

    assert buffer.append("only") is True


@pytest.mark.os_agnostic
@pytest.mark.parametrize("capacity", [0, -1])
def test_non_positive_capacity_is_rejected(capacity: int) -> None:
    with pytest.raises(ValueError, match="capacity must be positive"):
        InputBuffer(capacity)


@pytest.mark.os_agnostic
def test_full_error_is_value_error() -> None:
    assert issubclass(InputBufferFullError, ValueError)


@pytest.mark.os_agnostic
def test_repr_shows_capacity_and_lines() -> None:
    buffer = InputBuffer()
    buffer.append("x")

    assert repr(buffer) == "InputBuffer(capacity=2, lines=['x'])"
