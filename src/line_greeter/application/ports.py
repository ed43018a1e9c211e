"""Application ports: callable Protocol definitions for adapter functions.

Each Protocol class defines a ``__call__`` method whose signature exactly
matches the corresponding adapter function.  Existing module-level functions
satisfy these protocols automatically via structural subtyping (PEP 544).
:class:`LineSource` and :class:`LineSink` describe the stream objects the
greeting use cases talk to.

System Role:
    Sits between domain and adapters.  Infrastructure types (``Config``,
    ``GreeterConfig``) are imported under ``TYPE_CHECKING`` only so that
    import-linter layer contracts remain satisfied at runtime.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

from ..domain.enums import OutputFormat

if TYPE_CHECKING:
    from lib_layered_config import Config

    from ..adapters.config.greeter import GreeterConfig


class LineSource(Protocol):
    """Blocking source of text lines, read one at a time."""

    def read_line(self) -> str | None:
        """Return the next line without its terminator, or ``None`` at end-of-stream.

        Raises:
            InputReadError: If the underlying stream cannot be read.
        """
        ...

    def close(self) -> None:
        """Stop reading and release the underlying stream."""
        ...


class LineSink(Protocol):
    """Destination for greeting output."""

    def write(self, text: str) -> None:
        """Write ``text`` without a line terminator (prompts)."""
        ...

    def write_line(self, text: str) -> None:
        """Write ``text`` followed by a line terminator."""
        ...


class OpenLineSource(Protocol):
    """Open the line source a command reads from."""

    def __call__(self) -> LineSource: ...


class OpenLineSink(Protocol):
    """Open the line sink a command writes to."""

    def __call__(self) -> LineSink: ...


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class DisplayConfig(Protocol):
    """Display the provided configuration in the requested format."""

    def __call__(
        self, config: Config, *, output_format: OutputFormat = ..., section: str | None = ..., profile: str | None = ...
    ) -> None: ...


class LoadGreeterConfig(Protocol):
    """Parse the ``[greeter]`` section of a loaded configuration."""

    def __call__(self, config: Config) -> GreeterConfig: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


__all__ = [
    "DisplayConfig",
    "GetConfig",
    "InitLogging",
    "LineSink",
    "LineSource",
    "LoadGreeterConfig",
    "OpenLineSink",
    "OpenLineSource",
]
