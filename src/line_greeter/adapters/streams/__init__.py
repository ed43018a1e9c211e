"""Stream adapter - standard input and output as line ports.

Contents:
    * :mod:`.text` - Text-stream line source and click-echo line sink
"""

from __future__ import annotations

from .text import EchoLineSink, TextStreamLineSource, open_stdin_source, open_stdout_sink

__all__ = [
    "EchoLineSink",
    "TextStreamLineSource",
    "open_stdin_source",
    "open_stdout_sink",
]
