"""Read a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

BUFF_SIZE = 10


def _split_line(chunk: Any) -> tuple[Any, bool, Any]:
    """Split ``chunk`` at its first newline into (head, newline found, tail)."""
    newline = b"\n" if isinstance(chunk, (bytes, bytearray)) else "\n"
    head, sep, tail = chunk.partition(newline)
    return head, bool(sep), tail


class LineReader:
    """Returns lines from streams, keeping leftover data for each stream."""

    def __init__(self, buffer_size: int = BUFF_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer size must be positive")
        self.buffer_size = buffer_size
        self._pending: dict[Any, Any] = {}

    def _keep(self, stream: Any, tail: Any) -> None:
        if tail:
            self._pending[stream] = tail

    def next_line(self, stream: Any) -> Any:
        """Return the next line of ``stream`` without its newline, or None at the end."""
        line = None
        pending = self._pending.pop(stream, None)
        if pending:
            head, found, tail = _split_line(pending)
            if found:
                self._keep(stream, tail)
                return head
            line = head
        while True:
            chunk = stream.read(self.buffer_size)
            if not chunk:
                break
            head, found, tail = _split_line(chunk)
            line = head if line is None else line + head
            if found:
                self._keep(stream, tail)
                break
        return line


def read_lines(stream: Any, buffer_size: int = BUFF_SIZE) -> Iterator[Any]:
    """Yield every line of ``stream`` without its newline."""
    reader = LineReader(buffer_size)
    while (line := reader.next_line(stream)) is not None:
        yield line