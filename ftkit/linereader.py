"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Iterator, List, Optional

BUFFER_SIZE = 100


class LineReader:
    """Reads lines from a text or binary stream, ``buffer_size`` units per read.

    Lines are returned without their newline. A final line without a
    newline is returned as well; once the stream is exhausted
    ``read_line`` returns ``None``.
    """

    def __init__(self, stream: IO, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an integer")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending = None
        self._newline = None

    def read_line(self) -> Optional[AnyStr]:
        """The next line without its newline, or ``None`` at end of stream."""
        while True:
            if self._pending is not None:
                index = self._pending.find(self._newline)
                if index >= 0:
                    line = self._pending[:index]
                    self._pending = self._pending[index + 1 :]
                    return line
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                rest, self._pending = self._pending, None
                return rest if rest else None
            if self._pending is None:
                self._newline = "\n" if isinstance(chunk, str) else b"\n"
                self._pending = chunk
            else:
                self._pending += chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(stream: IO) -> List[AnyStr]:
    """All remaining lines of ``stream``, without newlines."""
    return list(LineReader(stream))