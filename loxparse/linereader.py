"""Buffered line-by-line reading from a stream."""

from __future__ import annotations

from typing import AnyStr, Generic, IO, Iterator, Optional

BUFFER_SIZE = 69


class LineReader(Generic[AnyStr]):
    """Read a stream one line at a time using fixed-size reads.

    Each line keeps its trailing newline; the last line of a stream that
    does not end in a newline is returned without one.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._buffer: Optional[AnyStr] = None

    def _read_chunk(self) -> AnyStr:
        try:
            chunk = self._stream.read(self._buffer_size)
        except BaseException:
            self._buffer = None
            raise
        if self._buffer is None:
            self._buffer = chunk[:0]
        return chunk

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None once the stream is exhausted."""
        if not self._buffer:
            chunk = self._read_chunk()
            if not chunk:
                self._buffer = None
                return None
            self._buffer = chunk
        newline = "\n" if isinstance(self._buffer, str) else b"\n"
        while True:
            pos = self._buffer.find(newline)  # type: ignore[arg-type]
            if pos != -1:
                line = self._buffer[: pos + 1]
                self._buffer = self._buffer[pos + 1 :]
                return line
            chunk = self._read_chunk()
            if not chunk:
                line = self._buffer
                self._buffer = line[:0]
                return line
            self._buffer += chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line