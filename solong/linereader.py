"""Buffered line-by-line reading from a text or binary stream."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator

DEFAULT_BUFFER_SIZE = 10


class LineReader(Generic[AnyStr]):
    """Read a stream one line at a time, ``buffer_size`` units per read.

    Lines keep their trailing newline; the last line may lack one. Data read
    past the end of a line is kept for the next call.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: AnyStr | None = None
        self._separator: AnyStr | None = None

    def read_line(self) -> AnyStr | None:
        """Return the next line, or None when the stream is exhausted.

        A read error discards any buffered data and propagates.
        """
        pending = self._pending
        self._pending = None
        while pending is None or self._separator not in pending:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            if self._separator is None:
                self._separator = "\n" if isinstance(chunk, str) else b"\n"
            pending = chunk if pending is None else pending + chunk
        if not pending:
            return None
        end = pending.find(self._separator)
        if end < 0:
            return pending
        line, rest = pending[:end + 1], pending[end + 1:]
        self._pending = rest or None
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        return iter(self.read_line, None)