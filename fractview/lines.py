"""Reading a stream one line at a time in fixed-size chunks."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 5


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines without their newlines.

    The stream is read ``buffer_size`` characters (or bytes) at a time;
    whatever follows a returned line is kept for the next call. A final
    line without a trailing newline is still returned.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._pending: Optional[AnyStr] = None

    def read_line(self) -> Optional[AnyStr]:
        """The next line, or ``None`` once the stream is exhausted."""
        pending = self._pending
        while True:
            if pending is not None:
                newline = "\n" if isinstance(pending, str) else b"\n"
                index = pending.find(newline)
                if index >= 0:
                    self._pending = pending[index + 1:]
                    return pending[:index]
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                if pending:
                    self._pending = pending[:0]
                    return pending
                self._pending = pending
                return None
            pending = chunk if pending is None else pending + chunk

    def __iter__(self) -> Iterator[AnyStr]:
        while (line := self.read_line()) is not None:
            yield line