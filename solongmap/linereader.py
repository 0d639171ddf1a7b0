"""Reading a stream one line at a time through a fixed-size read buffer."""

from __future__ import annotations

from typing import IO, AnyStr, Generic, Iterator, Optional

DEFAULT_BUFFER_SIZE = 1000


class LineReader(Generic[AnyStr]):
    """Split a text or binary stream into lines, newline kept.

    Data is read buffer_size units at a time. A final line without a newline
    is returned as it is.
    """

    def __init__(self, stream: IO[AnyStr], buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._left: Optional[AnyStr] = None

    @staticmethod
    def _newline(data: AnyStr) -> AnyStr:
        return b"\n" if isinstance(data, bytes) else "\n"  # type: ignore[return-value]

    def _newline_at(self) -> int:
        if self._left is None:
            return -1
        return self._left.find(self._newline(self._left))

    def read_line(self) -> Optional[AnyStr]:
        """Return the next line, or None when the stream holds no more data."""
        while self._newline_at() < 0:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._left = chunk if self._left is None else self._left + chunk
        if not self._left:
            return None
        index = self._newline_at()
        if index < 0:
            line = self._left
            self._left = line[:0]
        else:
            line = self._left[: index + 1]
            self._left = self._left[index + 1 :]
        return line

    def __iter__(self) -> Iterator[AnyStr]:
        while True:
            line = self.read_line()
            if line is None:
                return
            yield line


def read_lines(path: str) -> list[str]:
    """Read every line of the file at path, newlines kept and untranslated."""
    with open(path, "r", encoding="latin-1", newline="") as handle:
        return list(LineReader(handle))