"""Line-at-a-time reading from a text stream."""

from __future__ import annotations

from typing import Iterator, Optional, TextIO

BUFFER_SIZE = 10024


class LineReader:
    """Read a text stream one line at a time, in chunks of buffer_size.

    Each line keeps its trailing newline; a final line without one is
    returned as it is. Text already read past the current line is kept
    for the next call.
    """

    def __init__(self, stream: TextIO, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self._stream = stream
        self._buffer_size = buffer_size
        self._saved = ""

    def _fill(self) -> None:
        while "\n" not in self._saved:
            chunk = self._stream.read(self._buffer_size)
            if not chunk:
                break
            self._saved += chunk

    def read_line(self) -> Optional[str]:
        """The next line, or None once the stream is exhausted."""
        self._fill()
        if not self._saved:
            return None
        end = self._saved.find("\n")
        cut = len(self._saved) if end < 0 else end + 1
        line, self._saved = self._saved[:cut], self._saved[cut:]
        return line

    def __iter__(self) -> Iterator[str]:
        return self

    def __next__(self) -> str:
        line = self.read_line()
        if line is None:
            raise StopIteration
        return line