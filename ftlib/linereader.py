"""Reading lines from raw file descriptors through a fixed-size buffer."""

from __future__ import annotations

import os
from typing import Iterator, Optional

BUFFER_SIZE = 32
OPEN_MAX = 1024


class LineReader:
    """Buffered reader that hands out one byte or one line at a time."""

    def __init__(self, fd: int, buffer_size: int = BUFFER_SIZE) -> None:
        if buffer_size <= 0:
            raise ValueError("buffer_size must be positive")
        self.fd = fd
        self.buffer_size = buffer_size
        self._buffer = b""
        self._pos = 0

    def _fill(self) -> bool:
        """Refill the buffer when it is used up; False at end of file."""
        if self._pos < len(self._buffer):
            return True
        data = os.read(self.fd, self.buffer_size)
        self._buffer = data
        self._pos = 0
        return bool(data)

    def getc(self) -> Optional[int]:
        """Return the next byte, or None at end of file."""
        if not self._fill():
            return None
        byte = self._buffer[self._pos]
        self._pos += 1
        return byte

    def readline(self) -> Optional[bytes]:
        """Return the next line with its newline, the final unterminated
        line, or None once nothing is left."""
        line = bytearray()
        while self._fill():
            end = self._buffer.find(b"\n", self._pos)
            if end >= 0:
                line += self._buffer[self._pos : end + 1]
                self._pos = end + 1
                return bytes(line)
            line += self._buffer[self._pos :]
            self._pos = len(self._buffer)
        return bytes(line) if line else None

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.readline()) is not None:
            yield line


_readers: dict[int, LineReader] = {}


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line of ``fd``, keeping buffered data between calls.

    Returns None at end of file.
    """
    if not 0 <= fd < OPEN_MAX:
        raise ValueError(f"file descriptor {fd} out of range")
    reader = _readers.get(fd)
    if reader is None:
        reader = _readers[fd] = LineReader(fd)
    line = reader.readline()
    if line is None:
        del _readers[fd]
    return line