"""Reading a file descriptor or binary stream one line at a time."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import BinaryIO, Union

BUFFER_SIZE = 42

Source = Union[int, BinaryIO]

_NEWLINE = b"\n"


class LineReader:
    """Read newline-terminated lines from a descriptor or binary stream.

    Data is read in chunks of ``buffer_size`` bytes. Any bytes past the line
    returned are kept for the next call. Each line keeps its newline, except a
    final line that ends at end of file without one.
    """

    def __init__(self, fd: Source, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(fd, bool):
            raise TypeError("fd must be a file descriptor or a binary stream")
        if isinstance(fd, int):
            if fd < 0:
                raise ValueError(f"file descriptor must not be negative, got {fd}")
        elif not callable(getattr(fd, "read", None)):
            raise TypeError("fd must be a file descriptor or a binary stream")
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError("buffer_size must be an int")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be positive, got {buffer_size}")
        self.fd = fd
        self.buffer_size = buffer_size
        self._buffer = bytearray()

    def _read_chunk(self) -> bytes:
        if isinstance(self.fd, int):
            return os.read(self.fd, self.buffer_size)
        chunk = self.fd.read(self.buffer_size)
        if chunk is None:
            return b""
        if isinstance(chunk, str):
            raise TypeError("stream must be opened in binary mode")
        return bytes(chunk)

    def read_line(self) -> bytes | None:
        """Return the next line, or None once no data is left.

        A read error discards any buffered data and propagates as OSError.
        """
        searched = 0
        while self._buffer.find(_NEWLINE, searched) < 0:
            searched = len(self._buffer)
            try:
                chunk = self._read_chunk()
            except OSError:
                self._buffer.clear()
                raise
            if not chunk:
                break
            self._buffer += chunk
        if not self._buffer:
            return None
        newline = self._buffer.find(_NEWLINE)
        end = len(self._buffer) if newline < 0 else newline + 1
        line = bytes(self._buffer[:end])
        del self._buffer[:end]
        return line

    def __iter__(self) -> Iterator[bytes]:
        return iter(self.read_line, None)