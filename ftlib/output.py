"""Writing characters, strings and numbers to streams or file descriptors.

A stream is either an open file object or an integer file descriptor.
"""

from __future__ import annotations

import io
import os
from typing import IO, Union

from ftlib.chars import itoa

Stream = Union[int, IO[str], IO[bytes]]

_ENCODING = "utf-8"


def _write(stream: Stream, text: str) -> None:
    if isinstance(stream, bool):
        raise TypeError("stream must be a file object or a file descriptor")
    if isinstance(stream, int):
        data = memoryview(text.encode(_ENCODING))
        while data:
            written = os.write(stream, data)
            data = data[written:]
        return
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        stream.write(text.encode(_ENCODING))
    else:
        stream.write(text)


def putchar_fd(c: str, stream: Stream) -> None:
    """Write the single character ``c`` to ``stream``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(stream, c)


def putstr_fd(s: str | None, stream: Stream) -> None:
    """Write ``s`` to ``stream``; None writes nothing."""
    if s is None:
        return
    _write(stream, s)


def putendl_fd(s: str | None, stream: Stream) -> None:
    """Write ``s`` followed by a newline to ``stream``; None writes nothing."""
    if s is None:
        return
    _write(stream, s + "\n")


def putnbr_fd(n: int, stream: Stream) -> None:
    """Write the decimal form of the integer ``n`` to ``stream``."""
    _write(stream, itoa(n))