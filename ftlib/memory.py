"""Byte-buffer helpers: filling, searching, comparing and copying."""

from __future__ import annotations

import sys

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers: bytes | bytearray) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"byte count {n} exceeds buffer length {len(buf)}")


def bzero(buf: bytearray, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero, in place."""
    _check_count(n, buf)
    buf[:n] = bytes(n)


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zero-filled buffer for ``nmemb`` items of ``size`` bytes each.

    Raises MemoryError when the total size would overflow ``SIZE_MAX``.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("item count and size must not be negative")
    if nmemb == 0 or size == 0:
        return bytearray()
    if nmemb > SIZE_MAX // size:
        raise MemoryError(f"cannot allocate {nmemb} items of {size} bytes")
    return bytearray(nmemb * size)


def memchr(data: bytes | bytearray, c: int, n: int) -> int | None:
    """Return the index of the first byte equal to ``c`` in the first ``n`` bytes.

    ``c`` is taken modulo 256. Returns None if the byte is not found.
    """
    _check_count(n, data)
    index = data.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(a: bytes | bytearray, b: bytes | bytearray, n: int) -> int:
    """Compare the first ``n`` bytes of ``a`` and ``b``.

    Returns the difference of the first pair of unequal bytes, or 0.
    """
    _check_count(n, a, b)
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def memcpy(dest: bytearray, src: bytes | bytearray, n: int) -> bytearray:
    """Copy the first ``n`` bytes of ``src`` to the start of ``dest``; return ``dest``."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest: int, src: int, n: int) -> bytearray:
    """Copy ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dest``.

    Overlapping regions are handled correctly. Returns ``buf``.
    """
    if n < 0 or dest < 0 or src < 0:
        raise ValueError("offsets and byte count must not be negative")
    if max(dest, src) + n > len(buf):
        raise ValueError("region extends past the end of the buffer")
    if dest != src and n:
        buf[dest:dest + n] = buf[src:src + n]
    return buf


def memset(buf: bytearray, c: int, n: int) -> bytearray:
    """Fill the first ``n`` bytes of ``buf`` with ``c`` modulo 256; return ``buf``."""
    _check_count(n, buf)
    buf[:n] = bytes([c & 0xFF]) * n
    return buf