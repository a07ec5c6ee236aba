"""String helpers: searching, copying, comparing, slicing and transforming text.

Positions are returned as indices into the string, or None where nothing is found.
"""

from __future__ import annotations

from collections.abc import Callable
from itertools import islice, zip_longest

_NUL = "\0"


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a str, not {type(value).__name__}")
    return value


def _as_char(c: int | str) -> str:
    """Return ``c`` as a one-character string; ints are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c & 0xFF)


def strlen(s: str) -> int:
    """Return the number of characters in ``s``."""
    return len(_require_str(s, "s"))


def strchr(s: str, c: int | str) -> int | None:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for the NUL character yields ``len(s)``, the terminator's position.
    """
    _require_str(s, "s")
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: int | str) -> int | None:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for the NUL character yields ``len(s)``, the terminator's position.
    """
    _require_str(s, "s")
    ch = _as_char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strnstr(big: str, little: str, length: int) -> int | None:
    """Return the index of ``little`` within the first ``length`` characters of ``big``.

    An empty ``little`` matches at index 0. Returns None if there is no match.
    """
    _require_str(big, "big")
    _require_str(little, "little")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    if not little:
        return 0
    index = big.find(little, 0, min(length, len(big)))
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(_require_str(s, "s"))


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the text that fits (at most ``size - 1`` characters) and the full
    length of ``src``; a copy is truncated exactly when that length is not less
    than ``size``.
    """
    _require_str(src, "src")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length it tried to create. When ``size``
    does not exceed ``len(dest)``, ``dest`` is left alone and the length
    reported is ``size + len(src)``.
    """
    _require_str(dest, "dest")
    _require_str(src, "src")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size <= len(dest):
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters of ``s1`` and ``s2``.

    Returns the difference of the first unequal character codes, where the end
    of a string counts as code 0, or 0 if the compared parts are equal.
    """
    _require_str(s1, "s1")
    _require_str(s2, "s2")
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for a, b in islice(zip_longest(s1, s2, fillvalue=_NUL), n):
        if a != b:
            return ord(a) - ord(b)
        if a == _NUL:
            break
    return 0


def substr(s: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A ``start`` past the end of ``s`` gives an empty string.
    """
    _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s) or length == 0:
        return ""
    return s[start : start + length]


def strjoin(s1: str | None, s2: str | None) -> str:
    """Return ``s1`` followed by ``s2``; a missing side counts as empty.

    Raises TypeError when both sides are missing.
    """
    if s1 is None and s2 is None:
        raise TypeError("strjoin() needs at least one string")
    first = "" if s1 is None else _require_str(s1, "s1")
    second = "" if s2 is None else _require_str(s2, "s2")
    return first + second


def strtrim(s: str, chars: str) -> str:
    """Remove every character in ``chars`` from both ends of ``s``."""
    _require_str(s, "s")
    _require_str(chars, "chars")
    if not chars:
        return s
    return s.strip(chars)


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Return a new string whose characters are ``f(index, char)`` for each one of ``s``."""
    _require_str(s, "s")

    def mapped(index: int, ch: str) -> str:
        result = f(index, ch)
        if not isinstance(result, str) or len(result) != 1:
            raise ValueError(f"mapping function must return one character, got {result!r}")
        return result

    return "".join(mapped(i, ch) for i, ch in enumerate(s))


def striteri(s: str, f: Callable[[int, str], str | None] | None) -> str:
    """Call ``f(index, char)`` on each character of ``s`` in order.

    ``f`` may return a replacement character or None to keep the original; the
    text after all calls is returned. Without ``f`` the text is returned as is.
    """
    _require_str(s, "s")
    if f is None:
        return s
    chars = list(s)
    for index, ch in enumerate(s):
        replacement = f(index, ch)
        if replacement is None:
            continue
        if not isinstance(replacement, str) or len(replacement) != 1:
            raise ValueError(f"function must return one character or None, got {replacement!r}")
        chars[index] = replacement
    return "".join(chars)