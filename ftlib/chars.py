"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_WHITESPACE = " \n\t\v\f\r"
_INT_BITS = 32


def _code(c: int | str) -> int:
    """Return the integer code of ``c``, which is an int or a one-character str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c


def isalpha(c: int | str) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def isdigit(c: int | str) -> bool:
    """True if ``c`` is an ASCII decimal digit."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def isalnum(c: int | str) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return isalpha(c) or isdigit(c)


def isascii(c: int | str) -> bool:
    """True if ``c`` lies in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def isprint(c: int | str) -> bool:
    """True if ``c`` is a printable ASCII character (space through tilde)."""
    return ord(" ") <= _code(c) <= ord("~")


def tolower(c: int | str) -> int | str:
    """Map an ASCII upper-case letter to lower case; other values pass through.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def toupper(c: int | str) -> int | str:
    """Map an ASCII lower-case letter to upper case; other values pass through.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def _wrap_int(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping around."""
    mask = (1 << _INT_BITS) - 1
    value &= mask
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def atoi(text: str) -> int:
    """Parse a leading decimal integer from ``text``.

    Leading whitespace is skipped, one optional sign is accepted, and digits are
    read until the first non-digit. Text without digits yields 0. The result
    wraps to a signed 32-bit integer as a C ``int`` would.
    """
    if text is None:
        raise TypeError("atoi() argument must be a str, not None")
    stripped = text.lstrip(_WHITESPACE)
    sign = 1
    if stripped[:1] in ("-", "+"):
        if stripped[0] == "-":
            sign = -1
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if not ("0" <= ch <= "9"):
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Return the decimal representation of the integer ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"itoa() argument must be an int, not {type(n).__name__}")
    return f"{n:d}"