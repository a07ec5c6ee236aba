"""A small printf: formats ``%c %s %p %d %i %u %x %X`` and ``%%``.

A ``%`` followed by any other character prints nothing for the ``%`` and
leaves the character to be printed as ordinary text. A ``%`` at the very end
of the template prints nothing.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

from ftlib.output import Stream, putstr_fd

_CONVERSIONS = "cspdiuxX"
_INT_BITS = 32
_UINT_MASK = (1 << _INT_BITS) - 1
_ENCODING = "utf-8"


def _to_int(value: Any, spec: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"%{spec} needs an int, not {type(value).__name__}")
    return value


def _signed(value: int) -> int:
    value &= _UINT_MASK
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return value


def _render_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    return chr(_to_int(value, "c") & 0xFF)


def _render_str(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError(f"%s needs a str or None, not {type(value).__name__}")
    return value


def _render_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    if isinstance(value, int) and not isinstance(value, bool):
        if value < 0:
            raise ValueError(f"%p needs a non-negative address, got {value}")
        address = value
    else:
        address = id(value)
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _render(spec: str, value: Any) -> str:
    if spec == "c":
        return _render_char(value)
    if spec == "s":
        return _render_str(value)
    if spec == "p":
        return _render_pointer(value)
    if spec in "di":
        return str(_signed(_to_int(value, spec)))
    number = _to_int(value, spec) & _UINT_MASK
    if spec == "u":
        return str(number)
    if spec == "x":
        return f"{number:x}"
    return f"{number:X}"


def _pieces(template: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    pos = 0
    end = len(template)
    while pos < end:
        percent = template.find("%", pos)
        if percent < 0:
            yield template[pos:]
            return
        if percent > pos:
            yield template[pos:percent]
        pos = percent + 1
        if pos >= end:
            return
        spec = template[pos]
        if spec == "%":
            yield "%"
            pos += 1
        elif spec in _CONVERSIONS:
            try:
                value = next(remaining)
            except StopIteration:
                raise TypeError(
                    f"not enough arguments for conversion %{spec}"
                ) from None
            yield _render(spec, value)
            pos += 1


def format(template: str, *args: Any) -> str:
    """Return ``template`` with its conversions replaced by ``args`` in order.

    Integers for ``%d`` and ``%i`` wrap to signed 32 bits, those for ``%u``,
    ``%x`` and ``%X`` to unsigned 32 bits. Surplus arguments are ignored; too
    few raise TypeError.
    """
    if not isinstance(template, str):
        raise TypeError(f"template must be a str, not {type(template).__name__}")
    return "".join(_pieces(template, args))


def printf(template: str, *args: Any, stream: Stream | None = None) -> int:
    """Write the formatted text to ``stream`` (standard output by default).

    Returns the number of bytes written.
    """
    text = format(template, *args)
    putstr_fd(text, sys.stdout if stream is None else stream)
    return len(text.encode(_ENCODING))