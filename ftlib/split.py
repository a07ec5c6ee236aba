"""Splitting text on a single separator character."""

from __future__ import annotations


def split(s: str, sep: str) -> list[str]:
    """Split ``s`` on every ``sep`` and return the non-empty pieces in order.

    Runs of separators, and separators at either end, produce no empty pieces.
    A NUL separator never occurs inside the text, so ``s`` comes back whole
    unless it is empty.
    """
    if not isinstance(s, str):
        raise TypeError(f"s must be a str, not {type(s).__name__}")
    if not isinstance(sep, str):
        raise TypeError(f"sep must be a str, not {type(sep).__name__}")
    if len(sep) != 1:
        raise ValueError(f"sep must be a single character, got {sep!r}")
    return [piece for piece in s.split(sep) if piece]