"""ASCII character classification and case conversion.

Every function accepts either an integer code or a one-character string.
Classifiers return a bool; the case converters return a value of the same
kind they were given.
"""

from __future__ import annotations

from typing import Union

Char = Union[int, str]


def _code(c: Char) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")


def is_alpha(c: Char) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: Char) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: Char) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: Char) -> bool:
    """True for a code in the range 0-127."""
    return 0 <= _code(c) <= 127


def is_print(c: Char) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: Char, low: str, high: str, shift: int) -> Char:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c: Char) -> Char:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    return _convert(c, "A", "Z", ord("a") - ord("A"))


def to_upper(c: Char) -> Char:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    return _convert(c, "a", "z", ord("A") - ord("a"))