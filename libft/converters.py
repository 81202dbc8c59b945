"""Text for the individual conversions of the formatter.

Integers are reduced to the width of the C type they stand for: ``%d`` takes
a 32-bit signed value, ``%u``, ``%x`` and ``%X`` a 32-bit unsigned one, and
``%p`` a 64-bit address.
"""

from __future__ import annotations

from typing import Optional, Union

from libft.strings import strlen

_UINT_MASK = 0xFFFF_FFFF
_INT_OFFSET = 0x8000_0000
_ADDRESS_MASK = 0xFFFF_FFFF_FFFF_FFFF

NULL_STRING = "(null)"
NULL_ADDRESS = "(nil)"
ADDRESS_PREFIX = "0x"


def _as_int(n: int) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return n


def format_char(c: Union[str, int]) -> str:
    """One character; an int gives the character of its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_as_int(c) & 0xFF)


def format_string(s: Optional[str]) -> str:
    """The string up to its first NUL, or ``(null)`` for None."""
    if s is None:
        return NULL_STRING
    if not isinstance(s, str):
        raise TypeError(f"expected a str, got {type(s).__name__}")
    return s[:strlen(s)]


def format_address(address: Optional[int]) -> str:
    """An address in lower-case hexadecimal after ``0x``, or ``(nil)`` for null."""
    if address is None:
        return NULL_ADDRESS
    value = _as_int(address) & _ADDRESS_MASK
    if not value:
        return NULL_ADDRESS
    return ADDRESS_PREFIX + format(value, "x")


def format_decimal(n: int) -> str:
    """A 32-bit signed integer in decimal."""
    value = ((_as_int(n) + _INT_OFFSET) & _UINT_MASK) - _INT_OFFSET
    return str(value)


def format_unsigned(n: int) -> str:
    """A 32-bit unsigned integer in decimal."""
    return str(_as_int(n) & _UINT_MASK)


def format_hex_lower(n: int) -> str:
    """A 32-bit unsigned integer in lower-case hexadecimal."""
    return format(_as_int(n) & _UINT_MASK, "x")


def format_hex_upper(n: int) -> str:
    """A 32-bit unsigned integer in upper-case hexadecimal."""
    return format(_as_int(n) & _UINT_MASK, "X")