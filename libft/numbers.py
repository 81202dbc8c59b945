"""Conversions between decimal text and integers."""

from __future__ import annotations

import re

_SPACE = " \t\n\v\f\r"
_DIGITS = re.compile(r"[0-9]*")


def atoi(text: str) -> int:
    """Parse a decimal integer after optional whitespace and one sign.

    Parsing stops at the first character that is not a digit; text with no
    digits gives 0.
    """
    body = text.lstrip(_SPACE)
    sign = 1
    if body[:1] in ("+", "-"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    digits = _DIGITS.match(body).group()
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading '-' when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)