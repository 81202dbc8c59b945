"""A small printf supporting %c %s %p %d %i %u %x %X and %%.

A ``%`` followed by any other character is written out as it stands when more
text follows it; a format that ends inside a conversion is an error.
"""

from __future__ import annotations

import re
import sys
from typing import Any, Callable, Dict, Iterator, Optional, TextIO

from libft.converters import (
    format_address,
    format_char,
    format_decimal,
    format_hex_lower,
    format_hex_upper,
    format_string,
    format_unsigned,
)
from libft.strings import strlen

_PIECE = re.compile(r"[^%]+|%(.?)", re.DOTALL)

_CONVERSIONS: Dict[str, Callable[[Any], str]] = {
    "c": format_char,
    "s": format_string,
    "p": format_address,
    "d": format_decimal,
    "i": format_decimal,
    "u": format_unsigned,
    "x": format_hex_lower,
    "X": format_hex_upper,
}


def _take(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None


def render(fmt: str, *args: Any) -> str:
    """The text the format and arguments produce; extra arguments are ignored."""
    if fmt is None:
        raise TypeError("format must not be None")
    text = fmt[:strlen(fmt)]
    remaining = iter(args)
    pieces = []
    for match in _PIECE.finditer(text):
        spec = match.group(1)
        if spec is None:
            pieces.append(match.group())
        elif spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_take(remaining, spec)))
        elif spec and match.end() < len(text):
            pieces.append(match.group())
        else:
            raise ValueError(f"incomplete conversion at end of format {fmt!r}")
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = render(fmt, *args)
    out = sys.stdout if file is None else file
    out.write(text)
    return len(text)