"""Functions that build new strings from existing ones.

Strings end at their first NUL character, as in a C buffer.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional, Union

from libft.strings import strlen

Text = Union[str, bytes, bytearray]


def _terminated(s: Text) -> Text:
    return s[:strlen(s)]


def strdup(s: Text) -> Text:
    """A copy of ``s`` up to its terminating NUL."""
    return _terminated(s)


def substr(s: Text, start: int, length: int) -> Text:
    """At most ``length`` characters of ``s`` starting at ``start``."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return _terminated(s)[start:start + length]


def strjoin(s1: Text, s2: Text) -> Text:
    """``s1`` followed by ``s2``."""
    return _terminated(s1) + _terminated(s2)


def strtrim(s: Text, charset: Text) -> Text:
    """``s`` without leading and trailing characters found in ``charset``."""
    if s is None or charset is None:
        raise TypeError("strtrim needs a string and a character set")
    return _terminated(s).strip(_terminated(charset))


def split(s: str, sep: str) -> List[str]:
    """The non-empty words of ``s`` separated by the character ``sep``."""
    if s is None:
        raise TypeError("split needs a string")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    text = _terminated(s)
    if sep == "\0":
        return [text] if text else []
    return [word for word in text.split(sep) if word]


def striteri(s: MutableSequence[str], f: Callable[[int, str], Optional[str]]) -> None:
    """Call ``f(index, char)`` on each character before the first NUL, in place.

    ``s`` is a mutable sequence of characters; when ``f`` returns a character
    it replaces the one at that index.
    """
    for index, ch in enumerate(s):
        if ch == "\0":
            break
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string made of ``f(index, char)`` for each character of ``s``."""
    if s is None or f is None:
        raise TypeError("strmapi needs a string and a function")
    return "".join(f(index, ch) for index, ch in enumerate(_terminated(s)))


def to_upper_even(index: int, c: str) -> str:
    """Upper-case an ASCII letter that sits at an even index."""
    if index % 2 == 0 and "a" <= c <= "z":
        return chr(ord(c) - 32)
    return c