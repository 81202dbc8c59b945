"""Writing characters, strings and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Optional, Union

from libft.strings import strlen


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def _encode(s: Union[str, bytes, bytearray]) -> bytes:
    text = s[:strlen(s)]
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def putchar_fd(c: Union[str, int], fd: int) -> None:
    """Write one character; an int is written as its low byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    else:
        data = bytes([c & 0xFF])
    _write_all(fd, data)


def putstr_fd(s: Optional[Union[str, bytes, bytearray]], fd: int) -> None:
    """Write a string up to its first NUL; None writes nothing."""
    if s is None:
        return
    _write_all(fd, _encode(s))


def putendl_fd(s: Optional[Union[str, bytes, bytearray]], fd: int) -> None:
    """Write a string followed by a newline; None writes nothing."""
    if s is None:
        return
    _write_all(fd, _encode(s) + b"\n")


def putnbr_fd(n: int, fd: int) -> None:
    """Write an integer in decimal."""
    _write_all(fd, str(int(n)).encode("ascii"))