"""NUL-terminated string operations.

Strings may be str, bytes or bytearray. A NUL character ends a string, as it
would in a C buffer; everything after it is ignored. Positions are returned as
indices, with None where nothing is found.
"""

from __future__ import annotations

from typing import Optional, Union

Text = Union[str, bytes, bytearray]

_NULS = ("\0", b"\0")


def _terminated(s: Text) -> Text:
    end = s.find("\0" if isinstance(s, str) else b"\0")
    return s if end < 0 else s[:end]


def _codes(s: Text) -> list:
    if isinstance(s, str):
        return [ord(ch) for ch in s]
    return list(s)


def _target(s: Text, c: Union[int, str, bytes]) -> Text:
    if isinstance(s, str):
        if isinstance(c, str):
            if len(c) != 1:
                raise ValueError(f"expected a single character, got {c!r}")
            return c
        return chr(c & 0xFF)
    if isinstance(c, int):
        return bytes([c & 0xFF])
    if isinstance(c, str):
        c = c.encode("latin-1")
    if len(c) != 1:
        raise ValueError(f"expected a single byte, got {c!r}")
    return bytes(c)


def strlen(s: Text) -> int:
    """Number of characters before the first NUL."""
    return len(_terminated(s))


def strchr(s: Text, c: Union[int, str, bytes]) -> Optional[int]:
    """Index of the first ``c``; searching for NUL gives the string's length."""
    text = _terminated(s)
    target = _target(s, c)
    if target in _NULS:
        return len(text)
    index = text.find(target)
    return None if index < 0 else index


def strrchr(s: Text, c: Union[int, str, bytes]) -> Optional[int]:
    """Index of the last ``c``; searching for NUL gives the string's length."""
    text = _terminated(s)
    target = _target(s, c)
    if target in _NULS:
        return len(text)
    index = text.rfind(target)
    return None if index < 0 else index


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    first = _codes(_terminated(s1)) + [0]
    second = _codes(_terminated(s2)) + [0]
    for a, b in zip(first[:n], second[:n]):
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: Text, little: Text, length: int) -> Optional[int]:
    """Index of ``little`` lying wholly within the first ``length`` characters of ``big``."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    needle = _terminated(little)
    if not needle:
        return 0
    index = _terminated(big).find(needle, 0, length)
    return None if index < 0 else index


def _check_capacity(dst: bytearray, dstsize: int) -> None:
    if dstsize < 0:
        raise ValueError(f"dstsize must not be negative, got {dstsize}")
    if dstsize > len(dst):
        raise ValueError(f"dstsize {dstsize} exceeds buffer of size {len(dst)}")


def strlcpy(dst: bytearray, src: Optional[Union[bytes, bytearray]], dstsize: int) -> int:
    """Copy ``src`` into ``dst`` as a NUL-terminated string of at most ``dstsize`` bytes.

    Returns the length of ``src``; a result of ``dstsize`` or more means the
    copy was truncated.
    """
    if src is None:
        return 0
    _check_capacity(dst, dstsize)
    source = _terminated(src)
    if dstsize > 0:
        count = min(len(source), dstsize - 1)
        dst[:count] = source[:count]
        dst[count] = 0
    return len(source)


def strlcat(dst: bytearray, src: Union[bytes, bytearray], dstsize: int) -> int:
    """Append ``src`` to the string in ``dst`` within ``dstsize`` bytes in all.

    Returns the length of the string it tried to build.
    """
    dst_len = strlen(dst)
    source = _terminated(src)
    if dstsize <= dst_len:
        return dstsize + len(source)
    _check_capacity(dst, dstsize)
    count = min(len(source), dstsize - dst_len - 1)
    dst[dst_len:dst_len + count] = source[:count]
    dst[dst_len + count] = 0
    return dst_len + len(source)