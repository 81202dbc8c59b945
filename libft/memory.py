"""Operations on raw byte buffers.

Buffers that are written to must be mutable (bytearray or a writable
memoryview). A length that reaches past the end of a buffer raises
ValueError.
"""

from __future__ import annotations

import sys
from typing import Optional, Union

Buffer = Union[bytes, bytearray, memoryview]

_SIZE_MAX = sys.maxsize * 2 + 1


def _check_span(buf: Buffer, n: int) -> None:
    if n < 0:
        raise ValueError(f"length must not be negative, got {n}")
    if n > len(buf):
        raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: Union[bytearray, memoryview], c: int, length: int) -> Union[bytearray, memoryview]:
    """Fill the first ``length`` bytes with the low byte of ``c``; return ``buf``."""
    _check_span(buf, length)
    buf[:length] = bytes([c & 0xFF]) * length
    return buf


def bzero(buf: Union[bytearray, memoryview], n: int) -> None:
    """Set the first ``n`` bytes to zero."""
    memset(buf, 0, n)


def memcpy(dst: Union[bytearray, memoryview], src: Buffer, n: int) -> Union[bytearray, memoryview]:
    """Copy ``n`` bytes from ``src`` into ``dst``; return ``dst``."""
    _check_span(dst, n)
    _check_span(src, n)
    dst[:n] = src[:n]
    return dst


def memmove(dst: Union[bytearray, memoryview], src: Buffer, length: int) -> Union[bytearray, memoryview]:
    """Copy ``length`` bytes even when the two regions overlap; return ``dst``."""
    _check_span(dst, length)
    _check_span(src, length)
    dst[:length] = bytes(src[:length])
    return dst


def memchr(buf: Buffer, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to the low byte of ``c`` among the first ``n``."""
    _check_span(buf, n)
    index = bytes(buf[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1: Buffer, s2: Buffer, n: int) -> int:
    """Difference of the first differing bytes among the first ``n``, else 0."""
    _check_span(s1, n)
    _check_span(s2, n)
    for a, b in zip(bytes(s1[:n]), bytes(s2[:n])):
        if a != b:
            return a - b
    return 0


def calloc(count: int, size: int) -> bytearray:
    """A zero-filled buffer of ``count * size`` bytes.

    Raises OverflowError when the total size does not fit in a size_t.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > _SIZE_MAX // size:
        raise OverflowError(f"{count} * {size} bytes overflows the address space")
    return bytearray(count * size)