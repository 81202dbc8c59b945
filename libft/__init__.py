"""C-style character, number, memory, string and formatted-output helpers."""

__version__ = "0.1.0"

__all__ = [
    "chars",
    "converters",
    "memory",
    "numbers",
    "output",
    "printf",
    "strings",
    "transform",
]