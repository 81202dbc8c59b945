# libft

A small library of low-level text and byte helpers in the style of the C
standard library. It offers ASCII character classification, integer parsing
and printing, byte-buffer operations, NUL-terminated string searching and
copying, string transformation, output to file descriptors, and a minimal
`printf`.

## Installation

```
pip install .
```

To install with the test dependencies:

```
pip install ".[test]"
```

## Modules

| Module | Contents |
| --- | --- |
| `libft.chars` | `is_alpha`, `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_lower`, `to_upper` |
| `libft.numbers` | `atoi`, `itoa` |
| `libft.memory` | `bzero`, `memset`, `memcpy`, `memmove`, `memchr`, `memcmp`, `calloc` |
| `libft.strings` | `strlen`, `strchr`, `strrchr`, `strncmp`, `strnstr`, `strlcpy`, `strlcat` |
| `libft.transform` | `strdup`, `substr`, `strjoin`, `strtrim`, `split`, `striteri`, `strmapi`, `to_upper_even` |
| `libft.output` | `putchar_fd`, `putstr_fd`, `putendl_fd`, `putnbr_fd` |
| `libft.converters` | `format_char`, `format_string`, `format_address`, `format_decimal`, `format_unsigned`, `format_hex_lower`, `format_hex_upper` |
| `libft.printf` | `render`, `printf` |

## Conventions

- Character functions in `libft.chars` take an integer code or a
  one-character string. Classifiers return a `bool`; `to_lower` and
  `to_upper` return the same kind of value they were given.
- String functions treat a NUL character as the end of the string, as a C
  buffer would. They accept `str`, `bytes` or `bytearray` where it makes
  sense, and return positions as indices, with `None` when nothing is found.
- Buffer functions in `libft.memory` write into a `bytearray` or writable
  `memoryview`. A length that reaches past the end of a buffer raises
  `ValueError`; `calloc` raises `OverflowError` when the total size would
  not fit in a `size_t`.
- `strlcpy` and `strlcat` write into a `bytearray` and return the length of
  the string they tried to build, so a result of `dstsize` or more means the
  result was truncated.

## Examples

Parse and print integers:

```python
from libft.numbers import atoi, itoa

atoi("  \t-42abc")   # -42
itoa(-2147483648)    # "-2147483648"
```

Search strings:

```python
from libft.strings import strchr, strncmp

strchr("hello", "l")          # 2
strchr("hello", "z")          # None
strncmp("abc", "abd", 2)      # 0
```

Split and trim strings:

```python
from libft.transform import split, strtrim

split("  hello  world ", " ")   # ["hello", "world"]
strtrim("xxhixx", "x")           # "hi"
```

Work with byte buffers:

```python
from libft.memory import memset, memmove

buf = bytearray(b"abcdef")
memset(buf, ord("z"), 2)         # buf is now b"zzcdef"
memmove(buf, buf[2:], 3)         # buf is now b"cdedef"
```

Write to a file descriptor:

```python
from libft.output import putendl_fd, putnbr_fd

putnbr_fd(-42, 1)        # writes "-42" to standard output
putendl_fd("done", 1)    # writes "done\n"
```

## Formatted output

`libft.printf.render` returns the formatted text, and `libft.printf.printf`
writes it to a text stream (standard output unless `file=` is given) and
returns the number of characters written. The supported conversions are:

| Conversion | Argument |
| --- | --- |
| `%c` | a one-character string, or an int whose low byte is used |
| `%s` | a string, or `None` for `(null)` |
| `%p` | an int address in hex after `0x`, or `None`/0 for `(nil)` |
| `%d`, `%i` | an int, taken as a 32-bit signed value |
| `%u` | an int, taken as a 32-bit unsigned value |
| `%x`, `%X` | an int, as 32-bit unsigned hexadecimal |
| `%%` | a literal `%` |

A `%` followed by any other character is written out as it stands when more
text follows it. A format that ends inside a conversion raises `ValueError`;
too few arguments raise `TypeError`; extra arguments are ignored.

```python
from libft.printf import render, printf

render("%s is %d years old (%x)", "Ada", 36, 255)
# "Ada is 36 years old (ff)"

printf("%c%c%c\n", "a", "b", "c")   # writes "abc\n", returns 4
```

## What it does not do

This is a library only: it installs no command-line program. `printf` has no
field widths, precision, flags or length modifiers.

## Running the tests

```
pytest
```