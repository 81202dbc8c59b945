import pytest

from libft.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

CODES = range(-5, 300)


def _ascii_char(code):
    return chr(code) if 0 <= code < 128 else None


@pytest.mark.parametrize("code", CODES)
def test_is_alpha_matches_ascii_letters(code):
    ch = _ascii_char(code)
    assert is_alpha(code) == (ch is not None and ch.isalpha())


@pytest.mark.parametrize("code", CODES)
def test_is_digit_matches_ascii_digits(code):
    ch = _ascii_char(code)
    assert is_digit(code) == (ch is not None and ch.isdigit())


@pytest.mark.parametrize("code", CODES)
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", CODES)
def test_is_ascii_range(code):
    assert is_ascii(code) == (_ascii_char(code) is not None)


@pytest.mark.parametrize("code", CODES)
def test_is_print_matches_printable_ascii(code):
    ch = _ascii_char(code)
    assert is_print(code) == (ch is not None and ch.isprintable())


@pytest.mark.parametrize("code", range(0, 128))
def test_case_conversion_matches_ascii(code):
    ch = chr(code)
    assert to_lower(code) == ord(ch.lower())
    assert to_upper(code) == ord(ch.upper())


@pytest.mark.parametrize("code", [-1, 128, 200, 255, 1000])
def test_case_conversion_leaves_non_ascii(code):
    assert to_lower(code) == code
    assert to_upper(code) == code


def test_string_input_gives_string_output():
    assert to_upper("a") == "A"
    assert to_lower("Q") == "q"
    assert to_upper("!") == "!"


def test_string_classifiers():
    assert is_alpha("z") is True
    assert is_digit("x") is False
    assert is_print(" ") is True


def test_round_trip_case():
    for ch in "abcdefghijklmnopqrstuvwxyz":
        assert to_lower(to_upper(ch)) == ch


def test_rejects_long_string():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_rejects_other_types():
    with pytest.raises(TypeError):
        to_lower(1.5)