import pytest

from libft.transform import (
    split,
    strdup,
    striteri,
    strjoin,
    strmapi,
    strtrim,
    substr,
    to_upper_even,
)


def test_strdup_copies():
    assert strdup("abc") == "abc"


def test_strdup_stops_at_nul():
    assert strdup("ab\0c") == "ab"


def test_strdup_bytearray_is_new_object():
    original = bytearray(b"abc")
    copy = strdup(original)
    original[0] = ord("z")
    assert copy == b"abc"


def test_substr_middle():
    assert substr("hello", 1, 3) == "ell"


def test_substr_start_past_end():
    assert substr("hello", 10, 3) == ""


def test_substr_length_past_end():
    assert substr("hello", 2, 100) == "llo"


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strjoin():
    assert strjoin("foo", "bar") == "foobar"


def test_strjoin_empty():
    assert strjoin("", "x") == "x"


def test_strtrim_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_keeps_inner_chars():
    assert strtrim("-+a+-b-+", "+-") == "a+-b"


def test_strtrim_everything():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set():
    assert strtrim("  hi  ", "") == "  hi  "


def test_strtrim_none_raises():
    with pytest.raises(TypeError):
        strtrim(None, "x")


def test_split_words():
    assert split("  hello  world ", " ") == ["hello", "world"]


def test_split_empty():
    assert split("", " ") == []
    assert split("   ", " ") == []


def test_split_nul_separator():
    assert split("abc", "\0") == ["abc"]


@pytest.mark.parametrize("s", ["a,b,,c", ",,x,", "nosep", ""])
def test_split_invariants(s):
    words = split(s, ",")
    assert all(words)
    assert all("," not in w for w in words)
    assert "".join(words) == s.replace(",", "")


def test_split_bad_separator():
    with pytest.raises(ValueError):
        split("abc", "ab")


def test_striteri_in_place():
    chars = list("hello")
    assert striteri(chars, to_upper_even) is None
    assert "".join(chars) == "HeLlO"


def test_striteri_stops_at_nul():
    chars = list("ab\0cd")
    striteri(chars, to_upper_even)
    assert chars == ["A", "b", "\0", "c", "d"]


def test_striteri_passes_indices():
    seen = []
    striteri(list("xyz"), lambda i, c: seen.append((i, c)))
    assert seen == [(0, "x"), (1, "y"), (2, "z")]


def test_strmapi_agrees_with_striteri():
    text = "the quick brown fox"
    chars = list(text)
    striteri(chars, to_upper_even)
    assert strmapi(text, to_upper_even) == "".join(chars)


def test_strmapi_indices():
    assert strmapi("abc", lambda i, c: str(i)) == "012"


def test_strmapi_none_raises():
    with pytest.raises(TypeError):
        strmapi("abc", None)


def test_to_upper_even():
    assert to_upper_even(0, "a") == "A"
    assert to_upper_even(1, "a") == "a"
    assert to_upper_even(2, "!") == "!"