import pytest

from ftlib.chars import toupper
from ftlib.strings import (
    split,
    strjoin,
    strlcat,
    strlcpy,
    strmapi,
    striteri,
    strtrim,
    substr,
)


def test_substr_worked_example():
    assert substr("abcdefg", 3, 4) == "defg"


def test_substr_clamps_to_end():
    s = "abcdefg"
    result = substr(s, 4, 100)
    assert s.endswith(result)
    assert len(result) == len(s) - 4


def test_substr_out_of_range_or_zero_length():
    s = "abcdefg"
    assert substr(s, len(s) + 1, 3) == substr(s, 2, 0)
    assert len(substr(s, len(s), 3)) == 0


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin_concatenates():
    a, b = "42Tokyo", "shinjuku campus"
    joined = strjoin(a, b)
    assert joined.startswith(a)
    assert joined.endswith(b)
    assert len(joined) == len(a) + len(b)


def test_strtrim_everything_and_nothing():
    assert strtrim("xxxx", "x") == ""
    assert strtrim("  Hello!  ", "") == "  Hello!  "


def test_split_worked_example():
    assert split("Hello, world!", " ") == ["Hello,", "world!"]


@pytest.mark.parametrize("text", ["  a b  c ", ",,,", "", "shinjuku campus", "x"])
def test_split_invariants(text):
    sep = " " if " " in text else ","
    words = split(text, sep)
    assert all(words)
    assert all(sep not in word for word in words)
    assert "".join(words) == text.replace(sep, "")


def test_split_only_separators_gives_no_words():
    assert len(split(",,,", ",")) == 0


def test_split_rejects_bad_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_strmapi_passes_indices():
    s = "42Tokyo"
    seen = []

    def record(index, char):
        seen.append(index)
        return char

    assert strmapi(s, record) == s
    assert seen == list(range(len(s)))


def test_strmapi_uppercases():
    s = "shinjuku campus"
    assert strmapi(s, lambda i, c: toupper(c)) == s.upper()


def test_strmapi_stops_at_nul():
    s = "abcd"
    assert strmapi(s, lambda i, c: "\0" if i == 2 else c) == s[:2]


def test_striteri_modifies_in_place():
    text = "Hello!"
    buffer = list(text)
    assert striteri(buffer, lambda i, c: toupper(c)) is None
    assert "".join(buffer) == text.upper()


def test_striteri_none_keeps_character():
    text = "42Tokyo"
    buffer = list(text)
    seen = []

    def watch(index, char):
        seen.append((index, char))
        return None

    striteri(buffer, watch)
    assert "".join(buffer) == text
    assert seen == list(enumerate(text))


def test_strlcpy_full_copy():
    src = b"123456789"
    dest = bytearray(20)
    assert strlcpy(dest, src, len(dest)) == len(src)
    assert dest[: len(src) + 1] == src + b"\0"


def test_strlcpy_truncates():
    src = b"42Tokyo"
    dest = bytearray(2)
    assert strlcpy(dest, src, 2) == len(src)
    assert dest == src[:1] + b"\0"


def test_strlcpy_zero_size_writes_nothing():
    dest = bytearray(b"keep")
    assert strlcpy(dest, b"Hello!", 0) == len(b"Hello!")
    assert dest == bytearray(b"keep")


def test_strlcpy_size_beyond_buffer():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"Hello!", 5)


def test_strlcat_builds_concatenation():
    a, b = b"42Tokyo", b"shinjuku campus"
    size = len(a) + len(b) + 1
    dest = bytearray(size)
    assert strlcat(dest, a, size) == len(a)
    assert strlcat(dest, b, size) == len(a) + len(b)
    assert dest == a + b + b"\0"


def test_strlcat_truncates():
    dest = bytearray(b"abc" + bytes(7))
    src = b"defgh"
    assert strlcat(dest, src, 6) == 3 + len(src)
    assert dest[:6] == b"abc" + src[:2] + b"\0"


def test_strlcat_size_not_past_existing():
    dest = bytearray(b"abcdef\0\0")
    src = b"xyz"
    assert strlcat(dest, src, 4) == 4 + len(src)
    assert dest == bytearray(b"abcdef\0\0")


def test_strlcat_size_beyond_buffer():
    with pytest.raises(ValueError):
        strlcat(bytearray(3), b"a", 4)