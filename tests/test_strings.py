import pytest

from ftkit.strings import (
    strchr,
    strcmp,
    strlcat,
    strlcpy,
    strlen,
    strncmp,
    strnstr,
    strrchr,
)


@pytest.mark.parametrize("s", ["", "hello", b"bytes here", bytearray(b"abc")])
def test_strlen_matches_len(s):
    assert strlen(s) == len(s)


def test_strlen_stops_at_nul():
    assert strlen("abc\0def") == len("abc")
    assert strlen(b"xy\0z") == len(b"xy")


def test_strlcpy_copies_and_terminates():
    dst = bytearray(b"\xff" * 10)
    result = strlcpy(dst, b"hello", len(dst))
    assert result == len(b"hello")
    assert dst[: len(b"hello")] == b"hello"
    assert dst[len(b"hello")] == 0


def test_strlcpy_truncates():
    dst = bytearray(b"\xff" * 10)
    result = strlcpy(dst, b"hello world", 4)
    assert result == len(b"hello world")
    assert dst[:3] == b"hel"
    assert dst[3] == 0
    assert dst[4] == 0xFF


def test_strlcpy_size_zero_writes_nothing():
    dst = bytearray(b"keep")
    assert strlcpy(dst, b"other", 0) == len(b"other")
    assert dst == bytearray(b"keep")


def test_strlcpy_rejects_small_buffer_and_str():
    with pytest.raises(ValueError):
        strlcpy(bytearray(2), b"hello", 10)
    with pytest.raises(TypeError):
        strlcpy(bytes(10), b"hi", 5)
    with pytest.raises(TypeError):
        strlcpy(bytearray(10), "hi", 5)


def test_strlcat_appends():
    dst = bytearray(b"foo\0" + b"\0" * 6)
    result = strlcat(dst, b"bar", len(dst))
    assert result == len(b"foobar")
    assert dst[: len(b"foobar")] == b"foobar"
    assert strlen(dst) == len(b"foobar")


def test_strlcat_truncates():
    dst = bytearray(b"foo\0" + b"\0" * 6)
    result = strlcat(dst, b"barbaz", 6)
    assert result == len(b"foo") + len(b"barbaz")
    assert bytes(dst[:6]) == b"fooba\0"


def test_strlcat_size_not_larger_than_dst():
    dst = bytearray(b"hello\0\0\0")
    result = strlcat(dst, b"abc", 2)
    assert result == 2 + len(b"abc")
    assert dst == bytearray(b"hello\0\0\0")


def test_strlcat_round_trip_with_strlcpy():
    dst = bytearray(16)
    strlcpy(dst, b"left", len(dst))
    strlcat(dst, b"right", len(dst))
    assert dst.partition(b"\0")[0] == b"leftright"


@pytest.mark.parametrize("s, c", [("hello", "l"), ("hello", "h"), (b"hello", ord("o"))])
def test_strchr_matches_find(s, c):
    expected = s.find(c) if isinstance(s, str) else s.find(c)
    assert strchr(s, c) == expected


def test_strchr_missing_and_terminator():
    assert strchr("hello", "z") is None
    assert strchr("hello", 0) == len("hello")
    assert strchr("ab\0cd", "c") is None


def test_strchr_truncates_int_to_byte():
    assert strchr(b"abc", ord("b") + 256) == 1


def test_strrchr_matches_rfind():
    s = "hello world"
    assert strrchr(s, "o") == s.rfind("o")
    assert strrchr(s, "q") is None
    assert strrchr(s, "\0") == len(s)


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


def test_strcmp_equal_and_differences():
    assert strcmp("abc", "abc") == 0
    assert strcmp("abc", "abd") == ord("c") - ord("d")
    assert strcmp("abc", "ab") == ord("c")
    assert strcmp(b"ab", b"abc") == -ord("c")


def test_strcmp_sign_matches_python_ordering():
    pairs = [("apple", "banana"), ("zeta", "alpha"), ("same", "same"), ("a", "")]
    for a, b in pairs:
        result = strcmp(a, b)
        assert (result > 0) == (a > b)
        assert (result < 0) == (a < b)


def test_strcmp_unsigned_bytes():
    assert strcmp(b"\x80", b"\x01") > 0


def test_strncmp_limits_comparison():
    assert strncmp("abcdef", "abcxyz", 3) == 0
    assert strncmp("abcdef", "abcxyz", 4) == ord("d") - ord("x")
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_negative_count():
    with pytest.raises(ValueError):
        strncmp("a", "b", -1)


def test_strnstr_finds_within_length():
    big = "Foo Bar Baz"
    assert strnstr(big, "Bar", len(big)) == big.find("Bar")
    assert strnstr(big, "Bar", big.find("Bar") + 2) is None
    assert strnstr(big, "Bar", big.find("Bar") + len("Bar")) == big.find("Bar")


def test_strnstr_empty_and_missing():
    assert strnstr("abc", "", 0) == 0
    assert strnstr("abc", "zz", 3) is None
    assert strnstr(b"abcabc", b"ca", 6) == b"abcabc".find(b"ca")


def test_strnstr_errors():
    with pytest.raises(ValueError):
        strnstr("abc", "a", -1)
    with pytest.raises(TypeError):
        strnstr("abc", b"a", 3)