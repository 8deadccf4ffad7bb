import pytest

from ftkit.memory import (
    SIZE_MAX,
    bzero,
    calloc,
    memchr,
    memcmp,
    memcpy,
    memmove,
    memset,
)


def test_memset_fills_prefix_and_returns_buffer():
    buf = bytearray(b"hello world")
    result = memset(buf, ord("x"), 5)
    assert result is buf
    assert buf == b"x" * 5 + b" world"


def test_memset_truncates_value_to_byte():
    buf = bytearray(4)
    memset(buf, 0x141, 4)
    assert buf == bytes([0x41]) * 4


def test_memset_rejects_too_many_bytes():
    with pytest.raises(ValueError):
        memset(bytearray(3), 0, 4)


def test_memset_rejects_readonly_buffer():
    with pytest.raises(TypeError):
        memset(b"abc", 0, 1)


def test_bzero_clears_prefix():
    buf = bytearray(b"abcdef")
    bzero(buf, 3)
    assert buf == bytes(3) + b"def"


def test_bzero_zero_length_is_noop():
    buf = bytearray(b"abc")
    bzero(buf, 0)
    assert buf == b"abc"


def test_memcpy_copies_and_returns_dest():
    dest = bytearray(8)
    result = memcpy(dest, b"abcdefgh", 4)
    assert result is dest
    assert dest == b"abcd" + bytes(4)


def test_memcpy_zero_length_returns_dest_unchanged():
    dest = bytearray(b"keep")
    assert memcpy(dest, b"", 0) is dest
    assert dest == b"keep"


def test_memcpy_rejects_short_source():
    with pytest.raises(ValueError):
        memcpy(bytearray(8), b"ab", 4)


def test_memmove_overlap_forward():
    data = bytearray(b"123456789")
    view = memoryview(data)
    dest = view[2:]
    result = memmove(dest, view, 5)
    assert result is dest
    assert bytes(result[:5]) == b"12345"
    assert data == b"12" + b"12345" + b"89"


def test_memmove_overlap_backward():
    data = bytearray(b"123456789")
    view = memoryview(data)
    result = memmove(view, view[2:], 5)
    assert result is view
    assert bytes(result[:5]) == b"34567"
    assert data == b"34567" + b"6789"


def test_memchr_finds_first_occurrence():
    data = b"banana"
    assert memchr(data, ord("n"), len(data)) == data.index(b"n")


def test_memchr_respects_limit():
    assert memchr(b"banana", ord("n"), 2) is None


def test_memchr_finds_zero_byte():
    data = b"ab\x00cd"
    assert memchr(data, 0, len(data)) == data.index(0)


def test_memchr_truncates_search_value():
    data = b"xyA"
    assert memchr(data, 0x100 + ord("A"), 3) == data.index(b"A")


def test_memcmp_equal():
    assert memcmp(b"abcdef", b"abcxyz", 3) == 0


def test_memcmp_difference_of_first_differing_bytes():
    assert memcmp(b"abc", b"abd", 3) == ord("c") - ord("d")
    assert memcmp(b"b", b"a", 1) == ord("b") - ord("a")


def test_memcmp_is_unsigned():
    assert memcmp(b"\xff", b"\x01", 1) > 0


def test_memcmp_antisymmetric():
    a, b = b"hello", b"help!"
    assert memcmp(a, b, 5) == -memcmp(b, a, 5)


def test_calloc_returns_zeroed_buffer():
    buf = calloc(4, 3)
    assert buf == bytes(12)
    buf[0] = 1
    assert buf[0] == 1


def test_calloc_zero_size():
    assert calloc(10, 0) == bytearray()


def test_calloc_overflow():
    with pytest.raises(OverflowError):
        calloc(SIZE_MAX // 2 + 1, 2)


def test_calloc_negative():
    with pytest.raises(ValueError):
        calloc(-1, 1)