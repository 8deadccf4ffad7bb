"""Writing characters, text and numbers to file descriptors."""

from __future__ import annotations

import os
from typing import Union

from ftkit.numbers import itoa
from ftkit.strings import strlen

Text = Union[str, bytes, bytearray, memoryview]


def _write_all(fd: int, data: bytes) -> int:
    """Write every byte of ``data`` to ``fd``; return how many were written."""
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]
    return len(data)


def _encode(s: Text) -> bytes:
    """Return the bytes of ``s`` up to its terminator."""
    if isinstance(s, str):
        return s[: strlen(s)].encode("utf-8")
    if isinstance(s, (bytes, bytearray, memoryview)):
        data = bytes(s)
        return data[: strlen(data)]
    raise TypeError(f"expected str or a bytes-like value, got {type(s).__name__}")


def putchar_fd(c: Union[int, str], fd: int) -> int:
    """Write the character ``c`` to ``fd``.

    An int is truncated to a byte; a one-character string is written as UTF-8.
    Returns the number of bytes written.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        data = c.encode("utf-8")
    elif isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    else:
        data = bytes((c & 0xFF,))
    return _write_all(fd, data)


def putstr_fd(s: Text, fd: int) -> int:
    """Write ``s`` up to its terminator to ``fd``; return the number of bytes written."""
    return _write_all(fd, _encode(s))


def putendl_fd(s: Text, fd: int) -> int:
    """Write ``s`` followed by a newline to ``fd``; return the number of bytes written."""
    return putstr_fd(s, fd) + putchar_fd("\n", fd)


def putnbr_fd(n: int, fd: int) -> int:
    """Write the decimal text of ``n`` to ``fd``; return the number of bytes written."""
    return _write_all(fd, itoa(n).encode("ascii"))