"""Byte-buffer operations over writable buffers such as ``bytearray``."""

from __future__ import annotations

import sys
from typing import Optional

SIZE_MAX = sys.maxsize * 2 + 1


def _view(buf) -> memoryview:
    """Return a flat byte view of ``buf``."""
    view = memoryview(buf)
    return view if view.format == "B" and view.ndim == 1 else view.cast("B")


def _checked(view: memoryview, n: int, name: str) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    if n > view.nbytes:
        raise ValueError(f"{name} holds {view.nbytes} bytes, fewer than {n}")


def memset(buf, c: int, n: int):
    """Fill the first ``n`` bytes of ``buf`` with ``c`` truncated to a byte; return ``buf``."""
    view = _view(buf)
    _checked(view, n, "buffer")
    view[:n] = bytes((c & 0xFF,)) * n
    return buf


def bzero(buf, n: int) -> None:
    """Set the first ``n`` bytes of ``buf`` to zero."""
    memset(buf, 0, n)


def memcpy(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` into ``dest``; return ``dest``."""
    if n == 0:
        return dest
    target = _view(dest)
    source = _view(src)
    _checked(target, n, "destination")
    _checked(source, n, "source")
    target[:n] = bytes(source[:n])
    return dest


def memmove(dest, src, n: int):
    """Copy ``n`` bytes from ``src`` into ``dest``, safe when the two overlap; return ``dest``."""
    # The source bytes are taken as a snapshot before writing, so overlap is harmless.
    return memcpy(dest, src, n)


def memchr(buf, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c`` within ``n`` bytes, or None."""
    view = _view(buf)
    _checked(view, n, "buffer")
    index = bytes(view[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(s1, s2, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first differing bytes, or 0."""
    left = _view(s1)
    right = _view(s2)
    _checked(left, n, "first buffer")
    _checked(right, n, "second buffer")
    for a, b in zip(left[:n], right[:n]):
        if a != b:
            return a - b
    return 0


def calloc(nmemb: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``nmemb * size`` bytes.

    Raises OverflowError when the product does not fit in a machine size.
    """
    if nmemb < 0 or size < 0:
        raise ValueError("element count and size must not be negative")
    if size != 0 and nmemb > SIZE_MAX // size:
        raise OverflowError(f"{nmemb} elements of {size} bytes exceed the addressable size")
    return bytearray(nmemb * size)