"""Length, search, comparison and bounded copy for NUL-terminated text.

The functions accept ``str`` or bytes-like values. A NUL character ends the
text early, as a terminator would, and anything after it is ignored.
Positions are returned as indices, and ``None`` means "not found".
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Optional, Union

Text = Union[str, bytes, bytearray, memoryview]
CharLike = Union[int, str]


def _terminated(s: Text) -> Union[str, bytes]:
    """Return ``s`` cut at its first NUL."""
    if isinstance(s, str):
        return s.partition("\0")[0]
    return bytes(s).partition(b"\0")[0]


def _terminated_bytes(s) -> bytes:
    if isinstance(s, str):
        raise TypeError("expected a bytes-like value, got str")
    return bytes(s).partition(b"\0")[0]


def _codes(s: Text) -> list[int]:
    """Return the character codes of ``s`` up to its terminator."""
    text = _terminated(s)
    if isinstance(text, str):
        return [ord(ch) for ch in text]
    return list(text)


def _needle(s: Text, c: CharLike) -> int:
    """Return the code to look for; integers are truncated to a byte."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        code = ord(c)
        if not isinstance(s, str) and code > 0xFF:
            raise ValueError(f"character {c!r} does not fit in a byte")
        return code
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c & 0xFF


def _writable(dst) -> bytearray:
    if not isinstance(dst, bytearray):
        raise TypeError(f"destination must be a bytearray, got {type(dst).__name__}")
    return dst


def strlen(s: Text) -> int:
    """Return the number of characters before the terminator."""
    return len(_terminated(s))


def strlcpy(dst: bytearray, src, size: int) -> int:
    """Copy at most ``size - 1`` bytes of ``src`` into ``dst`` and terminate it.

    Nothing is written when ``size`` is 0. Returns the full length of ``src``.
    """
    target = _writable(dst)
    source = _terminated_bytes(src)
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size > 0:
        count = min(size - 1, len(source))
        if count + 1 > len(target):
            raise ValueError(f"destination holds {len(target)} bytes, fewer than {count + 1}")
        target[:count] = source[:count]
        target[count] = 0
    return len(source)


def strlcat(dst: bytearray, src, size: int) -> int:
    """Append ``src`` to the text in ``dst`` so the result fits in ``size`` bytes.

    Returns the length the result would have had without truncation:
    ``min(strlen(dst), size) + strlen(src)``.
    """
    target = _writable(dst)
    source = _terminated_bytes(src)
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dst_len = strlen(target)
    if size > dst_len:
        count = min(len(source), size - 1 - dst_len)
        end = dst_len + count
        if end + 1 > len(target):
            raise ValueError(f"destination holds {len(target)} bytes, fewer than {end + 1}")
        target[dst_len:end] = source[:count]
        target[end] = 0
    return min(dst_len, size) + len(source)


def strchr(s: Text, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    code = _needle(s, c)
    if code == 0:
        return len(text)
    index = text.find(chr(code) if isinstance(text, str) else code)
    return None if index < 0 else index


def strrchr(s: Text, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``, or None.

    Searching for NUL finds the terminator, at index ``strlen(s)``.
    """
    text = _terminated(s)
    code = _needle(s, c)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code) if isinstance(text, str) else code)
    return None if index < 0 else index


def strcmp(s1: Text, s2: Text) -> int:
    """Return the difference of the first differing character codes, or 0."""
    for a, b in zip_longest(_codes(s1), _codes(s2), fillvalue=0):
        if a != b:
            return a - b
    return 0


def strncmp(s1: Text, s2: Text, n: int) -> int:
    """Compare at most ``n`` characters; see :func:`strcmp`."""
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")
    pairs = zip_longest(_codes(s1), _codes(s2), fillvalue=0)
    for a, b in islice(pairs, n):
        if a != b:
            return a - b
    return 0


def strnstr(big: Text, little: Text, length: int) -> Optional[int]:
    """Return the index of ``little`` lying wholly within the first ``length``
    characters of ``big``, or None. An empty ``little`` is found at 0."""
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    haystack = _terminated(big)
    needle = _terminated(little)
    if isinstance(haystack, str) != isinstance(needle, str):
        raise TypeError("big and little must both be str or both be bytes-like")
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index