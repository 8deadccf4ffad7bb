"""Building new text from existing text: copies, slices, joins, trims and splits.

The functions accept ``str`` or bytes-like values and return the same kind
(``str`` for ``str``, ``bytes`` for anything bytes-like). A NUL character ends
the input early, as a terminator would.
"""

from __future__ import annotations

from itertools import groupby
from typing import Callable, MutableSequence, Union

from ftkit.strings import strlen

Text = Union[str, bytes, bytearray, memoryview]


def _text(s: Text) -> Union[str, bytes]:
    """Return ``s`` cut at its terminator, as ``str`` or ``bytes``."""
    if isinstance(s, str):
        return s[: strlen(s)]
    if isinstance(s, (bytes, bytearray, memoryview)):
        data = bytes(s)
        return data[: strlen(data)]
    raise TypeError(f"expected str or a bytes-like value, got {type(s).__name__}")


def _same_kind(a: Union[str, bytes], b: Union[str, bytes]) -> None:
    if isinstance(a, str) != isinstance(b, str):
        raise TypeError("both arguments must be str or both be bytes-like")


def strdup(s: Text) -> Union[str, bytes]:
    """Return a copy of ``s`` up to its terminator."""
    return _text(s)


def substr(s: Text, start: int, length: int) -> Union[str, bytes]:
    """Return at most ``length`` characters of ``s`` starting at ``start``.

    A start at or past the end gives an empty result.
    """
    if start < 0:
        raise ValueError(f"start must not be negative, got {start}")
    if length < 0:
        raise ValueError(f"length must not be negative, got {length}")
    text = _text(s)
    if start >= len(text):
        return text[:0]
    return text[start : start + length]


def strjoin(s1: Text, s2: Text) -> Union[str, bytes]:
    """Return ``s1`` followed by ``s2``."""
    first = _text(s1)
    second = _text(s2)
    _same_kind(first, second)
    return first + second


def strtrim(s: Text, charset: Text) -> Union[str, bytes]:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    text = _text(s)
    chars = _text(charset)
    _same_kind(text, chars)
    return text.strip(chars)


def split(s: Text, charset: Text) -> list:
    """Split ``s`` at any character of ``charset``, dropping empty words."""
    text = _text(s)
    separators = _text(charset)
    _same_kind(text, separators)
    join = "".join if isinstance(text, str) else bytes
    return [
        join(group)
        for is_separator, group in groupby(text, key=lambda ch: ch in separators)
        if not is_separator
    ]


def strmapi(s: Text, f: Callable) -> Union[str, bytes]:
    """Return a new text made of ``f(index, char)`` for each character of ``s``.

    For ``str`` input ``f`` receives and returns one-character strings; for
    bytes-like input it receives and returns byte values.
    """
    text = _text(s)
    mapped = (f(index, ch) for index, ch in enumerate(text))
    if isinstance(text, str):
        return "".join(mapped)
    return bytes(mapped)


def _terminator_index(chars: MutableSequence) -> int:
    if isinstance(chars, bytearray):
        end = chars.find(0)
        return len(chars) if end < 0 else end
    try:
        return chars.index("\0")
    except ValueError:
        return len(chars)


def striteri(chars: MutableSequence, f: Callable) -> None:
    """Call ``f(index, char)`` on each character of ``chars`` up to its terminator.

    ``chars`` is changed in place: whatever ``f`` returns, unless None,
    replaces the character at that index.
    """
    if isinstance(chars, (str, bytes)):
        raise TypeError(f"expected a mutable sequence, got {type(chars).__name__}")
    end = _terminator_index(chars)
    for index, value in enumerate(chars[:end]):
        result = f(index, value)
        if result is not None:
            chars[index] = result