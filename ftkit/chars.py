"""Classification and case conversion of single ASCII characters.

Every function takes either a character code (an ``int``) or a one-character
string. Only the ASCII ranges are considered.
"""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_UPPER_FIRST = ord("A")
_UPPER_LAST = ord("Z")
_LOWER_FIRST = ord("a")
_LOWER_LAST = ord("z")
_DIGIT_FIRST = ord("0")
_DIGIT_LAST = ord("9")
_CASE_OFFSET = _LOWER_FIRST - _UPPER_FIRST


def _code(c: CharLike) -> int:
    """Return the character code of ``c``."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {len(c)} characters")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return c


def _like(original: CharLike, code: int) -> CharLike:
    """Return ``code`` in the same form (int or str) as ``original``."""
    return chr(code) if isinstance(original, str) else code


def is_alpha(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter."""
    code = _code(c)
    return _UPPER_FIRST <= code <= _UPPER_LAST or _LOWER_FIRST <= code <= _LOWER_LAST


def is_digit(c: CharLike) -> bool:
    """True if ``c`` is one of the digits 0 to 9."""
    return _DIGIT_FIRST <= _code(c) <= _DIGIT_LAST


def is_alnum(c: CharLike) -> bool:
    """True if ``c`` is an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: CharLike) -> bool:
    """True if ``c`` lies in the range 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: CharLike) -> bool:
    """True if ``c`` is a printable ASCII character (32 to 126)."""
    return 32 <= _code(c) <= 126


def to_upper(c: CharLike) -> CharLike:
    """Convert a lowercase ASCII letter to uppercase; anything else is returned unchanged."""
    code = _code(c)
    if _LOWER_FIRST <= code <= _LOWER_LAST:
        return _like(c, code - _CASE_OFFSET)
    return c


def to_lower(c: CharLike) -> CharLike:
    """Convert an uppercase ASCII letter to lowercase; anything else is returned unchanged."""
    code = _code(c)
    if _UPPER_FIRST <= code <= _UPPER_LAST:
        return _like(c, code + _CASE_OFFSET)
    return c