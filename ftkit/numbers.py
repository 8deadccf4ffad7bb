"""Conversions between integers and their textual digits."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

from ftkit.strings import strlen

_WHITESPACE = frozenset("\t\n\v\f\r ")


def atoi(text: Union[str, bytes, bytearray, memoryview]) -> int:
    """Convert the leading number in ``text`` to an integer.

    Leading whitespace and a single sign are skipped; reading stops at the
    first non-digit. Text without digits gives 0.
    """
    if isinstance(text, str):
        chars = text[: strlen(text)]
    else:
        data = bytes(text)
        chars = data[: strlen(data)].decode("latin-1")
    stripped = chars.lstrip("".join(_WHITESPACE))
    sign = 1
    if stripped[:1] in ("-", "+"):
        sign = -1 if stripped[0] == "-" else 1
        stripped = stripped[1:]
    value = 0
    for ch in stripped:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    return value * sign


def itoa(n: int) -> str:
    """Return the decimal text of ``n``, with a leading minus when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n < 0:
        return "-" + format_base(-n, "0123456789")
    return format_base(n, "0123456789")


def _check_unsigned(n: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    if n < 0:
        raise ValueError(f"number must not be negative, got {n}")


def nbrlen_base(n: int, base_len: int) -> int:
    """Return how many digits ``n`` takes in a base of ``base_len`` digits."""
    _check_unsigned(n)
    if base_len < 2:
        raise ValueError(f"base must have at least 2 digits, got {base_len}")
    length = 1 if n == 0 else 0
    while n:
        n //= base_len
        length += 1
    return length


def format_base(n: int, base: str) -> str:
    """Return ``n`` written with the digits of ``base``, most significant first."""
    _check_unsigned(n)
    radix = len(base)
    if radix < 2:
        raise ValueError(f"base must have at least 2 digits, got {radix}")
    digits = []
    while True:
        n, remainder = divmod(n, radix)
        digits.append(base[remainder])
        if not n:
            break
    return "".join(reversed(digits))


def putnbr_base(n: int, base: str, stream: Optional[TextIO] = None) -> int:
    """Write ``n`` in ``base`` to ``stream`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_base(n, base)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)