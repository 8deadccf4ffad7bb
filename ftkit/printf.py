"""Formatted output in the style of printf.

Supported conversions are ``c s p d i u x X %`` with the flags ``+ - # 0``
(space), a field width, a precision and ``*`` for either of those. An
unknown conversion character prints nothing.

:func:`render` returns the formatted text. :func:`printf` writes it to
standard output and returns the character count that the formatter reports.
In a few corner cases, such as a left-justified zero value printed with
precision 0, that count differs from the length of the text.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Iterable, Iterator, Optional

from ftkit.chars import is_digit
from ftkit.numbers import format_base, nbrlen_base

HEX_UPPER = "0123456789ABCDEF"
HEX_LOWER = "0123456789abcdef"
DECIMAL = "0123456789"
NULL_STR = "(null)"
NIL_PTR = "(nil)"

_FLAG_CHARS = "+- *.0#"
_INT_BITS = 32
_POINTER_MASK = (1 << 64) - 1
_UINT_MASK = (1 << _INT_BITS) - 1


@dataclass
class Flags:
    """The flags, width and precision of one conversion."""

    plus: bool = False
    minus: bool = False
    hash: bool = False
    zero: bool = False
    space: bool = False
    precision: int = -1
    width: int = 0
    star: bool = False
    negative: bool = False

    def reset(self) -> None:
        """Return every field to its default."""
        self.plus = False
        self.minus = False
        self.hash = False
        self.zero = False
        self.space = False
        self.precision = -1
        self.width = 0
        self.star = False
        self.negative = False


def _as_int(value: Any) -> int:
    if not isinstance(value, int):
        raise TypeError(f"expected an int argument, got {type(value).__name__}")
    return int(value)


def _to_c_int(value: Any) -> int:
    """Wrap ``value`` to a signed 32-bit integer."""
    half = 1 << (_INT_BITS - 1)
    return ((_as_int(value) + half) & _UINT_MASK) - half


def _to_c_uint(value: Any) -> int:
    """Wrap ``value`` to an unsigned 32-bit integer."""
    return _as_int(value) & _UINT_MASK


class _Formatter:
    """Formats one call: collects the output and the reported count."""

    def __init__(self, args: Iterable[Any]) -> None:
        self._args: Iterator[Any] = iter(args)
        self._parts: list[str] = []
        self.flags = Flags()
        self.count = 0

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def _next_arg(self) -> Any:
        try:
            return next(self._args)
        except StopIteration:
            raise TypeError("not enough arguments for format string") from None

    def _emit(self, text: str) -> int:
        self._parts.append(text)
        return len(text)

    def _pad(self, width: int, size: int, fill: str) -> int:
        count = max(width - size, 0)
        if count:
            self._emit(fill * count)
        return count

    # Parsing

    def run(self, fmt: str) -> None:
        fmt = fmt.partition("\0")[0]
        end = len(fmt)
        i = 0
        while i < end:
            if fmt[i] == "%" and i + 1 < end:
                i = self._parse_flags(fmt, i + 1)
                if i < end:
                    self.count += self._convert(fmt[i])
                self.flags.reset()
            else:
                self.count += self._char(fmt[i])
            i += 1

    @staticmethod
    def _digits(fmt: str, i: int, value: int) -> tuple[int, int]:
        while i < len(fmt) and is_digit(fmt[i]):
            value = value * 10 + int(fmt[i])
            i += 1
        return i, value

    def _parse_flags(self, fmt: str, i: int) -> int:
        flags = self.flags
        while i < len(fmt) and (fmt[i] in _FLAG_CHARS or is_digit(fmt[i])):
            ch = fmt[i]
            if ch == "+":
                flags.plus = True
            elif ch == "-":
                flags.minus = True
            elif ch == "#":
                flags.hash = True
            elif ch == "0":
                flags.zero = True
            elif ch == " ":
                flags.space = True
            elif ch == "*":
                self._star()
            if ch == ".":
                i, flags.precision = self._digits(fmt, i + 1, 0)
            elif is_digit(ch):
                if flags.star:
                    flags.width = 0
                i, flags.width = self._digits(fmt, i, flags.width)
            else:
                i += 1
        return i

    def _star(self) -> None:
        flags = self.flags
        flags.star = True
        value = _to_c_int(self._next_arg())
        if flags.precision == 0:
            flags.precision = -1 if value < 0 else value
        else:
            if value < 0:
                flags.minus = True
                value = -value
            flags.width = value

    def _convert(self, conversion: str) -> int:
        if conversion == "c":
            return self._char(self._char_arg())
        if conversion == "s":
            return self._string(self._string_arg())
        if conversion == "p":
            return self._pointer(self._pointer_arg())
        if conversion in ("d", "i"):
            return self._integer(_to_c_int(self._next_arg()))
        if conversion == "u":
            self.flags.hash = False
            return self._number(_to_c_uint(self._next_arg()), DECIMAL)
        if conversion == "x":
            return self._hexadecimal(_to_c_uint(self._next_arg()), HEX_LOWER)
        if conversion == "X":
            return self._hexadecimal(_to_c_uint(self._next_arg()), HEX_UPPER)
        if conversion == "%":
            return self._emit("%")
        return 0

    # Arguments

    def _char_arg(self) -> str:
        value = self._next_arg()
        if isinstance(value, str):
            if len(value) != 1:
                raise ValueError(f"%c expects a single character, got {len(value)} characters")
            return value
        return chr(_as_int(value) & 0xFF)

    def _string_arg(self) -> Optional[str]:
        value = self._next_arg()
        if value is not None and not isinstance(value, str):
            raise TypeError(f"%s expects a str or None, got {type(value).__name__}")
        return value

    def _pointer_arg(self) -> int:
        value = self._next_arg()
        if value is None:
            return 0
        return _as_int(value) & _POINTER_MASK

    # Conversions

    def _char(self, ch: str) -> int:
        flags = self.flags
        count = 1
        if not flags.minus:
            count += self._pad(flags.width, 1, " ")
        self._emit(ch)
        if flags.minus:
            count += self._pad(flags.width, 1, " ")
        return count

    def _string(self, s: Optional[str]) -> int:
        flags = self.flags
        text = NULL_STR if s is None else s
        if 0 <= flags.precision < len(text):
            if s is None:
                return self._pad(flags.width, 0, " ")
            text = text[: flags.precision]
        if flags.minus:
            return self._emit(text) + self._pad(flags.width, len(text), " ")
        return self._pad(flags.width, len(text), " ") + self._emit(text)

    def _pointer(self, ptr: int) -> int:
        text = NIL_PTR if not ptr else "0x" + format_base(ptr, HEX_LOWER)
        if self.flags.minus:
            return self._emit(text) + self._pad(self.flags.width, len(text), " ")
        return self._pad(self.flags.width, len(text), " ") + self._emit(text)

    def _integer(self, n: int) -> int:
        if n < 0:
            self.flags.negative = True
            n = -n
        self.flags.hash = False
        return self._number(n, DECIMAL)

    def _hexadecimal(self, n: int, base: str) -> int:
        if not n:
            self.flags.hash = False
        return self._number(n, base)

    def _number(self, nb: int, base: str) -> int:
        size = nbrlen_base(nb, len(base))
        if self.flags.minus:
            return self._number_left(nb, size, base)
        return self._number_right(nb, size, base)

    def _sign(self, emit: bool) -> int:
        flags = self.flags
        if flags.negative:
            symbol = "-"
        elif flags.plus:
            symbol = "+"
        elif flags.space:
            symbol = " "
        else:
            return 0
        if emit:
            self._emit(symbol)
        return 1

    def _prefix(self, base: Optional[str]) -> int:
        """Count the alternate-form prefix, writing it unless ``base`` is None."""
        if not self.flags.hash:
            return 0
        if base is None:
            return 2
        if base == HEX_UPPER:
            return self._emit("0X")
        if base == HEX_LOWER:
            return self._emit("0x")
        return 0

    def _number_left(self, nb: int, size: int, base: str) -> int:
        flags = self.flags
        count = self._sign(True) + self._prefix(base)
        if flags.precision > size:
            count += self._pad(flags.precision, size, "0")
        if flags.precision == 0 and nb == 0:
            return self._emit(" ") + self._pad(flags.width, count + 1, " ")
        self._emit(format_base(nb, base))
        count += self._pad(flags.width, size + count, " ")
        return count + size

    def _number_right(self, nb: int, size: int, base: str) -> int:
        flags = self.flags
        count = self._sign(False) + self._prefix(None)
        if flags.precision > size:
            count += self._pad(flags.width, flags.precision + count, " ")
            self._sign(True)
            self._prefix(base)
            count += self._pad(flags.precision, size, "0")
            self._emit(format_base(nb, base))
            return count + size
        if flags.zero and flags.precision == -1:
            self._sign(True)
            self._prefix(base)
            count += self._pad(flags.width, size + count, "0")
        else:
            count += self._pad(flags.width, size + count, " ")
            self._sign(True)
            self._prefix(base)
        if flags.precision == 0 and nb == 0:
            if flags.width > 0:
                return self._emit(" ") + count
            return count
        self._emit(format_base(nb, base))
        return count + size


def _format(fmt: str, args: Iterable[Any]) -> tuple[str, int]:
    if not isinstance(fmt, str):
        raise TypeError(f"format must be a str, got {type(fmt).__name__}")
    formatter = _Formatter(args)
    formatter.run(fmt)
    return formatter.text, formatter.count


def render(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the formatted ``args``."""
    return _format(fmt, args)[0]


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return the reported count."""
    text, count = _format(fmt, args)
    sys.stdout.write(text)
    return count