# ftkit

A small library of everyday helpers for characters, byte buffers, text,
numbers, linked lists, printf-style formatting and line-by-line reading.
It has no dependencies outside the standard library.

## Modules

- `ftkit.chars`: ASCII classification and case conversion: `is_alpha`,
  `is_digit`, `is_alnum`, `is_ascii`, `is_print`, `to_upper`, `to_lower`.
  Each takes a character code (`int`) or a one-character `str`. The case
  functions give back the same kind they were given.
- `ftkit.memory`: operations on writable buffers such as `bytearray`:
  `memset`, `bzero`, `memcpy`, `memmove`, `memchr` (returns an index or
  `None`), `memcmp` and `calloc` (returns a zeroed `bytearray` and raises
  `OverflowError` when the size does not fit in a machine size).
- `ftkit.strings`: primitives for NUL-terminated text given as `str` or
  bytes-like values: `strlen`, `strlcpy`, `strlcat` (both write into a
  `bytearray`), `strchr`, `strrchr`, `strcmp`, `strncmp`, `strnstr`. A NUL
  ends the text early. Searches return an index or `None`.
- `ftkit.text`: building new text: `strdup`, `substr`, `strjoin`,
  `strtrim`, `split`, `strmapi`, and `striteri`, which changes a mutable
  sequence in place.
- `ftkit.numbers`: `atoi`, `itoa`, `nbrlen_base`, `format_base` and
  `putnbr_base`. `putnbr_base` writes to a text stream, standard output by
  default.
- `ftkit.output`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`
  write to a file descriptor and return the number of bytes written.
- `ftkit.lists`: a singly linked list. `Node` has `content` and `next`.
  `LinkedList` supports `add_front`, `add_back`, `last`, `len()`, iteration
  over contents, `clear`, `iterate` and `map`. `delete_node` releases a
  single node.
- `ftkit.printf`: a printf-style formatter with the conversions
  `c s p d i u x X %`, the flags `+ - # 0` and space, a field width, a
  precision, and `*` for either of them. `Flags` holds the settings of one
  conversion.
- `ftkit.reader`: `LineReader` reads a file descriptor one line at a time
  and keeps pending bytes separately for each descriptor. `get_next_line`
  uses one reader shared by the whole process.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from ftkit.numbers import atoi, itoa
from ftkit.text import split
from ftkit.printf import render

atoi("  -42abc")              # -42
itoa(-2147483648)             # "-2147483648"
split("  hello  world ", " ") # ["hello", "world"]
render("[%-5d|%#x]", 42, 255) # "[42   |0xff]"
```

`render` returns the formatted text. `printf` writes the same text to
standard output and returns the character count that the formatter reports.
In a few corner cases that count is not the length of the text, for example
a left-justified zero printed with precision 0. An unknown conversion
character prints nothing. `d`, `i`, `u`, `x` and `X` wrap their argument to
32 bits, as a C `int` would.

Reading lines from a file descriptor:

```python
import os
import sys
from ftkit.reader import LineReader

fd = os.open("notes.txt", os.O_RDONLY)
for line in LineReader().lines(fd):
    sys.stdout.buffer.write(line)
os.close(fd)
```

Lines are `bytes`. Each keeps its trailing newline, except possibly the
last one. `next_line` returns `None` once the descriptor has no more data.
The default chunk size is 1024 bytes, and `LineReader(buffer_size)` sets
another.

## What it does not do

ftkit is a library only. It installs no command-line program. The formatter
has no floating-point conversions and no length modifiers such as `l` or
`h`.