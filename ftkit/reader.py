"""Reading a file descriptor one line at a time.

Each descriptor keeps its own pending bytes between calls, so several
descriptors can be read in turn without mixing their lines.
"""

from __future__ import annotations

import os
from typing import Dict, Iterator, Optional

BUFFER_SIZE = 1024


class LineReader:
    """Return successive lines from file descriptors, reading in fixed-size chunks."""

    def __init__(self, buffer_size: int = BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int):
            raise TypeError(f"buffer size must be an int, got {type(buffer_size).__name__}")
        if buffer_size <= 0:
            raise ValueError(f"buffer size must be positive, got {buffer_size}")
        self.buffer_size = buffer_size
        self._pending: Dict[int, bytes] = {}

    def _fill(self, fd: int) -> bytes:
        """Read chunks into the pending bytes of ``fd`` until a chunk holds a newline or EOF."""
        buffer = self._pending.pop(fd, b"")
        while True:
            chunk = os.read(fd, self.buffer_size)
            if not chunk:
                break
            # A NUL byte ends the chunk, as a terminator would.
            chunk = chunk.partition(b"\0")[0]
            buffer += chunk
            if b"\n" in chunk:
                break
        return buffer

    def next_line(self, fd: int) -> Optional[bytes]:
        """Return the next line of ``fd``, newline included when present.

        Returns None once the descriptor has no more data. A failed read
        discards what was pending for ``fd`` and raises OSError.
        """
        if isinstance(fd, bool) or not isinstance(fd, int):
            raise TypeError(f"file descriptor must be an int, got {type(fd).__name__}")
        if fd < 0:
            raise ValueError(f"file descriptor must not be negative, got {fd}")
        buffer = self._fill(fd)
        if not buffer:
            return None
        line, newline, remaining = buffer.partition(b"\n")
        if newline:
            self._pending[fd] = remaining
        return line + newline

    def lines(self, fd: int) -> Iterator[bytes]:
        """Yield the remaining lines of ``fd`` until its end."""
        while True:
            line = self.next_line(fd)
            if line is None:
                return
            yield line


_shared = LineReader(BUFFER_SIZE)


def get_next_line(fd: int) -> Optional[bytes]:
    """Return the next line of ``fd`` using a reader shared by the whole process."""
    return _shared.next_line(fd)