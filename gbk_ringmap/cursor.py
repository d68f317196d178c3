"""
Buffered line-scanning cursor over a binary byte source.

The feature-table parser never holds a whole line (let alone a whole
file) in memory. It works through three primitives on a ``ByteCursor``:

- ``read_chars(n)`` -- copy up to *n* characters of the current line.
- ``skip_consecutive(ch)`` -- consume and count a run of one character
  (used to measure indentation).
- ``next_line()`` -- discard the rest of the current line and its
  terminator.

The cursor refills an internal buffer of ``buffer_size`` bytes from the
source as needed and never seeks, so any object with a ``read(n)``
method returning ``bytes`` works: regular files, ``io.BytesIO``,
decompressing streams, sockets wrapped in ``makefile("rb")``.

Each byte maps to exactly one character (Latin-1). GenBank files are
ASCII; other bytes come through as arbitrary but harmless characters.
"""

from __future__ import annotations

import io
import logging
from typing import BinaryIO

from gbk_ringmap.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_BUFFER_SIZE = 4096

_LF = 0x0A
_CR = 0x0D
_TERMINATORS = frozenset((_LF, _CR))


class ByteCursor:
    """Forward-only cursor over a readable binary source.

    Args:
        source: Object with a ``read(n) -> bytes`` method. The cursor
            does not take ownership; closing it is the caller's job.
        buffer_size: Number of bytes requested per refill.

    Raises:
        ConfigurationError: If *buffer_size* is not a positive integer,
            or *source* is not a readable binary stream.
    """

    def __init__(self, source: BinaryIO, buffer_size: int = DEFAULT_BUFFER_SIZE) -> None:
        if isinstance(buffer_size, bool) or not isinstance(buffer_size, int) or buffer_size < 1:
            raise ConfigurationError(
                f"Buffer size must be a positive integer, got {buffer_size!r}"
            )
        if not callable(getattr(source, "read", None)):
            raise ConfigurationError(
                f"Source must have a read() method, got {type(source).__name__}"
            )
        if isinstance(source, io.TextIOBase):
            raise ConfigurationError(
                "Source must be opened in binary mode (e.g. open(path, 'rb'))"
            )
        readable = getattr(source, "readable", None)
        if callable(readable):
            try:
                is_readable = readable()
            except ValueError as e:
                # io raises ValueError for operations on a closed stream
                raise ConfigurationError(f"Source is not readable: {e}") from e
            if not is_readable:
                raise ConfigurationError("Source must be readable")

        self._source = source
        self._buffer_size = buffer_size
        self._buffer = b""
        self._pos = 0
        self._size = 0

    @property
    def buffer_size(self) -> int:
        return self._buffer_size

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def read_chars(self, max_chars: int) -> str:
        """Read up to *max_chars* characters from the current line.

        Stops early at a line terminator (``\\r`` or ``\\n``, left
        unconsumed) or at end of stream. ``len()`` of the result is the
        number of characters copied.
        """
        chunks: list[bytes] = []
        remaining = max_chars
        while remaining > 0:
            if self._pos >= self._size and not self._fill():
                break
            buf = self._buffer
            start = self._pos
            stop = min(self._size, start + remaining)
            end = start
            while end < stop and buf[end] not in _TERMINATORS:
                end += 1
            chunks.append(buf[start:end])
            remaining -= end - start
            self._pos = end
            if end < stop:
                break
        return b"".join(chunks).decode("latin-1")

    def skip_consecutive(self, ch: str) -> int:
        """Consume consecutive occurrences of *ch* and return how many there were.

        The first non-matching character is left in place.
        """
        target = _single_byte(ch)
        count = 0
        while True:
            if self._pos >= self._size and not self._fill():
                return count
            buf = self._buffer
            pos = self._pos
            while pos < self._size and buf[pos] == target:
                pos += 1
            count += pos - self._pos
            self._pos = pos
            if pos < self._size:
                return count

    def next_line(self) -> bool:
        """Advance to the start of the next line.

        Recognizes ``\\n`` (Unix), ``\\r\\n`` (DOS) and a lone ``\\r``
        (classic Mac), including a ``\\r\\n`` pair split across two
        refills.

        Returns:
            ``True`` if a terminator was consumed, ``False`` if the
            stream ended first.
        """
        previous_cr = False
        while True:
            if self._pos >= self._size and not self._fill():
                return previous_cr
            if previous_cr:
                if self._buffer[self._pos] == _LF:
                    self._pos += 1
                return True
            byte = self._buffer[self._pos]
            self._pos += 1
            if byte == _LF:
                return True
            if byte == _CR:
                previous_cr = True

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _fill(self) -> bool:
        """Refill the buffer from the source. Returns False at end of stream."""
        data = self._source.read(self._buffer_size)
        self._buffer = data or b""
        self._pos = 0
        self._size = len(self._buffer)
        return self._size > 0


def _single_byte(ch: str) -> int:
    if len(ch) != 1 or ord(ch) > 0xFF:
        raise ValueError(f"Expected a single one-byte character, got {ch!r}")
    return ord(ch)
