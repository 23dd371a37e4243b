"""Decoding concatenated tnetstrings.

This module provides helpers for buffers that hold a sequence of units back
to back, and an incremental decoder for bytes that arrive in chunks (for
example from a socket read loop owned by the caller).
"""

from __future__ import annotations

import logging
from typing import Iterator

from ..codec.decoder import Buffer, decode_at
from ..codec.limits import DecodeLimits
from ..exceptions import FormatError, IncompleteError
from ..models.values import Value

logger = logging.getLogger(__name__)

DEFAULT_MAX_BUFFER_SIZE = 16 * 1024 * 1024


def iter_decode(data: Buffer, *, limits: DecodeLimits | None = None) -> Iterator[Value]:
    """Yield every unit in a buffer of concatenated tnetstrings.

    Args:
        data: Complete buffer; must end exactly on a unit boundary
        limits: Optional decoder limits

    Yields:
        Decoded values in buffer order

    Raises:
        IncompleteError: If the buffer ends inside a unit
        FormatError: If a unit is malformed

    Example:
        >>> [v.value for v in iter_decode(b"1:1#1:2#")]
        [1, 2]
    """
    buf = bytes(data)
    offset = 0
    while offset < len(buf):
        value, offset = decode_at(buf, offset, limits=limits)
        yield value


def decode_all(data: Buffer, *, limits: DecodeLimits | None = None) -> list[Value]:
    """Decode every unit in a buffer of concatenated tnetstrings.

    Args:
        data: Complete buffer; must end exactly on a unit boundary
        limits: Optional decoder limits

    Returns:
        List of decoded values
    """
    return list(iter_decode(data, limits=limits))


class StreamDecoder:
    """Incremental decoder for tnetstrings arriving in arbitrary chunks.

    Bytes are buffered until a whole unit is present. Malformed input is
    terminal: the buffer is dropped and the error propagates, since the
    format has no way to find the next unit boundary. Units decoded from the
    same chunk before the bad one travel on the error as ``values``.

    Example:
        >>> decoder = StreamDecoder()
        >>> decoder.feed(b"5:hel")
        []
        >>> decoder.feed(b"lo,0:~")
        [String(value=b'hello'), Null()]
        >>> decoder.pending
        0
    """

    def __init__(
        self,
        limits: DecodeLimits | None = None,
        max_buffer_size: int = DEFAULT_MAX_BUFFER_SIZE,
    ) -> None:
        """Initialize an empty stream decoder.

        Args:
            limits: Optional decoder limits applied to every unit
            max_buffer_size: Maximum bytes held while waiting for a unit to complete
        """
        if max_buffer_size <= 0:
            raise ValueError(f"max_buffer_size must be > 0, got {max_buffer_size}")

        self.limits = limits
        self.max_buffer_size = max_buffer_size
        self._buffer = b""

    @property
    def pending(self) -> int:
        """Number of buffered bytes not yet decoded."""
        return len(self._buffer)

    def feed(self, chunk: Buffer) -> list[Value]:
        """Add bytes and return every unit they complete.

        Args:
            chunk: Newly received bytes

        Returns:
            Values completed by this chunk, in order (possibly empty)

        Raises:
            FormatError: If the buffered data is malformed or the partial
                unit outgrows ``max_buffer_size``. Units completed earlier
                in the same call are on the error's ``values`` attribute.
        """
        buf = self._buffer + bytes(chunk)
        offset = 0
        values: list[Value] = []

        while offset < len(buf):
            try:
                value, offset = decode_at(buf, offset, limits=self.limits)
            except IncompleteError:
                break
            except FormatError as e:
                logger.debug("Dropping %d buffered bytes after malformed input", len(buf) - offset)
                self._buffer = b""
                e.values = values
                raise
            values.append(value)

        self._buffer = buf[offset:]

        if len(self._buffer) > self.max_buffer_size:
            size = len(self._buffer)
            self._buffer = b""
            error = FormatError(
                "Partial tnetstring exceeds buffer limit",
                expected=f"at most {self.max_buffer_size} bytes",
                found=f"{size} bytes",
            )
            error.values = values
            raise error

        if values:
            logger.debug("Decoded %d value(s), %d byte(s) pending", len(values), len(self._buffer))
        return values

    def reset(self) -> None:
        """Discard any buffered partial unit."""
        self._buffer = b""
