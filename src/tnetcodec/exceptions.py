"""Exception hierarchy for tnetcodec.

All exceptions inherit from TnetcodecError for easy catching of any codec error.
"""

from __future__ import annotations

from typing import Any, Optional


class TnetcodecError(Exception):
    """Base exception for all tnetcodec errors."""

    pass


class FormatError(TnetcodecError, ValueError):
    """Raised when bytes do not match the tnetstring grammar.

    Examples:
        - Missing ``:`` after the length prefix
        - Non-digit or zero-padded length prefix
        - Payload shorter than its declared length
        - Unknown type tag
        - Payload content that does not fit its tag (``4:maybe!``)
        - Mapping with a non-string key or a key without a value

    Attributes:
        offset: Byte offset in the decoded buffer where the problem was found
        expected: Short description of what the grammar required
        found: What was actually there
        values: Values completed before the error in the same
            StreamDecoder.feed() call (empty elsewhere)
    """

    def __init__(
        self,
        message: str,
        *,
        offset: Optional[int] = None,
        expected: Optional[str] = None,
        found: Optional[object] = None,
    ) -> None:
        self.message = message
        self.offset = offset
        self.expected = expected
        self.found = found
        self.values: list[Any] = []
        super().__init__(self._describe())

    def _describe(self) -> str:
        parts = [self.message]
        if self.offset is not None:
            parts.append(f"at offset {self.offset}")
        if self.expected is not None:
            parts.append(f"(expected {self.expected}, found {self.found!r})")
        return " ".join(parts)


class IncompleteError(FormatError):
    """Raised when input ends before a complete top-level unit.

    Stream consumers treat this as "wait for more bytes". Any other
    FormatError is terminal for the buffer.
    """

    pass


class EncodeError(TnetcodecError, TypeError):
    """Raised when an object cannot be turned into a tnetstring value.

    Examples:
        - Native object of an unsupported type (set, datetime, ...)
        - Dictionary key that is neither str nor bytes
        - Non-finite float
        - Passing something other than a Value to encode()
    """

    pass
