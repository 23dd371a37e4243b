"""Decoder limits.

This module provides the configuration dataclass that bounds how much work a
single decode call will accept from untrusted input.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DecodeLimits:
    """Bounds applied while decoding.

    Attributes:
        max_length_digits: Maximum number of digits in a length prefix (default 9).
            Nine digits caps a single payload just under 1 GB, and lets the
            decoder reject a runaway prefix before it sees a ``:``.

        max_depth: Maximum nesting of lists and mappings (default 256).
            Every level adds Python stack frames, so this must stay well under
            the interpreter's recursion limit.

    Examples:
        ```python
        from tnetcodec import DecodeLimits, decode

        # Small embedded messages only
        limits = DecodeLimits(max_length_digits=4, max_depth=8)
        value, rest = decode(data, limits=limits)
        ```
    """

    max_length_digits: int = 9
    max_depth: int = 256

    def __post_init__(self) -> None:
        """Validate limit values."""
        if self.max_length_digits < 1:
            raise ValueError(f"max_length_digits must be >= 1, got {self.max_length_digits}")

        if self.max_depth < 1:
            raise ValueError(f"max_depth must be >= 1, got {self.max_depth}")


DEFAULT_LIMITS = DecodeLimits()
