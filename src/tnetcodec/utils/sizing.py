"""Encoded size calculation utilities.

This module provides functions to calculate the encoded size of a value
without actually encoding it.
"""

from __future__ import annotations

from ..codec import tags
from ..models.values import Boolean, Float, Integer, List, Mapping, Null, String, Value


def payload_size(value: Value) -> int:
    """Calculate the payload size of a value in bytes.

    The payload is everything between the ``:`` and the type tag.

    Args:
        value: Value to measure

    Returns:
        Payload size in bytes

    Example:
        >>> payload_size(List([Integer(1), Integer(2)]))
        8
    """
    if isinstance(value, Null):
        return 0
    if isinstance(value, Boolean):
        return len(tags.TRUE) if value.value else len(tags.FALSE)
    if isinstance(value, Integer):
        return len(b"%d" % value.value)
    if isinstance(value, Float):
        return len(repr(value.value))
    if isinstance(value, String):
        return len(value.value)
    if isinstance(value, List):
        return sum(encoded_size(item) for item in value.items)
    if isinstance(value, Mapping):
        return sum(_unit_size(len(key)) + encoded_size(item) for key, item in value.pairs)

    raise TypeError(f"Expected a tnetstring Value, got {type(value).__name__}")


def encoded_size(value: Value) -> int:
    """Calculate the full encoded size of a value in bytes.

    Always equal to ``len(encode(value))``.

    Args:
        value: Value to measure

    Returns:
        Size in bytes, including length prefix, ``:`` and type tag

    Example:
        >>> encoded_size(String(b"hello world"))
        15
    """
    return _unit_size(payload_size(value))


def _unit_size(payload_length: int) -> int:
    # digits + ':' + payload + tag
    return len(str(payload_length)) + 1 + payload_length + 1
