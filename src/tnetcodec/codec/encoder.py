"""Tnetstring encoder.

This module provides the encode() function that turns a Value tree into its
canonical byte representation.
"""

from __future__ import annotations

from ..exceptions import EncodeError
from ..models.values import VALUE_TYPES, Boolean, Float, Integer, List, Mapping, Null, String, Value
from . import tags


def encode(value: Value) -> bytes:
    """Encode a Value to its canonical tnetstring bytes.

    Every unit is ``<len(payload)>:<payload><tag>``. Lists and mappings use
    the concatenated encodings of their children as payload, with no extra
    separators.

    Args:
        value: Value to encode

    Returns:
        Encoded bytes

    Raises:
        EncodeError: If ``value`` is not a Value instance

    Examples:
        ```python
        from tnetcodec import Integer, List, String, encode

        encode(String(b"hello world"))         # b"11:hello world,"
        encode(Integer(42))                    # b"2:42#"
        encode(List([Integer(1), Integer(2)])) # b"8:1:1#1:2#]"
        ```
    """
    if not isinstance(value, VALUE_TYPES):
        raise EncodeError(
            f"encode() expects a tnetstring Value, got {type(value).__name__}; "
            f"use dumps() for plain Python objects"
        )
    return _encode_value(value)


def _encode_value(value: Value) -> bytes:
    return _unit(_payload(value), tags.TAG_FOR_KIND[value.kind])


def _unit(payload: bytes, tag: bytes) -> bytes:
    return b"%d:%s%s" % (len(payload), payload, tag)


def _payload(value: Value) -> bytes:
    """Render the payload bytes of a single value (without prefix or tag)."""
    if isinstance(value, Null):
        return b""

    if isinstance(value, Boolean):
        return tags.TRUE if value.value else tags.FALSE

    if isinstance(value, Integer):
        return b"%d" % value.value

    # repr() is the shortest text that reads back to the same float
    if isinstance(value, Float):
        return repr(value.value).encode("ascii")

    if isinstance(value, String):
        return value.value

    if isinstance(value, List):
        return b"".join(_encode_value(item) for item in value.items)

    if isinstance(value, Mapping):
        return b"".join(
            _unit(key, tags.STRING) + _encode_value(item) for key, item in value.pairs
        )

    raise EncodeError(f"Unsupported value type {type(value).__name__}")
