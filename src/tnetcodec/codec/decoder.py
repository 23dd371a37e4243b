"""Tnetstring decoder.

This module provides the decode() function that parses one tnetstring unit
from the front of a byte buffer and hands back whatever follows it.

The parser is a single recursive descent over the original buffer. Each call
works on an explicit ``[start, end)`` window, so a list or mapping payload
bounds its children and the remainder is never guessed.
"""

from __future__ import annotations

import math
import re
from typing import Union

from ..exceptions import FormatError, IncompleteError
from ..models.values import Boolean, Float, Integer, List, Mapping, Null, String, Value
from . import tags
from .limits import DEFAULT_LIMITS, DecodeLimits

Buffer = Union[bytes, bytearray, memoryview]

_INTEGER_RE = re.compile(rb"[-+]?[0-9]+")
_FLOAT_RE = re.compile(rb"[-+]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][-+]?[0-9]+)?")

_TAG_CHOICES = "one of " + " ".join(tag.decode("ascii") for tag in tags.TAG_FOR_KIND.values())


def decode(data: Buffer, *, limits: DecodeLimits | None = None) -> tuple[Value, bytes]:
    """Decode the first tnetstring unit in ``data``.

    Args:
        data: Bytes holding one or more concatenated units
        limits: Optional bounds on prefix size and nesting depth

    Returns:
        Tuple of (decoded value, remaining bytes after the unit)

    Raises:
        TypeError: If ``data`` is not a bytes-like object
        IncompleteError: If ``data`` ends before the first unit is complete
        FormatError: If ``data`` does not start with a well-formed unit

    Examples:
        ```python
        from tnetcodec import decode

        value, rest = decode(b"3:abc,extra")
        # value == String(b"abc"), rest == b"extra"

        value, rest = decode(b"0:~")
        # value == Null(), rest == b""
        ```
    """
    buf = _as_bytes(data)
    value, end = decode_at(buf, 0, limits=limits)
    return value, buf[end:]


def decode_at(buf: bytes, offset: int = 0, *, limits: DecodeLimits | None = None) -> tuple[Value, int]:
    """Decode the unit starting at ``offset`` without copying the remainder.

    Args:
        buf: Buffer holding the unit
        offset: Position of the first length-prefix digit
        limits: Optional bounds on prefix size and nesting depth

    Returns:
        Tuple of (decoded value, offset just past the unit)

    Raises:
        IncompleteError: If ``buf`` ends before the unit is complete
        FormatError: If the bytes at ``offset`` are not a well-formed unit
    """
    if limits is None:
        limits = DEFAULT_LIMITS

    if offset >= len(buf):
        raise IncompleteError("Empty input", offset=offset, expected="length prefix", found=b"")

    try:
        return _parse(buf, offset, len(buf), limits, 0)
    except RecursionError as e:
        raise FormatError("Nesting too deep for the interpreter stack", offset=offset) from e


def _as_bytes(data: Buffer) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"decode() expects bytes, bytearray or memoryview, got {type(data).__name__}")


def _fail(top: bool, message: str, *, offset: int, expected: str, found: object) -> FormatError:
    """Build the error for input that stops short.

    Only the outermost unit can be completed by more input. Inside a list or
    mapping the enclosing payload length is already final.
    """
    error_class = IncompleteError if top else FormatError
    return error_class(message, offset=offset, expected=expected, found=found)


def _first_non_digit(buf: bytes, start: int, stop: int) -> int:
    for pos in range(start, stop):
        if not 0x30 <= buf[pos] <= 0x39:
            return pos
    return stop


def _read_length(buf: bytes, start: int, end: int, limits: DecodeLimits, top: bool) -> tuple[int, int]:
    """Parse the decimal length prefix.

    Returns:
        Tuple of (payload length, offset of the first payload byte)
    """
    max_digits = limits.max_length_digits
    window_end = min(end, start + max_digits + 1)
    colon = buf.find(tags.LENGTH_SEPARATOR, start, window_end)

    if colon == -1:
        bad = _first_non_digit(buf, start, window_end)
        if bad < window_end:
            raise FormatError(
                "Invalid length prefix",
                offset=bad,
                expected="digit or ':'",
                found=buf[bad : bad + 1],
            )
        if window_end - start > max_digits:
            raise FormatError(
                "Length prefix too long",
                offset=start,
                expected=f"at most {max_digits} digits",
                found=buf[start:window_end],
            )
        raise _fail(top, "Unterminated length prefix", offset=end, expected="':'", found=b"")

    if colon == start:
        raise FormatError("Missing length prefix", offset=start, expected="digit", found=b":")

    bad = _first_non_digit(buf, start, colon)
    if bad < colon:
        raise FormatError(
            "Invalid length prefix", offset=bad, expected="digit or ':'", found=buf[bad : bad + 1]
        )

    if buf[start] == 0x30 and colon - start > 1:
        raise FormatError(
            "Length prefix has a leading zero",
            offset=start,
            expected="no padding zeros",
            found=buf[start:colon],
        )

    return int(buf[start:colon]), colon + 1


def _parse(buf: bytes, start: int, end: int, limits: DecodeLimits, depth: int) -> tuple[Value, int]:
    """Parse one unit from ``buf[start:end]``.

    Returns:
        Tuple of (value, offset just past the unit's tag byte)
    """
    top = depth == 0
    length, payload_start = _read_length(buf, start, end, limits, top)
    payload_end = payload_start + length

    if payload_end >= end:
        raise _fail(
            top,
            "Truncated payload",
            offset=payload_start,
            expected=f"{length} payload bytes and a type tag",
            found=f"{max(end - payload_start, 0)} bytes",
        )

    tag = buf[payload_end]
    kind = tags.KIND_FOR_TAG.get(tag)

    if kind == "list" or kind == "mapping":
        if depth >= limits.max_depth:
            raise FormatError(
                "Nesting too deep",
                offset=start,
                expected=f"at most {limits.max_depth} levels",
                found=depth + 1,
            )
        if kind == "list":
            value: Value = _parse_list(buf, payload_start, payload_end, limits, depth + 1)
        else:
            value = _parse_mapping(buf, payload_start, payload_end, limits, depth + 1)
        return value, payload_end + 1

    payload = buf[payload_start:payload_end]

    if kind == "string":
        value = String(payload)
    elif kind == "null":
        if payload:
            raise FormatError(
                "Invalid null payload", offset=payload_start, expected="empty payload", found=payload
            )
        value = Null()
    elif kind == "boolean":
        if payload == tags.TRUE:
            value = Boolean(True)
        elif payload == tags.FALSE:
            value = Boolean(False)
        else:
            raise FormatError(
                "Invalid boolean payload",
                offset=payload_start,
                expected="b'true' or b'false'",
                found=payload,
            )
    elif kind == "integer":
        value = Integer(_parse_int(payload, payload_start))
    elif kind == "float":
        value = Float(_parse_float(payload, payload_start))
    else:
        raise FormatError(
            "Unknown type tag", offset=payload_end, expected=_TAG_CHOICES, found=bytes([tag])
        )

    return value, payload_end + 1


def _parse_int(payload: bytes, offset: int) -> int:
    if _INTEGER_RE.fullmatch(payload) is None:
        raise FormatError(
            "Invalid integer payload", offset=offset, expected="decimal integer", found=payload
        )
    try:
        return int(payload)
    except ValueError as e:
        # Interpreter limit on int string conversion
        raise FormatError(
            f"Integer payload rejected: {e}", offset=offset, expected="decimal integer", found=payload
        ) from e


def _parse_float(payload: bytes, offset: int) -> float:
    if _FLOAT_RE.fullmatch(payload) is None:
        raise FormatError(
            "Invalid float payload", offset=offset, expected="decimal number", found=payload
        )
    result = float(payload)
    if not math.isfinite(result):
        raise FormatError(
            "Float payload out of range", offset=offset, expected="finite number", found=payload
        )
    return result


def _parse_list(buf: bytes, start: int, end: int, limits: DecodeLimits, depth: int) -> List:
    items = []
    offset = start
    while offset < end:
        item, offset = _parse(buf, offset, end, limits, depth)
        items.append(item)
    return List(items)


def _parse_mapping(buf: bytes, start: int, end: int, limits: DecodeLimits, depth: int) -> Mapping:
    pairs = []
    offset = start
    while offset < end:
        key_offset = offset
        key, offset = _parse(buf, offset, end, limits, depth)
        if not isinstance(key, String):
            raise FormatError(
                "Mapping key must be a string",
                offset=key_offset,
                expected="',' tagged key",
                found=key.kind,
            )
        if offset >= end:
            raise FormatError(
                "Mapping key has no value",
                offset=key_offset,
                expected="value after key",
                found=key.value,
            )
        item, offset = _parse(buf, offset, end, limits, depth)
        pairs.append((key.value, item))
    return Mapping(pairs)
