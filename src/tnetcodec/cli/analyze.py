"""Tnetstring file analysis CLI commands."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from ..codec.decoder import decode_at
from ..models.values import List, Mapping, Value
from ..utils.sizing import encoded_size, payload_size

logger = logging.getLogger(__name__)


def read_input(file_path: str) -> bytes:
    """Read raw bytes from a file, or from stdin when ``file_path`` is ``-``.

    Raises:
        FileNotFoundError: If the file does not exist
        OSError: If the path cannot be read (a directory, no permission)
    """
    if file_path == "-":
        return sys.stdin.buffer.read()

    path = Path(file_path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    return path.read_bytes()


def analyze_bytes(data: bytes) -> None:
    """Print one summary line per tnetstring unit in ``data``.

    Raises:
        FormatError: If a unit is malformed or the data ends inside a unit
    """
    print("|" * 7, "tnetcodec: tnetstring codec", "|" * 7)

    offset = 0
    count = 0
    while offset < len(data):
        value, end = decode_at(data, offset)
        print(_describe(count, offset, value))
        logger.debug("Unit %d spans bytes %d-%d", count, offset, end)
        offset = end
        count += 1

    print(f"{count} unit{'s' if count != 1 else ''} decoded, {len(data)} bytes total.")


def check_bytes(data: bytes) -> int:
    """Validate ``data`` as a clean concatenation of units.

    Returns:
        Number of units found

    Raises:
        FormatError: If a unit is malformed or the data ends inside a unit
    """
    offset = 0
    count = 0
    while offset < len(data):
        _, offset = decode_at(data, offset)
        count += 1
    return count


def _describe(index: int, offset: int, value: Value) -> str:
    line = (
        f"{index:>5}. @{offset:<8} {value.kind:<8} "
        f"{encoded_size(value):>8} bytes (payload {payload_size(value)})"
    )
    if isinstance(value, (List, Mapping)):
        noun = "item" if isinstance(value, List) else "pair"
        line += f", {len(value)} {noun}{'s' if len(value) != 1 else ''}"
    return line
