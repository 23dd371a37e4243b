"""tnetcodec: Tagged Netstring Codec

A Python library for the tnetstring (tagged netstring) serialization format:
self-describing, length-prefixed and binary-safe.

Every unit is ``<length>:<payload><tag>`` where the tag is one of
``~`` null, ``!`` boolean, ``#`` integer, ``^`` float, ``,`` string,
``]`` list and ``}`` mapping.

Key Features:
- Immutable Pydantic value model with one variant per tag
- Canonical encoder and strict recursive-descent decoder
- Decoder returns the unconsumed remainder for concatenated streams
- Plain-object ``dumps``/``loads`` helpers

Quick Start:
    >>> from tnetcodec import Integer, List, String, decode, encode
    >>>
    >>> encode(List([Integer(1), Integer(2)]))
    b'8:1:1#1:2#]'
    >>> decode(b"3:abc,extra")
    (String(value=b'abc'), b'extra')
"""

from __future__ import annotations

from .codec import DEFAULT_LIMITS, DecodeLimits, decode, decode_at, dumps, encode, loads
from .exceptions import EncodeError, FormatError, IncompleteError, TnetcodecError
from .models import (
    VALUE_TYPES,
    Boolean,
    Float,
    Integer,
    List,
    Mapping,
    Null,
    String,
    Value,
    from_python,
    to_python,
)
from .stream import StreamDecoder, decode_all, iter_decode
from .utils import encoded_size, payload_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "decode_at",
    "DecodeLimits",
    "DEFAULT_LIMITS",
    # Values
    "Value",
    "VALUE_TYPES",
    "Null",
    "Boolean",
    "Integer",
    "Float",
    "String",
    "List",
    "Mapping",
    # Plain objects
    "dumps",
    "loads",
    "from_python",
    "to_python",
    # Exceptions
    "TnetcodecError",
    "FormatError",
    "IncompleteError",
    "EncodeError",
    # Streaming
    "StreamDecoder",
    "iter_decode",
    "decode_all",
    # Sizing
    "encoded_size",
    "payload_size",
    # Version
    "__version__",
]
