"""Tnetstring codec.

This module provides the encoder, the streaming-friendly decoder and the
plain-object convenience functions built on top of them.
"""

from __future__ import annotations

from .decoder import decode, decode_at
from .encoder import encode
from .limits import DEFAULT_LIMITS, DecodeLimits
from .native import dumps, loads

__all__ = [
    "encode",
    "decode",
    "decode_at",
    "dumps",
    "loads",
    "DecodeLimits",
    "DEFAULT_LIMITS",
]
