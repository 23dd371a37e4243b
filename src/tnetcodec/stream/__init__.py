"""Streaming helpers for tnetcodec.

This module provides decoding of concatenated tnetstrings, both from a
complete buffer and incrementally from chunks.
"""

from __future__ import annotations

from .buffer import DEFAULT_MAX_BUFFER_SIZE, StreamDecoder, decode_all, iter_decode

__all__ = [
    "StreamDecoder",
    "iter_decode",
    "decode_all",
    "DEFAULT_MAX_BUFFER_SIZE",
]
