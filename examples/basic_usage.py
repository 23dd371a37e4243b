#!/usr/bin/env python3
"""Basic usage example for tnetcodec.

This example demonstrates:
1. Building a value tree
2. Encoding to tnetstring bytes
3. Decoding back, including the remainder
4. Feeding a chunked stream into StreamDecoder
"""

from __future__ import annotations

from tnetcodec import (
    Boolean,
    FormatError,
    Integer,
    List,
    Mapping,
    StreamDecoder,
    String,
    decode,
    dumps,
    encode,
    encoded_size,
)


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("tnetcodec Basic Usage Example")
    print("=" * 60)
    print()

    print("1. Building a value...")
    status = Mapping(
        [
            (b"vehicle", String(b"auv-7")),
            (b"depth_cm", Integer(2500)),
            (b"active", Boolean(True)),
            (b"waypoints", List([Integer(1), Integer(2), Integer(3)])),
        ]
    )
    print(f"   {status!r}")
    print()

    print("2. Encoding...")
    data = encode(status)
    print(f"   {data!r}")
    print(f"   {len(data)} bytes (encoded_size says {encoded_size(status)})")
    print()

    print("3. Decoding with trailing bytes...")
    decoded, rest = decode(data + b"0:~")
    print(f"   Round trip equal: {decoded == status}")
    print(f"   Remainder: {rest!r}")
    print()

    print("4. Streaming plain objects in 5-byte chunks...")
    wire = dumps({"seq": 1}) + dumps({"seq": 2})
    decoder = StreamDecoder()
    for start in range(0, len(wire), 5):
        for value in decoder.feed(wire[start : start + 5]):
            print(f"   Received seq={value.get(b'seq').value}")
    print()

    print("5. Malformed input...")
    try:
        decode(b"5:maybe!")
    except FormatError as e:
        print(f"   FormatError: {e}")


if __name__ == "__main__":
    main()
