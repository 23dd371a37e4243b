"""End-to-end integration tests."""

from __future__ import annotations

import pytest

from tnetcodec import (
    Boolean,
    Float,
    Integer,
    List,
    Mapping,
    Null,
    StreamDecoder,
    String,
    Value,
    decode,
    dumps,
    encode,
    encoded_size,
    to_python,
)

# Vectors shared with other tnetstring implementations
KNOWN_UNITS: list[tuple[bytes, Value]] = [
    (b"11:hello world,", String(b"hello world")),
    (b"0:}", Mapping()),
    (b"0:]", List()),
    (b"5:12345#", Integer(12345)),
    (b"12:this is cool,", String(b"this is cool")),
    (b"0:,", String(b"")),
    (b"0:~", Null()),
    (b"4:true!", Boolean(True)),
    (b"5:false!", Boolean(False)),
    (b"10:" + b"\x00" * 10 + b",", String(b"\x00" * 10)),
    (
        b"24:5:12345#5:67890#5:xxxxx,]",
        List([Integer(12345), Integer(67890), String(b"xxxxx")]),
    ),
    (b"18:3:0.1^3:0.2^3:0.4^]", List([Float(0.1), Float(0.2), Float(0.4)])),
]


class TestKnownVectors:
    """Test both directions against published vectors."""

    @pytest.mark.parametrize(("encoded", "value"), KNOWN_UNITS)
    def test_vector(self, encoded: bytes, value: Value) -> None:
        """Test decode and encode agree with the vector."""
        decoded, rest = decode(encoded)
        assert decoded == value
        assert rest == b""
        assert encode(value) == encoded

    def test_nested_mapping(self, sample_value: Mapping, sample_encoded: bytes) -> None:
        """Test the nested mapping vector with embedded NUL bytes."""
        assert decode(sample_encoded) == (sample_value, b"")
        assert encode(sample_value) == sample_encoded

    def test_deep_nesting(self) -> None:
        """Test a string wrapped in 51 single-item lists."""
        value: Value = String(b"hello-there")
        for _ in range(51):
            value = List([value])

        encoded = encode(value)
        assert encoded.startswith(b"243:238:233:228:")
        assert encoded.endswith(b"19:15:11:hello-there," + b"]" * 51)
        assert len(encoded) == encoded_size(value) == 248

        decoded, rest = decode(encoded)
        assert decoded == value
        assert rest == b""


class TestStreamingWorkflow:
    """Test a producer/consumer exchange over a chunked byte stream."""

    def test_request_response_stream(self) -> None:
        """Test messages built from plain objects survive arbitrary chunking."""
        messages = [
            {"method": "ping", "id": 1},
            {"method": "put", "id": 2, "params": {"key": "k", "blob": b"\x00:,]}"}},
            {"method": "stats", "id": 3, "params": [1.5, -2, None, True]},
        ]
        wire = b"".join(dumps(message) for message in messages)

        decoder = StreamDecoder()
        received = []
        for start in range(0, len(wire), 7):
            received.extend(decoder.feed(wire[start : start + 7]))

        assert decoder.pending == 0
        assert len(received) == len(messages)
        assert to_python(received[0]) == {b"method": b"ping", b"id": 1}
        assert received[1].get(b"params").get(b"blob") == String(b"\x00:,]}")
        assert received[2].get(b"params") == List(
            [Float(1.5), Integer(-2), Null(), Boolean(True)]
        )

    def test_remainder_loop(self) -> None:
        """Test repeatedly decoding from the returned remainder."""
        buf = encode(Integer(1)) + encode(String(b"two")) + encode(Null())
        values = []
        while buf:
            value, buf = decode(buf)
            values.append(value)
        assert values == [Integer(1), String(b"two"), Null()]
