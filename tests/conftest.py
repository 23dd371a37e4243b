"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from tnetcodec import Boolean, Integer, List, Mapping, Null, String


@pytest.fixture
def sample_value() -> Mapping:
    """Nested mapping covering most variants, including embedded NUL bytes."""
    return Mapping(
        [
            (
                b"hello",
                List(
                    [
                        Integer(12345678901),
                        String(b"this"),
                        Boolean(True),
                        Null(),
                        String(b"\x00\x00\x00\x00"),
                    ]
                ),
            )
        ]
    )


@pytest.fixture
def sample_encoded() -> bytes:
    """Canonical encoding of sample_value."""
    return b"51:5:hello,39:11:12345678901#4:this,4:true!0:~4:\x00\x00\x00\x00,]}"
