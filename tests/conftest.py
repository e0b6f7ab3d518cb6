"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from revkey import CodecConfig


@pytest.fixture
def sample_keys() -> list[bytes]:
    """Keys covering empty, prefix, zero and 0xFF cases, in ascending order."""
    return sorted(
        [
            b"",
            b"\x00",
            b"\x00\x00",
            b"\x00\x01",
            b"\x01",
            b"a",
            b"aa",
            b"ab",
            b"b",
            b"user:42",
            b"user:420",
            b"\xfe\xff",
            b"\xff",
            b"\xff\x00",
            b"\xff\xff",
        ]
    )


@pytest.fixture
def grouped_config() -> CodecConfig:
    """Grouped scheme configuration with the default group size."""
    return CodecConfig(scheme="grouped")
