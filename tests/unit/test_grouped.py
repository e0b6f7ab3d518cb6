"""Unit tests for the grouped scheme codec."""

from __future__ import annotations

import pytest

from revkey import (
    DecodeError,
    EmptyEncoding,
    EncodeError,
    InvalidDelimiter,
    InvalidEnding,
    InvalidLength,
    InvalidPadding,
    MalformedEncoding,
)
from revkey.codec import grouped


class TestGroupedEncode:
    """Test grouped scheme encoding."""

    def test_empty(self) -> None:
        """Test empty key is one group of padding."""
        assert grouped.encode(b"") == b"\xff" * 8 + bytes([9])

    def test_single_byte(self) -> None:
        """Test single byte key."""
        assert grouped.encode(b"a") == bytes([0x9E]) + b"\xff" * 7 + bytes([8])

    def test_full_group(self) -> None:
        """Test a key filling exactly one group has no padding."""
        encoded = grouped.encode(b"\x00" * 8)

        assert encoded == b"\xff" * 8 + bytes([1])

    def test_delimiter_between_groups(self) -> None:
        """Test a 0x00 delimiter separates groups."""
        encoded = grouped.encode(b"abcdefghi")

        assert len(encoded) == 18
        assert encoded[8] == 0
        assert encoded[9] == 0xFF - ord("i")
        assert encoded[-1] == 8

    def test_custom_group_size(self) -> None:
        """Test a non-default group size."""
        assert grouped.encode(b"a", group_size=2) == bytes([0x9E, 0xFF, 0x02])
        assert grouped.encode(b"abc", group_size=2) == bytes([0x9E, 0x9D, 0x00, 0x9C, 0xFF, 0x02])

    def test_length_is_multiple_of_stride(self) -> None:
        """Test output length for various key lengths."""
        for length in range(40):
            encoded = grouped.encode(b"x" * length, group_size=5)
            assert len(encoded) % 6 == 0

    def test_invalid_group_size(self) -> None:
        """Test group sizes outside 1-254."""
        for group_size in (0, 255, -1):
            with pytest.raises(ValueError, match="group_size"):
                grouped.encode(b"a", group_size=group_size)

    def test_invalid_type(self) -> None:
        """Test non bytes-like input is rejected."""
        with pytest.raises(EncodeError):
            grouped.encode("a")  # type: ignore[arg-type]


class TestGroupedOrdering:
    """Test grouped scheme order inversion."""

    def test_basic_cases(self) -> None:
        """Test basic ordering cases."""
        assert grouped.encode(b"") > grouped.encode(b" ")
        assert grouped.encode(b"a") > grouped.encode(b"b")
        assert grouped.encode(b"a") > grouped.encode(b"aa")
        assert grouped.encode(b"aa") > grouped.encode(b"abb")

    def test_sample_keys_reversed(self, sample_keys: list[bytes]) -> None:
        """Test sorting by encoding reverses the ascending order."""
        for group_size in (1, 2, 3, 8):
            ordered = sorted(sample_keys, key=lambda key: grouped.encode(key, group_size))
            assert ordered == list(reversed(sample_keys))

    @pytest.mark.parametrize("value", [0, 1, 0x7F, 0xFE])
    def test_repeated_bytes(self, value: int) -> None:
        """Test keys of repeated bytes across group boundaries."""
        for count in range(20):
            shorter = bytes([value]) * count
            longer = bytes([value]) * (count + 1)
            bigger = bytes([value + 1]) * (count + 1)

            assert grouped.encode(b"") >= grouped.encode(shorter)
            assert grouped.encode(shorter) > grouped.encode(longer)
            assert grouped.encode(longer) > grouped.encode(bigger)
            assert grouped.encode(longer) > grouped.encode(bigger + bigger[:1])


class TestGroupedDecode:
    """Test grouped scheme decoding."""

    def test_roundtrip_samples(self) -> None:
        """Test decode inverts encode."""
        for key in (b"", b"A", b"hello", b"hello world!", b"7268"):
            assert grouped.decode(grouped.encode(key)) == key

    def test_roundtrip_repeated(self) -> None:
        """Test keys of every byte value and several lengths."""
        for value in range(256):
            for count in (0, 1, 7, 8, 9, 17):
                key = bytes([value]) * count
                assert grouped.decode(grouped.encode(key)) == key

    def test_roundtrip_group_sizes(self) -> None:
        """Test round-trip across group sizes."""
        key = bytes(range(256))
        for group_size in (1, 2, 7, 100, 254):
            encoded = grouped.encode(key, group_size=group_size)
            assert grouped.decode(encoded, group_size=group_size) == key


class TestGroupedMalformed:
    """Test grouped scheme error reporting."""

    def test_empty(self) -> None:
        """Test empty input."""
        with pytest.raises(EmptyEncoding):
            grouped.decode(b"")

    def test_invalid_length(self) -> None:
        """Test input that is not a whole number of groups."""
        with pytest.raises(InvalidLength) as exc_info:
            grouped.decode(b"xxxxxxxx")

        assert exc_info.value.length == 8
        assert exc_info.value.group_size == 8

    def test_invalid_delimiter(self) -> None:
        """Test a non-zero group delimiter."""
        with pytest.raises(InvalidDelimiter) as exc_info:
            grouped.decode(bytes([1] * 18))

        assert exc_info.value.position == 8
        assert exc_info.value.value == 1

    def test_invalid_padding(self) -> None:
        """Test a padding byte that is not 0xFF."""
        with pytest.raises(InvalidPadding) as exc_info:
            grouped.decode(bytes([2] * 9))

        assert exc_info.value.position == 7
        assert exc_info.value.value == 2

    def test_invalid_ending(self) -> None:
        """Test ending bytes outside 1..group_size+1."""
        with pytest.raises(InvalidEnding) as exc_info:
            grouped.decode(bytes([10] * 9))

        assert exc_info.value.value == 10

        with pytest.raises(InvalidEnding):
            grouped.decode(b"\xff" * 8 + b"\x00")

    def test_mismatched_group_size(self) -> None:
        """Test decoding with a different group size fails."""
        encoded = grouped.encode(b"abc", group_size=8)

        with pytest.raises(MalformedEncoding):
            grouped.decode(encoded, group_size=4)

    def test_errors_are_malformed_encoding(self) -> None:
        """Test every grouped error is a MalformedEncoding and DecodeError."""
        for error in (EmptyEncoding, InvalidLength, InvalidDelimiter, InvalidPadding, InvalidEnding):
            assert issubclass(error, MalformedEncoding)
            assert issubclass(error, DecodeError)
