"""Shared constants and input handling for the key codecs."""

from __future__ import annotations

from typing import Union

from ..exceptions import RevkeyError

BytesLike = Union[bytes, bytearray, memoryview]

BYTE_MAX = 0xFF

# Escape scheme markers
MARKER = 0xFF
ESCAPED_ZERO = 0x00
TERMINATOR = bytes([MARKER, MARKER])

# Grouped scheme
DEFAULT_GROUP_SIZE = 8
MIN_GROUP_SIZE = 1
MAX_GROUP_SIZE = 254
DELIMITER = 0x00
PADDING = 0xFF


def as_bytes(data: BytesLike, error: type[RevkeyError]) -> bytes:
    """Return data as immutable bytes, raising error for non bytes-like input.

    Args:
        data: Value passed by the caller
        error: Exception class to raise on a type mismatch

    Returns:
        The same content as bytes

    Raises:
        error: If data is not bytes, bytearray or memoryview
    """
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise error(f"Expected a bytes-like object, got {type(data).__name__}")


def check_group_size(group_size: int) -> None:
    """Validate a grouped scheme group size.

    Raises:
        ValueError: If group_size is not an int in [1, 254]
    """
    if isinstance(group_size, bool) or not isinstance(group_size, int):
        raise ValueError(f"group_size must be an integer, got {type(group_size).__name__}")
    if not MIN_GROUP_SIZE <= group_size <= MAX_GROUP_SIZE:
        raise ValueError(
            f"group_size must be {MIN_GROUP_SIZE}-{MAX_GROUP_SIZE}, got {group_size}"
        )
