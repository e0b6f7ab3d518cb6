"""Encoded key size calculation utilities.

This module provides functions to calculate the size of an encoded key
without actually encoding it.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..codec.common import BytesLike, as_bytes
from ..codec.grouped import encoded_length
from ..exceptions import EncodeError

if TYPE_CHECKING:
    from ..config import CodecConfig

# Terminator of the escape scheme
_ESCAPE_OVERHEAD = 2


def encoded_size(data: BytesLike, config: CodecConfig | None = None) -> int:
    """Calculate the encoded size of a key in bytes.

    The escape scheme grows by one byte per 0x00 in the key, so the size
    depends on the content. The grouped scheme depends only on the length.

    Args:
        data: Key to measure
        config: Codec configuration (default escape scheme)

    Returns:
        Size in bytes of the encoded key

    Raises:
        EncodeError: If data is not bytes-like

    Example:
        >>> encoded_size(b"a\\x00")
        5
    """
    data = as_bytes(data, EncodeError)

    if config is not None and config.scheme == "grouped":
        return encoded_length(len(data), config.group_size)

    return len(data) + data.count(0) + _ESCAPE_OVERHEAD


def max_encoded_size(length: int, config: CodecConfig | None = None) -> int:
    """Calculate the worst-case encoded size for any key of ``length`` bytes.

    Args:
        length: Key length in bytes
        config: Codec configuration (default escape scheme)

    Returns:
        Upper bound in bytes

    Raises:
        ValueError: If length is negative

    Example:
        >>> max_encoded_size(3)
        8
    """
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")

    if config is not None and config.scheme == "grouped":
        return encoded_length(length, config.group_size)

    # Every byte may be 0x00 and need escaping
    return 2 * length + _ESCAPE_OVERHEAD
