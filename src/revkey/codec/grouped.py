"""Grouped order-inverting codec.

Alternate construction with a fixed-size output layout. The complemented
key is split into groups of ``group_size`` bytes separated by 0x00
delimiters. The last group is padded with 0xFF and followed by one byte
holding ``padding + 1``. The output length is always a multiple of
``group_size + 1``:

    [~b0 .. ~b(N-1)] [00] [~bN .. ] [FF ..] [pad+1]

A key that ends inside a group pads with 0xFF where a longer key has a
complemented byte, and a key that ends on a group boundary writes an
ending byte >= 1 where a longer key writes the 0x00 delimiter. Both make
the shorter key encode greater.
"""

from __future__ import annotations

import logging

from ..exceptions import (
    DecodeError,
    EmptyEncoding,
    EncodeError,
    InvalidDelimiter,
    InvalidEnding,
    InvalidLength,
    InvalidPadding,
)
from .common import (
    BYTE_MAX,
    DEFAULT_GROUP_SIZE,
    DELIMITER,
    PADDING,
    BytesLike,
    as_bytes,
    check_group_size,
)

logger = logging.getLogger(__name__)


def encoded_length(length: int, group_size: int = DEFAULT_GROUP_SIZE) -> int:
    """Length of the grouped encoding of a key with ``length`` bytes."""
    groups = (max(length, 1) + group_size - 1) // group_size
    return groups * (group_size + 1)


def encode(data: BytesLike, group_size: int = DEFAULT_GROUP_SIZE) -> bytes:
    """Encode a key with the grouped scheme.

    Args:
        data: Key to encode
        group_size: Bytes per group (1-254)

    Returns:
        Encoded key

    Raises:
        EncodeError: If data is not bytes-like
        ValueError: If group_size is out of range

    Example:
        >>> encode(b"a", group_size=2)
        b'\\x9e\\xff\\x02'
    """
    check_group_size(group_size)
    data = as_bytes(data, EncodeError)

    total = encoded_length(len(data), group_size)
    result = bytearray()

    for index, byte in enumerate(data):
        if index and index % group_size == 0:
            result.append(DELIMITER)
        result.append(BYTE_MAX - byte)

    padding = total - 1 - len(result)
    result.extend(bytes([PADDING]) * padding)
    result.append(padding + 1)

    return bytes(result)


def decode(data: BytesLike, group_size: int = DEFAULT_GROUP_SIZE) -> bytes:
    """Decode a key produced by the grouped :func:`encode`.

    Args:
        data: Encoded key
        group_size: Bytes per group, must match the one used to encode

    Returns:
        Original key

    Raises:
        DecodeError: If data is not bytes-like
        ValueError: If group_size is out of range
        EmptyEncoding: If data is empty
        InvalidLength: If data is not a whole number of groups
        InvalidEnding: If the final byte is 0 or larger than group_size + 1
        InvalidDelimiter: If a group delimiter is not 0x00
        InvalidPadding: If a padding byte is not 0xFF
    """
    check_group_size(group_size)
    data = as_bytes(data, DecodeError)

    if not data:
        logger.debug("Rejecting empty grouped encoding")
        raise EmptyEncoding()

    stride = group_size + 1
    groups = len(data) // stride
    if groups * stride != len(data):
        logger.debug("Rejecting grouped encoding of length %d", len(data))
        raise InvalidLength(len(data), group_size)

    ending = data[-1]
    if ending == 0 or ending > stride:
        logger.debug("Rejecting ending byte 0x%02x", ending)
        raise InvalidEnding(ending)

    decoded_length = groups * group_size - (ending - 1)
    result = bytearray()

    for position, byte in enumerate(data):
        if (position + 1) % stride == 0:
            if position + 1 != len(data) and byte != DELIMITER:
                logger.debug("Invalid delimiter 0x%02x at position %d", byte, position)
                raise InvalidDelimiter(position, byte)
        elif len(result) == decoded_length:
            if byte != PADDING:
                logger.debug("Invalid padding 0x%02x at position %d", byte, position)
                raise InvalidPadding(position, byte)
        else:
            result.append(BYTE_MAX - byte)

    return bytes(result)
