"""Escape-and-terminate order-inverting codec.

Every input byte is complemented. The complement of 0x00 is 0xFF, which is
also the leading byte of the terminator, so it is escaped as ``FF 00``.
The value ends with ``FF FF``. Since a terminator compares greater than
any continuation byte (or escape), a shorter key always encodes greater
than the keys it prefixes, and the byte order of everything else is
reversed by the complement.

    >>> encode(b"a")
    b'\\x9e\\xff\\xff'
    >>> decode(b"\\x9e\\xff\\xff")
    b'a'
"""

from __future__ import annotations

import logging

from ..exceptions import DecodeError, EncodeError, MalformedEncoding
from .common import BYTE_MAX, ESCAPED_ZERO, MARKER, TERMINATOR, BytesLike, as_bytes

logger = logging.getLogger(__name__)


def encode(data: BytesLike) -> bytes:
    """Encode a key so that the encoded keys sort in reverse order.

    For any keys ``a`` and ``b``: ``a <= b`` if and only if
    ``encode(a) >= encode(b)``.

    Args:
        data: Key to encode (bytes, bytearray or memoryview, may be empty)

    Returns:
        Encoded key, terminated by ``FF FF``

    Raises:
        EncodeError: If data is not bytes-like

    Example:
        >>> encode(b"")
        b'\\xff\\xff'
        >>> encode(b"\\x00")
        b'\\xff\\x00\\xff\\xff'
    """
    data = as_bytes(data, EncodeError)

    result = bytearray()
    for byte in data:
        if byte == 0:
            result.append(MARKER)
            result.append(ESCAPED_ZERO)
        else:
            result.append(BYTE_MAX - byte)
    result.extend(TERMINATOR)

    return bytes(result)


def decode_prefix(data: BytesLike, offset: int = 0) -> tuple[bytes, int]:
    """Decode one encoded key from the start of a larger buffer.

    Scanning starts at ``offset`` and stops right after the first
    terminator. Anything after it is left for the caller.

    Args:
        data: Buffer holding an encoded key
        offset: Index at which the encoded key starts

    Returns:
        Tuple of (decoded key, index just past the terminator)

    Raises:
        DecodeError: If data is not bytes-like or offset is out of range
        MalformedEncoding: If the bytes do not form a terminated encoding

    Example:
        >>> decode_prefix(b"\\x9e\\xff\\xff\\x9d\\xff\\xff")
        (b'a', 3)
    """
    data = as_bytes(data, DecodeError)

    if not 0 <= offset <= len(data):
        raise DecodeError(f"Offset {offset} out of range for {len(data)} bytes")

    result = bytearray()
    position = offset
    end = len(data)

    while position < end:
        byte = data[position]
        if byte != MARKER:
            result.append(BYTE_MAX - byte)
            position += 1
            continue

        if position + 1 >= end:
            logger.debug("Dangling escape byte at position %d", position)
            raise MalformedEncoding(
                f"Truncated escape sequence at position {position}", position
            )

        follower = data[position + 1]
        if follower == ESCAPED_ZERO:
            result.append(0)
            position += 2
        elif follower == MARKER:
            return bytes(result), position + 2
        else:
            logger.debug("Invalid escape 0xff 0x%02x at position %d", follower, position)
            raise MalformedEncoding(
                f"Invalid escape sequence 0xff 0x{follower:02x} at position {position}",
                position,
            )

    logger.debug("Missing terminator after %d bytes", end - offset)
    raise MalformedEncoding(f"Missing terminator: input ended at position {end}", end)


def decode(data: BytesLike) -> bytes:
    """Decode a single encoded key.

    The whole input must be exactly one encoded key: trailing bytes after
    the terminator are rejected.

    Args:
        data: Encoded key

    Returns:
        Original key

    Raises:
        DecodeError: If data is not bytes-like
        MalformedEncoding: If data is not exactly one well-formed encoding

    Example:
        >>> decode(b"\\xff\\x00\\xff\\xff")
        b'\\x00'
    """
    data = as_bytes(data, DecodeError)
    value, end = decode_prefix(data)

    if end != len(data):
        logger.debug("%d trailing bytes after terminator", len(data) - end)
        raise MalformedEncoding(
            f"Trailing data after terminator: {len(data) - end} bytes at position {end}",
            end,
        )

    return value
