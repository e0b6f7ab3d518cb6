"""Exception hierarchy for revkey.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from RevkeyError for easy catching of any revkey-specific error.
"""

from __future__ import annotations


class RevkeyError(Exception):
    """Base exception for all revkey errors."""

    pass


class EncodeError(RevkeyError):
    """Raised when a value cannot be encoded.

    Examples:
        - Input is not a bytes-like object (str, int, list, ...)
    """

    pass


class DecodeError(RevkeyError):
    """Raised when decoding cannot proceed.

    Examples:
        - Input is not a bytes-like object
        - Start offset lies outside the buffer
    """

    pass


class MalformedEncoding(DecodeError):
    """Raised when data does not follow the encoded key grammar.

    Examples:
        - Dangling 0xFF at the end of the input
        - 0xFF followed by a byte other than 0x00 or 0xFF
        - Input exhausted before the terminator
        - Trailing bytes after the terminator

    Attributes:
        position: Offset of the offending byte, if known
    """

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


class EmptyEncoding(MalformedEncoding):
    """Raised when a grouped encoding is empty."""

    def __init__(self) -> None:
        super().__init__("Cannot decode empty data", position=0)


class InvalidLength(MalformedEncoding):
    """Raised when a grouped encoding is not a whole number of groups."""

    def __init__(self, length: int, group_size: int) -> None:
        super().__init__(
            f"Invalid length {length}: must be a multiple of {group_size + 1} "
            f"for group size {group_size}"
        )
        self.length = length
        self.group_size = group_size


class InvalidDelimiter(MalformedEncoding):
    """Raised when a group delimiter byte is not 0x00."""

    def __init__(self, position: int, value: int) -> None:
        super().__init__(f"Invalid delimiter 0x{value:02x} at position {position}", position)
        self.value = value


class InvalidPadding(MalformedEncoding):
    """Raised when a padding byte is not 0xFF."""

    def __init__(self, position: int, value: int) -> None:
        super().__init__(f"Invalid padding 0x{value:02x} at position {position}", position)
        self.value = value


class InvalidEnding(MalformedEncoding):
    """Raised when the final byte holds an impossible padding count."""

    def __init__(self, value: int) -> None:
        super().__init__(f"Invalid ending byte 0x{value:02x}")
        self.value = value
