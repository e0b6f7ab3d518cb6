"""Configurable key codec facade."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..utils.sizing import encoded_size, max_encoded_size
from . import escape, grouped
from .common import BytesLike

if TYPE_CHECKING:
    from ..config import CodecConfig


class KeyCodec:
    """Encodes and decodes descending keys with a configured scheme.

    The codec holds only its immutable configuration, so one instance can
    be shared freely.

    Example:
        >>> codec = KeyCodec()
        >>> codec.encode(b"b") < codec.encode(b"a")
        True
        >>> codec.decode(codec.encode(b"a"))
        b'a'
    """

    def __init__(self, config: CodecConfig | None = None) -> None:
        if config is None:
            # Import here to avoid circular dependency
            from ..config import CodecConfig

            config = CodecConfig()
        self._config = config

    @property
    def config(self) -> CodecConfig:
        return self._config

    @property
    def scheme(self) -> str:
        return self._config.scheme

    def encode(self, data: BytesLike) -> bytes:
        """Encode a key.

        Raises:
            EncodeError: If data is not bytes-like
        """
        if self._config.scheme == "grouped":
            return grouped.encode(data, self._config.group_size)
        return escape.encode(data)

    def decode(self, data: BytesLike) -> bytes:
        """Decode exactly one encoded key.

        Raises:
            DecodeError: If data is not bytes-like
            MalformedEncoding: If data is not a well-formed encoding
        """
        if self._config.scheme == "grouped":
            return grouped.decode(data, self._config.group_size)
        return escape.decode(data)

    def encoded_size(self, data: BytesLike) -> int:
        """Size in bytes of ``self.encode(data)``."""
        return encoded_size(data, self._config)

    def max_encoded_size(self, length: int) -> int:
        """Largest encoded size for any key of ``length`` bytes."""
        return max_encoded_size(length, self._config)

    def __repr__(self) -> str:
        return f"KeyCodec(scheme={self.scheme!r}, group_size={self._config.group_size})"
