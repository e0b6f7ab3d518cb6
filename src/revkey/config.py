"""Codec configuration.

This module provides the pydantic model used to select and parameterise
a key encoding scheme.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .codec.common import DEFAULT_GROUP_SIZE, MAX_GROUP_SIZE, MIN_GROUP_SIZE

Scheme = Literal["escape", "grouped"]


class CodecConfig(BaseModel):
    """Configuration for a :class:`~revkey.codec.KeyCodec`.

    Attributes:
        scheme: Encoding scheme (default "escape").
            - "escape": complement every byte, escape 0x00 as ``FF 00`` and
              terminate with ``FF FF``. Output is ``len + zeros + 2`` bytes.
            - "grouped": complement every byte in groups of ``group_size``
              separated by 0x00, pad the last group with 0xFF and end with
              the padding count. Output is a multiple of ``group_size + 1``.
        group_size: Bytes per group for the grouped scheme (1-254, default 8).
            Ignored by the escape scheme.

    Examples:
        ```python
        from revkey import CodecConfig, KeyCodec

        codec = KeyCodec(CodecConfig(scheme="grouped", group_size=16))
        key = codec.encode(b"user:42")
        ```
    """

    model_config = ConfigDict(
        # Configs are shared between codecs
        frozen=True,
        # Catch typos such as group_szie=4
        extra="forbid",
        strict=True,
    )

    scheme: Scheme = "escape"
    group_size: int = Field(default=DEFAULT_GROUP_SIZE, ge=MIN_GROUP_SIZE, le=MAX_GROUP_SIZE)
