"""Order-inverting key codecs for revkey.

This module provides the escape scheme (the default ``encode``/``decode``),
the grouped scheme, and the configurable KeyCodec facade.
"""

from __future__ import annotations

from . import escape, grouped
from .escape import decode, decode_prefix, encode
from .keycodec import KeyCodec

__all__ = [
    "encode",
    "decode",
    "decode_prefix",
    "escape",
    "grouped",
    "KeyCodec",
]
