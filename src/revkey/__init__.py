"""revkey: Order-Inverting Key Codec

A Python library that maps byte strings to byte strings whose
lexicographic order is reversed, and back again. Use it to build
descending sort keys for ordered stores that only scan ascending.

Key Features:
- Exact inversion of bytes ordering, prefixes included
- Self-delimiting encoding (no length field)
- Escape scheme (default) and fixed-layout grouped scheme
- Pure functions, safe to share across threads

Quick Start:
    >>> from revkey import encode, decode
    >>>
    >>> keys = [b"", b"a", b"aa", b"b"]
    >>> sorted(keys, key=encode)
    [b'b', b'aa', b'a', b'']
    >>> decode(encode(b"aa"))
    b'aa'
"""

from __future__ import annotations

from .codec import KeyCodec, decode, decode_prefix, encode
from .config import CodecConfig
from .exceptions import (
    DecodeError,
    EmptyEncoding,
    EncodeError,
    InvalidDelimiter,
    InvalidEnding,
    InvalidLength,
    InvalidPadding,
    MalformedEncoding,
    RevkeyError,
)
from .utils import encoded_size, max_encoded_size

__version__ = "0.1.0"

__all__ = [
    # Core API
    "encode",
    "decode",
    "decode_prefix",
    # Configurable codec
    "CodecConfig",
    "KeyCodec",
    # Exceptions
    "RevkeyError",
    "EncodeError",
    "DecodeError",
    "MalformedEncoding",
    "EmptyEncoding",
    "InvalidLength",
    "InvalidDelimiter",
    "InvalidPadding",
    "InvalidEnding",
    # Sizing
    "encoded_size",
    "max_encoded_size",
    # Version
    "__version__",
]
