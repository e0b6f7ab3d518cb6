#!/usr/bin/env python3
"""Basic usage example for revkey.

This example demonstrates:
1. Encoding keys so they sort in descending order
2. Decoding them back
3. Choosing a scheme with CodecConfig
4. Handling malformed input
"""

from __future__ import annotations

from revkey import CodecConfig, KeyCodec, MalformedEncoding, decode, encode, encoded_size


def main() -> None:
    """Run the basic usage example."""
    print("=" * 60)
    print("revkey Basic Usage Example")
    print("=" * 60)
    print()

    keys = [b"", b"a", b"aa", b"b", b"\x00"]

    print("1. Encoding keys (escape scheme)...")
    for key in keys:
        encoded = encode(key)
        print(f"   {key!r:10} -> {encoded.hex(' ')} ({encoded_size(key)} bytes)")
    print()

    print("2. Sorting by encoded key...")
    print(f"   Ascending:  {sorted(keys)}")
    print(f"   By encode:  {sorted(keys, key=encode)}")
    print()

    print("3. Round-trip...")
    for key in keys:
        assert decode(encode(key)) == key
    print("   All keys decoded correctly")
    print()

    print("4. Grouped scheme...")
    codec = KeyCodec(CodecConfig(scheme="grouped", group_size=4))
    for key in keys:
        print(f"   {key!r:10} -> {codec.encode(key).hex(' ')}")
    print()

    print("5. Malformed input...")
    try:
        decode(b"\xff\x01")
    except MalformedEncoding as e:
        print(f"   Rejected: {e}")
    print()


if __name__ == "__main__":
    main()
