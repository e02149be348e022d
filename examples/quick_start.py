#!/usr/bin/env python3
"""
Quick start guide for the hexcodec package.

Run this to see encode/decode and the error cases.
"""

import secrets
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hexcodec import HexCodec, FormatError, decode, encode


def main():
    """Run a simple example of the codec."""
    
    print("=" * 70)
    print("HEXCODEC QUICK START EXAMPLE")
    print("=" * 70)
    print()
    
    # Step 1: Encode a key
    print("Step 1: Encode a random 32-byte key")
    print("-" * 70)
    key = secrets.token_bytes(32)
    text = encode(key)
    print(f"✓ Key: {text}")
    print()
    
    # Step 2: Decode it back
    print("Step 2: Decode with and without the 0x prefix")
    print("-" * 70)
    assert decode(text) == key
    assert decode("0x" + text) == key
    print("✓ Both forms decode to the original key")
    print()
    
    # Step 3: Empty vs missing
    print("Step 3: Empty and missing input")
    print("-" * 70)
    print(f"  encode(b'') = {encode(b'')!r}")
    print(f"  encode(None) = {encode(None)!r}")
    print(f"  decode('0x') = {decode('0x')!r}")
    print()
    
    # Step 4: Malformed input
    print("Step 4: Malformed input")
    print("-" * 70)
    for bad in ("ABC", "0xZZ"):
        try:
            decode(bad)
        except FormatError as e:
            print(f"✓ {bad!r} rejected: {e}")
    print(f"  legacy decode('0G') = {HexCodec(strict=False).decode('0G')!r}")
    print()


if __name__ == "__main__":
    main()
