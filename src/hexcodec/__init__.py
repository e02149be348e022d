"""Main package initialization."""

__version__ = "0.1.0"
__author__ = "hexcodec Team"
__description__ = "Hexadecimal codec with constant-time encoding"

from .core.codec import HEX_ALPHABET, HEX_PREFIX, HexCodec, decode, encode
from .exceptions import (
    FormatError,
    HexCodecException,
    InvalidCharacterError,
    OddLengthError,
)

__all__ = [
    "HEX_ALPHABET",
    "HEX_PREFIX",
    "HexCodec",
    "decode",
    "encode",
    "FormatError",
    "HexCodecException",
    "InvalidCharacterError",
    "OddLengthError",
]
