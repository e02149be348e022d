"""Hex codec core"""

from hexcodec.core.codec import (
    HEX_ALPHABET,
    HEX_PREFIX,
    HexCodec,
    decode,
    encode,
    get_codec,
    nibble_to_char,
    reset_codec,
)

__all__ = [
    'HEX_ALPHABET',
    'HEX_PREFIX',
    'HexCodec',
    'decode',
    'encode',
    'get_codec',
    'nibble_to_char',
    'reset_codec',
]
