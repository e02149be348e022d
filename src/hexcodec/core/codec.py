"""
Hexadecimal codec.

Converts between byte sequences and uppercase hex text:

  decode("0x00FF1A") -> b"\\x00\\xff\\x1a"
  encode(b"\\x00\\xff\\x1a") -> "00FF1A"

Encoding maps each nibble to its character with arithmetic only, so the
same instructions run for every nibble value. This keeps the conversion of
key material free of data-dependent branches.
"""

import logging
from typing import Optional, Union

from hexcodec.config.settings import get_settings
from hexcodec.exceptions import InvalidCharacterError, OddLengthError

logger = logging.getLogger(__name__)

HEX_ALPHABET = "0123456789ABCDEF"
HEX_PREFIX = "0x"

_LOWERCASE_DIGITS = str.maketrans("abcdef", "ABCDEF")

BytesLike = Union[bytes, bytearray, memoryview]


def nibble_to_char(b: int) -> str:
    """
    Map a nibble (0-15) to its uppercase hex character without branching.

    (b - 10) >> 31 is -1 for digits and 0 for letters. Masking it with -7
    turns the base offset 55 ('A' - 10) into 48 ('0') for digits only.
    """
    return chr(55 + b + (((b - 10) >> 31) & -7))


class HexCodec:
    """
    Hex encoder/decoder over the alphabet "0123456789ABCDEF".

    Args:
        strict: Reject characters outside the alphabet with
            InvalidCharacterError. When False, an unknown character counts
            as -1 and the byte is truncated to 8 bits, matching legacy
            decoders that never validated their input.
        case_sensitive: Only accept uppercase letters. When False,
            'a'-'f' are treated as 'A'-'F' before lookup.
    """

    __slots__ = ("_strict", "_case_sensitive")

    def __init__(self, strict: bool = True, case_sensitive: bool = True):
        self._strict = strict
        self._case_sensitive = case_sensitive

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def case_sensitive(self) -> bool:
        return self._case_sensitive

    def __repr__(self) -> str:
        return (
            f"HexCodec(strict={self._strict}, "
            f"case_sensitive={self._case_sensitive})"
        )

    def _index(self, value: str, position: int) -> int:
        index = HEX_ALPHABET.find(value[position])
        if index < 0 and self._strict:
            raise InvalidCharacterError(value[position], position)
        return index

    def decode(self, value: Optional[str]) -> bytes:
        """
        Decode a hex string into bytes.

        Args:
            value: Hex string, optionally prefixed with '0x'. None and ""
                both decode to b"".

        Returns:
            bytes: Decoded bytes (half the stripped input length)

        Raises:
            OddLengthError: If the stripped string has odd length
            InvalidCharacterError: If strict and a character is not hex
        """
        if not value:
            return b""

        # Prefixes are stripped repeatedly: "0x0xAB" decodes like "AB".
        while value.startswith(HEX_PREFIX):
            value = value[len(HEX_PREFIX):]

        if len(value) % 2 == 1:
            raise OddLengthError(len(value))

        if not self._case_sensitive:
            value = value.translate(_LOWERCASE_DIGITS)

        result = bytearray(len(value) // 2)
        for i in range(len(result)):
            high = self._index(value, i * 2)
            low = self._index(value, i * 2 + 1)
            result[i] = (high * 16 + low) & 0xFF

        return bytes(result)

    def encode(self, data: Optional[BytesLike]) -> Optional[str]:
        """
        Encode bytes as an uppercase hex string.

        Returns None for None input and "" for empty input.

        Raises:
            TypeError: If data is not bytes-like
        """
        if data is None:
            return None
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise TypeError(f"Expected bytes-like object, got {type(data)}")

        chars = []
        for byte in bytes(data):
            chars.append(nibble_to_char(byte >> 4))
            chars.append(nibble_to_char(byte & 0xF))

        return "".join(chars)


# Global codec instance
_codec = None


def get_codec() -> HexCodec:
    """Get or create the global codec, configured from settings."""
    global _codec
    if _codec is None:
        settings = get_settings()
        _codec = HexCodec(
            strict=settings.strict,
            case_sensitive=settings.case_sensitive,
        )
        logger.debug("Created default codec: %r", _codec)
        if not _codec.strict:
            logger.warning(
                "Legacy hex decoding enabled: invalid characters will "
                "produce incorrect bytes instead of raising FormatError"
            )
    return _codec


def reset_codec() -> None:
    """Drop the global codec so the next call rebuilds it from settings."""
    global _codec
    _codec = None


def decode(value: Optional[str]) -> bytes:
    """Decode hex text with the default codec."""
    return get_codec().decode(value)


def encode(data: Optional[BytesLike]) -> Optional[str]:
    """Encode bytes as hex text with the default codec."""
    return get_codec().encode(data)
