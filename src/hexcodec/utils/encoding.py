"""Encoding and decoding utilities."""

from typing import Union

from hexcodec.core.codec import HEX_PREFIX, HexCodec, encode
from hexcodec.exceptions import FormatError

# Strict, accepts lowercase digits regardless of the default codec's settings
_helper_codec = HexCodec(strict=True, case_sensitive=False)


def bytes_to_hex(data: bytes) -> str:
    """
    Convert bytes to a prefixed hexadecimal string.

    Unlike encode(), None is not passed through: a prefixed string always
    carries data.

    Args:
        data: Bytes to convert

    Returns:
        str: Uppercase hexadecimal string with '0x' prefix

    Raises:
        TypeError: If data is None or not bytes-like
    """
    if data is None:
        raise TypeError("bytes_to_hex() does not accept None")
    return HEX_PREFIX + encode(data)


def hex_to_bytes(hex_str: str) -> bytes:
    """
    Convert hexadecimal string to bytes.

    Args:
        hex_str: Hexadecimal string (with or without '0x' prefix, any case)

    Returns:
        bytes: Decoded bytes

    Raises:
        FormatError: If hex string is invalid
    """
    return _helper_codec.decode(hex_str)


def is_hex(value: str) -> bool:
    """Check whether a string decodes under strict, case-insensitive rules."""
    try:
        _helper_codec.decode(value)
    except FormatError:
        return False
    return True


def ensure_hex_string(data: Union[bytes, bytearray, str]) -> str:
    """
    Normalize bytes or hex text to a '0x'-prefixed hex string.

    Bytes are encoded. Text is validated and prefixed if needed; its
    digits are returned unchanged.

    Raises:
        FormatError: If text is not valid hex
        TypeError: If data is neither bytes nor str
    """
    if isinstance(data, (bytes, bytearray)):
        return bytes_to_hex(data)
    if isinstance(data, str):
        _helper_codec.decode(data)
        return data if data.startswith(HEX_PREFIX) else HEX_PREFIX + data
    raise TypeError(f"Expected bytes or str, got {type(data)}")
