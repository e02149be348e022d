"""Custom exceptions for the hexcodec package."""


class HexCodecException(Exception):
    """Base exception for all hexcodec errors."""
    pass


# Format Errors
class FormatError(HexCodecException, ValueError):
    """Raised when a hex string is malformed."""
    pass


class OddLengthError(FormatError):
    """Raised when a hex string has an odd number of nibbles."""

    def __init__(self, length: int):
        self.length = length
        super().__init__(
            f"Hex string must have even number of characters, got {length}"
        )


class InvalidCharacterError(FormatError):
    """Raised when a hex string contains a character outside the alphabet."""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(
            f"Invalid hex character {character!r} at position {position}"
        )


# Configuration Errors
class ConfigurationError(HexCodecException):
    """Raised when codec settings are invalid."""
    pass
