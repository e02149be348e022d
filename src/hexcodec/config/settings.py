"""Codec configuration loaded from environment variables and .env files."""

from functools import lru_cache

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from hexcodec.exceptions import ConfigurationError


class CodecSettings(BaseSettings):
    """
    Settings for the default codec.

    Values come from HEXCODEC_* environment variables or a local .env file,
    e.g. HEXCODEC_STRICT=false enables legacy decoding.
    """

    model_config = SettingsConfigDict(
        env_prefix="HEXCODEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict: bool = Field(
        default=True,
        description="Raise on characters outside the hex alphabet",
    )
    case_sensitive: bool = Field(
        default=True,
        description="Only accept uppercase A-F when decoding",
    )


@lru_cache()
def get_settings() -> CodecSettings:
    """Load settings once per process."""
    try:
        return CodecSettings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid codec settings: {e}") from e


def reset_settings() -> None:
    """Clear cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()
