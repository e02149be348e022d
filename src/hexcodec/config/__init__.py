"""Configuration module"""

from hexcodec.config.settings import CodecSettings, get_settings, reset_settings

__all__ = [
    'CodecSettings',
    'get_settings',
    'reset_settings',
]
