"""Configuration module using Pydantic Settings.

Usage:
    from apiresource.config import CodecSettings

    settings = CodecSettings(sort_keys=True)
"""

from apiresource.config.settings import CodecSettings

__all__ = [
    "CodecSettings",
]
