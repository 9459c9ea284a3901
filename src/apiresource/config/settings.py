"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
persisted-representation codec.

Usage:
    from apiresource.config import CodecSettings

    # Load from environment variables (APIRESOURCE_CODEC_*)
    settings = CodecSettings()

    # Or override with explicit values
    settings = CodecSettings(indent=2, sort_keys=True)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install apiresource"
    ) from e


class CodecSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the persisted-representation codec.

    Attributes:
        warn_on_dropped_relationships: Emit DroppedRelationshipWarning when a
            malformed relationship entry is dropped during restore.
        sort_keys: Sort keys in the byte representation.
        indent: JSON indentation (None for compact output).
        encoding: Text encoding of the byte representation.

    Environment Variables:
        APIRESOURCE_CODEC_WARN_ON_DROPPED_RELATIONSHIPS
        APIRESOURCE_CODEC_SORT_KEYS
        APIRESOURCE_CODEC_INDENT
        APIRESOURCE_CODEC_ENCODING
    """

    model_config = SettingsConfigDict(
        env_prefix="APIRESOURCE_CODEC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    warn_on_dropped_relationships: bool = True
    sort_keys: bool = False
    indent: int | None = None
    encoding: str = "utf-8"
