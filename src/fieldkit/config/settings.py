"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the
decoder diagnostics and the clone null policy.

Usage:
    from fieldkit.config import FieldkitSettings

    # Load from environment variables (FIELDKIT_*)
    settings = FieldkitSettings()

    # Or override with explicit values
    settings = FieldkitSettings(copy_none=False)
"""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class FieldkitSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for metadata decoding and cloning.

    Attributes:
        warn_undecodable: Emit UndecodableTokenWarning for every attribute
            token the decoder drops. Dropping itself is unconditional.
        copy_none: Copy fields whose source value is an explicit None. When
            False, None is treated like an absent value and the clone keeps
            its default.

    Environment Variables:
        FIELDKIT_WARN_UNDECODABLE
        FIELDKIT_COPY_NONE
    """

    model_config = SettingsConfigDict(
        env_prefix="FIELDKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    warn_undecodable: bool = False
    copy_none: bool = True
