"""
Observability configuration settings.

Settings for log rendering. Both flags default to the environment's
behaviour (pretty and colored in development, compact in production)
and may be forced either way.

Dependencies: pydantic_settings
System role: Logging configuration for the structured logger
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ObservabilitySettings(BaseSettings):
    """Observability configuration for the structured logger."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    pretty: bool | None = Field(
        default=None,
        description="Force pretty (multi-line) output on or off",
    )
    colors: bool | None = Field(
        default=None,
        description="Force ANSI colors on or off (pretty mode only)",
    )
