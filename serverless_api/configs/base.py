"""
Base configuration settings.

Provides common configuration inherited by all specific config modules.
Handles environment detection and shared defaults.

Dependencies: pydantic_settings
System role: Foundation for all configuration classes
"""

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict

LOG_LEVELS = ("debug", "info", "warn", "error")
ENVIRONMENTS = ("development", "production")


class BaseSettings(PydanticBaseSettings):
    """Base configuration class with common settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    environment: str = Field(
        default="development",
        validation_alias=AliasChoices("ENVIRONMENT", "NODE_ENV"),
        description="Application environment (development, production)",
    )
    log_level: str = Field(
        default="info",
        description="Logging threshold (debug, info, warn, error)",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def _normalize_environment(cls, value: str) -> str:
        environment = str(value).strip().lower()
        if environment not in ENVIRONMENTS:
            raise ValueError(
                f"Unknown environment '{value}'. Must be 'development' or 'production'"
            )
        return environment

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = str(value).strip().lower()
        if level == "warning":
            level = "warn"
        if level not in LOG_LEVELS:
            raise ValueError(f"Log level must be one of: {', '.join(LOG_LEVELS)}")
        return level

    @property
    def is_development(self) -> bool:
        """True when running with the verbose development configuration."""
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"
