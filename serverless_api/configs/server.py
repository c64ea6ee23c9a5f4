"""
Server configuration settings.

HTTP-facing settings: CORS origins, request size limit, port and the
function metadata reported by the health endpoint.

Dependencies: pydantic_settings
System role: HTTP server and function runtime configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseSettings):
    """HTTP server configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    cors_origins: str = Field(
        default="",
        description="Comma-separated list of allowed CORS origins",
    )
    max_request_size: str = Field(
        default="1mb",
        pattern=r"(?i)^\d+(mb|kb|b)?$",
        description="Maximum request body size, e.g. 512kb or 1mb",
    )
    port: int = Field(
        default=8080,
        description="Port for the local development server",
    )
    function_version: str = Field(default="1.0.0", description="Deployed function version")
    function_region: str = Field(default="asia-south1", description="Deployed function region")
    function_memory: str = Field(default="1GB", description="Deployed function memory")

    @property
    def cors_origin_list(self) -> list[str]:
        """Configured CORS origins as a list, blanks dropped."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]
