"""
Observability module.

Provides the structured logger and request logging middleware.
"""

from serverless_api.observability.logger import (
    LoggerConfig,
    StructuredLogger,
    configure_logging,
)

__all__ = ["LoggerConfig", "StructuredLogger", "configure_logging"]
