"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    ServiceContainer,
    get_container,
    get_course_service,
    get_logger,
    get_settings_dependency,
    get_user_service,
)

__all__ = [
    "ServiceContainer",
    "get_container",
    "get_course_service",
    "get_logger",
    "get_settings_dependency",
    "get_user_service",
]
