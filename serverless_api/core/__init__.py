"""
Core domain module.

Contains the exception hierarchy shared by schemas, formatters and routes.
"""

from serverless_api.core.exceptions import (
    ApiError,
    InvalidInputError,
    PaginationError,
    PolicyError,
    ResourceNotFoundError,
)

__all__ = [
    "ApiError",
    "InvalidInputError",
    "PaginationError",
    "PolicyError",
    "ResourceNotFoundError",
]
