"""
Exception hierarchy for the serverless API.

Provides layered exception structure for request-level errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception taxonomy across schemas, formatters and routes
"""

from typing import Any


class ApiError(Exception):
    """Base exception for all serverless API errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return the human-readable message."""
        return self.message


class InvalidInputError(ApiError):
    """Raised when request input fails a schema (shape) check."""

    def __init__(self, errors: list[Any], details: dict[str, Any] | None = None) -> None:
        """
        Initialize shape error from field-level errors.

        Args:
            errors: Ordered FieldError instances, one per violated field
            details: Additional context
        """
        self.errors = list(errors)
        message = "; ".join(error.message for error in self.errors) or "Invalid request"
        super().__init__(message, details)


class PolicyError(ApiError):
    """Raised when well-formed input violates a business rule."""

    pass


class PaginationError(PolicyError):
    """Raised when pagination parameters fall outside the accepted bounds."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else None
        super().__init__(message, details)


class ResourceNotFoundError(ApiError):
    """Raised when a syntactically valid identifier matches no record."""

    def __init__(self, resource: str, resource_id: int) -> None:
        """
        Initialize not found error.

        Args:
            resource: Resource kind label, e.g. "Course"
            resource_id: Identifier that was looked up
        """
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"{resource} not found",
            {"resource": resource.lower(), "id": resource_id},
        )
