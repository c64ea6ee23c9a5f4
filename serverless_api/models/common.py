"""
Common response models and utilities.

Generic response envelopes, pagination models and error schemas.
Every envelope carries the success discriminant and a timestamp.

Dependencies: pydantic
System role: Common API response structures
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")


class FieldError(BaseModel):
    """A single field-level validation failure."""

    field: str = Field(description="Name of the offending field")
    message: str = Field(description="Human-readable message citing the violated bound")


class PaginationParams(BaseModel):
    """Normalized page/limit pair."""

    page: int
    limit: int


class PaginationMeta(BaseModel):
    """Pagination metadata derived from the current total."""

    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int = Field(alias="totalPages")


class SuccessResponse(BaseModel, Generic[T]):
    """Generic success response wrapper."""

    success: bool = True
    message: str | None = None
    data: T
    timestamp: str


class PaginatedResponse(BaseModel, Generic[T]):
    """Generic paginated response wrapper."""

    success: bool = True
    data: list[T]
    pagination: PaginationMeta
    timestamp: str


class ErrorResponse(BaseModel):
    """Error response schema."""

    success: bool = False
    error: str = Field(description="Error message")
    details: list[FieldError] | None = Field(default=None, description="Field-level errors")
    timestamp: str
