"""Domain records, pagination models and response envelopes."""

from serverless_api.models.common import (
    ErrorResponse,
    FieldError,
    PaginatedResponse,
    PaginationMeta,
    PaginationParams,
    SuccessResponse,
)
from serverless_api.models.course import Course, CourseLevel
from serverless_api.models.user import User

__all__ = [
    "Course",
    "CourseLevel",
    "ErrorResponse",
    "FieldError",
    "PaginatedResponse",
    "PaginationMeta",
    "PaginationParams",
    "SuccessResponse",
    "User",
]
