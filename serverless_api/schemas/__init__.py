"""
Request validation schemas.

Declarative per-endpoint input contracts producing normalized values or
ordered field errors.
"""

from serverless_api.schemas.course import (
    CourseListQuery,
    CreateCourseRequest,
    UpdateCourseRequest,
    validate_course_query,
    validate_create_course,
    validate_update_course,
)
from serverless_api.schemas.params import ResourceIdParams, parse_id, validate_id_params
from serverless_api.schemas.result import ValidationResult, validate_model
from serverless_api.schemas.user import (
    CreateUserRequest,
    UpdateUserRequest,
    UserListQuery,
    validate_create_user,
    validate_update_user,
    validate_user_query,
)

__all__ = [
    "CourseListQuery",
    "CreateCourseRequest",
    "CreateUserRequest",
    "ResourceIdParams",
    "UpdateCourseRequest",
    "UpdateUserRequest",
    "UserListQuery",
    "ValidationResult",
    "parse_id",
    "validate_course_query",
    "validate_create_course",
    "validate_create_user",
    "validate_id_params",
    "validate_model",
    "validate_update_course",
    "validate_update_user",
    "validate_user_query",
]
