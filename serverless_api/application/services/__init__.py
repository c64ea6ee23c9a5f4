"""Application services."""

from .course_service import CourseService
from .user_service import UserService

__all__ = ["CourseService", "UserService"]
