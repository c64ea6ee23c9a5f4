"""
Course service orchestrator.

Coordinates course use cases over the course store: the pagination policy
pass, level filtering, creation and partial updates.

Dependencies: serverless_api.boundary, serverless_api.utils.formatters
System role: Course use case orchestration
"""

import time

from serverless_api.boundary.store import ResourceStore
from serverless_api.core.exceptions import ResourceNotFoundError
from serverless_api.models.common import PaginationMeta
from serverless_api.models.course import Course
from serverless_api.observability.logger import StructuredLogger
from serverless_api.schemas.course import (
    CourseListQuery,
    CreateCourseRequest,
    UpdateCourseRequest,
)
from serverless_api.utils.formatters import calculate_pagination, paginate, validate_pagination


class CourseService:
    """Course service orchestrator."""

    def __init__(self, store: ResourceStore[Course], logger: StructuredLogger) -> None:
        """
        Initialize course service.

        Args:
            store: Course store owned by the application
            logger: Process logger
        """
        self.store = store
        self.logger = logger

    def list_courses(self, query: CourseListQuery) -> tuple[list[Course], PaginationMeta]:
        """
        List courses for one page, optionally filtered by level.

        Args:
            query: Shape-validated query parameters

        Returns:
            tuple: Courses on the requested page and pagination metadata

        Raises:
            PaginationError: If page or limit violate the pagination policy
        """
        pagination = validate_pagination(query.page, query.limit)

        started = time.perf_counter()
        if query.level is not None:
            courses = self.store.get_all(lambda course: course.level == query.level)
        else:
            courses = self.store.get_all()
        page_items = paginate(courses, pagination)
        elapsed_ms = round((time.perf_counter() - started) * 1000, 2)

        self.logger.performance(
            "list_courses",
            elapsed_ms,
            {"level": query.level.value if query.level else None, "matched": len(courses)},
        )
        return page_items, calculate_pagination(pagination.page, pagination.limit, len(courses))

    def get_course(self, course_id: int) -> Course:
        """
        Get course by ID.

        Raises:
            ResourceNotFoundError: If no course has this id
        """
        course = self.store.get_by_id(course_id)
        if course is None:
            raise ResourceNotFoundError(self.store.resource, course_id)
        return course

    def create_course(self, request: CreateCourseRequest) -> Course:
        course = self.store.create(**request.model_dump())
        self.logger.debug("Course stored", {"courseId": course.id})
        return course

    def update_course(self, course_id: int, request: UpdateCourseRequest) -> Course:
        """
        Apply a partial update. Fields absent from the request keep their values.

        Raises:
            ResourceNotFoundError: If no course has this id
        """
        course = self.store.update_by_id(course_id, **request.changes())
        if course is None:
            raise ResourceNotFoundError(self.store.resource, course_id)
        return course
