"""
Course API endpoints.

Routes:
- GET /courses - List courses (page, limit, level)
- GET /courses/{id} - Get single course
- POST /courses - Create new course
- PUT /courses/{id} - Update course

Dependencies: serverless_api.application.services, serverless_api.schemas
System role: Course management HTTP API
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from serverless_api.api.deps.dependencies import get_course_service, get_logger
from serverless_api.application.services import CourseService
from serverless_api.models.common import PaginatedResponse, SuccessResponse
from serverless_api.models.course import Course
from serverless_api.observability.logger import StructuredLogger
from serverless_api.schemas.course import (
    validate_course_query,
    validate_create_course,
    validate_update_course,
)
from serverless_api.schemas.params import parse_id

from .router_utils import handle_resource_errors, success_payload

router = APIRouter(prefix="/courses", tags=["courses"])


@router.get("", response_model=PaginatedResponse[Course])
@handle_resource_errors
async def list_courses(
    request: Request,
    page: str | None = None,
    limit: str | None = None,
    level: str | None = None,
    course_service: CourseService = Depends(get_course_service),
    logger: StructuredLogger = Depends(get_logger),
) -> Any:
    """
    List courses with pagination and optional level filter.

    The query schema checks shape; the service applies the pagination
    bounds as a separate pass.

    Raises:
        400: Malformed query or pagination out of bounds
    """
    query = validate_course_query({"page": page, "limit": limit, "level": level}).unwrap()
    courses, pagination = course_service.list_courses(query)

    logger.info(
        "Courses retrieved successfully",
        {
            "page": pagination.page,
            "limit": pagination.limit,
            "level": query.level.value if query.level else None,
            "total": pagination.total,
            "returned": len(courses),
        },
    )
    return success_payload(courses, pagination=pagination)


@router.get("/{course_id}", response_model=SuccessResponse[Course], response_model_exclude_none=True)
@handle_resource_errors
async def get_course(
    request: Request,
    course_id: str,
    course_service: CourseService = Depends(get_course_service),
    logger: StructuredLogger = Depends(get_logger),
) -> Any:
    """
    Get single course by ID.

    Raises:
        400: ID is not a string of digits
        404: Course not found
    """
    resolved_id = parse_id(course_id).unwrap()
    course = course_service.get_course(resolved_id)

    logger.info("Course retrieved successfully", {"courseId": resolved_id})
    return success_payload(course)


@router.post(
    "",
    response_model=SuccessResponse[Course],
    response_model_exclude_none=True,
    status_code=201,
)
@handle_resource_errors
async def create_course(
    request: Request,
    payload: Any = Body(default=None),
    course_service: CourseService = Depends(get_course_service),
    logger: StructuredLogger = Depends(get_logger),
) -> Any:
    """
    Create a new course.

    Raises:
        400: Invalid body; every violated field is reported
    """
    course_request = validate_create_course(payload).unwrap()
    course = course_service.create_course(course_request)

    logger.success(
        "Course created successfully",
        {"courseId": course.id, "title": course.title, "instructor": course.instructor},
    )
    return success_payload(course, message="Course created successfully")


@router.put("/{course_id}", response_model=SuccessResponse[Course], response_model_exclude_none=True)
@handle_resource_errors
async def update_course(
    request: Request,
    course_id: str,
    payload: Any = Body(default=None),
    course_service: CourseService = Depends(get_course_service),
    logger: StructuredLogger = Depends(get_logger),
) -> Any:
    """
    Update course by ID. Fields absent from the body are left unchanged.

    Raises:
        400: Invalid ID or body
        404: Course not found
    """
    resolved_id = parse_id(course_id).unwrap()
    changes = validate_update_course(payload).unwrap()
    course = course_service.update_course(resolved_id, changes)

    logger.info(
        "Course updated successfully",
        {"courseId": resolved_id, "fields": sorted(changes.changes())},
    )
    return success_payload(course, message="Course updated successfully")
