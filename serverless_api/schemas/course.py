"""
Course request schemas.

Input contracts for creating, updating and listing courses.

Dependencies: pydantic, serverless_api.schemas.rules
System role: Course input validation
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field

from serverless_api.models.course import CourseLevel
from serverless_api.schemas.result import ValidationResult, validate_model
from serverless_api.schemas.rules import (
    choice_rule,
    integer_string_rule,
    text_rule,
    whole_number_rule,
)

LEVELS = tuple(level.value for level in CourseLevel)

_title = BeforeValidator(text_rule("Title", 3, 100))
_description = BeforeValidator(text_rule("Description", 10, 500))
_instructor = BeforeValidator(text_rule("Instructor name", 2, 50))
_duration = BeforeValidator(whole_number_rule("Duration", 1, 200, unit="hour"))
_level = BeforeValidator(choice_rule("Level", LEVELS))

Title = Annotated[str, _title, Field(title="Title")]
Description = Annotated[str, _description, Field(title="Description")]
Instructor = Annotated[str, _instructor, Field(title="Instructor")]
Duration = Annotated[int, _duration, Field(title="Duration", description="Length in hours")]
Level = Annotated[CourseLevel, _level, Field(title="Level")]


class CreateCourseRequest(BaseModel):
    """Request schema for creating a new course."""

    title: Title
    description: Description
    instructor: Instructor
    duration: Duration
    level: Level


class UpdateCourseRequest(BaseModel):
    """
    Request schema for updating a course.

    Same rules as creation, every field optional. An explicit null is
    rejected like any other non-conforming value.
    """

    title: Annotated[str | None, _title, Field(title="Title")] = None
    description: Annotated[str | None, _description, Field(title="Description")] = None
    instructor: Annotated[str | None, _instructor, Field(title="Instructor")] = None
    duration: Annotated[int | None, _duration, Field(title="Duration")] = None
    level: Annotated[CourseLevel | None, _level, Field(title="Level")] = None

    def changes(self) -> dict[str, Any]:
        """Fields supplied by the caller, normalized."""
        return self.model_dump(exclude_unset=True)


class CourseListQuery(BaseModel):
    """Query parameters for listing courses. Shape only, no bounds."""

    page: Annotated[
        int,
        BeforeValidator(integer_string_rule("Page")),
        Field(title="Page"),
    ] = 1
    limit: Annotated[
        int,
        BeforeValidator(integer_string_rule("Limit")),
        Field(title="Limit"),
    ] = 10
    level: Annotated[CourseLevel | None, _level, Field(title="Level")] = None


def validate_create_course(data: Any) -> ValidationResult[CreateCourseRequest]:
    return validate_model(CreateCourseRequest, data)


def validate_update_course(data: Any) -> ValidationResult[UpdateCourseRequest]:
    return validate_model(UpdateCourseRequest, data)


def validate_course_query(params: Any) -> ValidationResult[CourseListQuery]:
    """
    Validate list query parameters.

    Absent and empty parameters are dropped first so that defaults apply.
    """
    present = {key: value for key, value in dict(params).items() if value not in (None, "")}
    return validate_model(CourseListQuery, present)
