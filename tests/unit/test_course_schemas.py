"""
Unit tests for course request schemas.

Dependencies: pytest, serverless_api.schemas
System role: Course input validation
"""

import pytest

from serverless_api.core.exceptions import InvalidInputError
from serverless_api.models.course import CourseLevel
from serverless_api.schemas import (
    validate_course_query,
    validate_create_course,
    validate_update_course,
)


@pytest.fixture
def valid_course() -> dict:
    return {
        "title": "Python for Data Work",
        "description": "Hands-on introduction to pandas and friends",
        "instructor": "Ada Lovelace",
        "duration": 24,
        "level": "beginner",
    }


def _messages(result) -> dict[str, str]:
    return {error.field: error.message for error in result.errors}


class TestCreateCourse:
    """Tests for the create-course schema."""

    def test_valid_payload(self, valid_course) -> None:
        result = validate_create_course(valid_course)

        assert result.ok
        assert result.value.title == "Python for Data Work"
        assert result.value.level is CourseLevel.BEGINNER
        assert result.value.duration == 24

    def test_trims_text_fields(self, valid_course) -> None:
        valid_course["title"] = "   Padded Title   "
        valid_course["instructor"] = "\tGrace Hopper \n"

        result = validate_create_course(valid_course)

        assert result.value.title == "Padded Title"
        assert result.value.instructor == "Grace Hopper"

    def test_short_title_names_the_bound(self, valid_course) -> None:
        valid_course["title"] = "AB"

        result = validate_create_course(valid_course)

        assert not result.ok
        message = _messages(result)["title"]
        assert "3" in message
        assert "characters" in message

    def test_whitespace_only_title_is_too_short(self, valid_course) -> None:
        valid_course["title"] = "     "

        result = validate_create_course(valid_course)

        assert _messages(result) == {"title": "Title must be at least 3 characters"}

    def test_every_field_reported_in_order(self) -> None:
        # Arrange
        payload = {
            "title": "AB",
            "description": "short",
            "instructor": "X",
            "duration": 0,
            "level": "expert",
        }

        # Act
        result = validate_create_course(payload)

        # Assert
        assert [error.field for error in result.errors] == [
            "title",
            "description",
            "instructor",
            "duration",
            "level",
        ]
        assert _messages(result) == {
            "title": "Title must be at least 3 characters",
            "description": "Description must be at least 10 characters",
            "instructor": "Instructor name must be at least 2 characters",
            "duration": "Duration must be at least 1 hour",
            "level": "Level must be beginner, intermediate, or advanced",
        }

    def test_upper_bounds(self, valid_course) -> None:
        valid_course.update(
            title="T" * 101,
            description="D" * 501,
            instructor="I" * 51,
            duration=201,
        )

        result = validate_create_course(valid_course)

        assert _messages(result) == {
            "title": "Title must not exceed 100 characters",
            "description": "Description must not exceed 500 characters",
            "instructor": "Instructor name must not exceed 50 characters",
            "duration": "Duration must not exceed 200 hours",
        }

    def test_missing_fields_are_required(self) -> None:
        result = validate_create_course({"title": "Complete Title"})

        assert _messages(result) == {
            "description": "Description is required",
            "instructor": "Instructor is required",
            "duration": "Duration is required",
            "level": "Level is required",
        }

    @pytest.mark.parametrize("duration", ["40", True, None, [40]])
    def test_duration_must_be_a_number(self, valid_course, duration) -> None:
        valid_course["duration"] = duration

        result = validate_create_course(valid_course)

        assert _messages(result) == {"duration": "Duration must be a number"}

    def test_integral_float_duration_accepted(self, valid_course) -> None:
        valid_course["duration"] = 40.0

        result = validate_create_course(valid_course)

        assert result.value.duration == 40
        assert isinstance(result.value.duration, int)

    def test_fractional_duration_rejected(self, valid_course) -> None:
        valid_course["duration"] = 40.5

        result = validate_create_course(valid_course)

        assert _messages(result) == {"duration": "Duration must be a whole number"}

    def test_level_is_case_sensitive(self, valid_course) -> None:
        valid_course["level"] = "Beginner"

        assert not validate_create_course(valid_course).ok

    def test_title_must_be_a_string(self, valid_course) -> None:
        valid_course["title"] = 12345

        result = validate_create_course(valid_course)

        assert _messages(result) == {"title": "Title must be a string"}

    @pytest.mark.parametrize("body", [None, [], "text", 42])
    def test_non_object_body(self, body) -> None:
        result = validate_create_course(body)

        assert _messages(result) == {"body": "Request body must be a JSON object"}

    def test_unwrap_raises_with_all_errors(self) -> None:
        result = validate_create_course({})

        with pytest.raises(InvalidInputError) as exc_info:
            result.unwrap()

        assert len(exc_info.value.errors) == 5
        assert exc_info.value.message.startswith("Title is required")

    def test_unknown_fields_ignored(self, valid_course) -> None:
        valid_course["id"] = 999

        result = validate_create_course(valid_course)

        assert result.ok
        assert "id" not in result.value.model_dump()


class TestUpdateCourse:
    """Tests for the update-course schema."""

    def test_empty_body_is_valid(self) -> None:
        result = validate_update_course({})

        assert result.ok
        assert result.value.changes() == {}

    def test_only_supplied_fields_are_changes(self) -> None:
        result = validate_update_course({"title": "  New Title  ", "duration": 12})

        assert result.value.changes() == {"title": "New Title", "duration": 12}

    def test_same_rules_as_create(self) -> None:
        result = validate_update_course({"description": "tiny", "level": "guru"})

        assert _messages(result) == {
            "description": "Description must be at least 10 characters",
            "level": "Level must be beginner, intermediate, or advanced",
        }

    def test_explicit_null_rejected(self) -> None:
        result = validate_update_course({"title": None})

        assert not result.ok
        assert result.errors[0].field == "title"


class TestCourseQuery:
    """Tests for the course list query schema."""

    def test_defaults(self) -> None:
        result = validate_course_query({})

        assert result.value.page == 1
        assert result.value.limit == 10
        assert result.value.level is None

    def test_absent_values_use_defaults(self) -> None:
        result = validate_course_query({"page": None, "limit": None, "level": None})

        assert (result.value.page, result.value.limit) == (1, 10)

    def test_empty_values_use_defaults(self) -> None:
        result = validate_course_query({"page": "", "limit": "", "level": ""})

        assert result.ok
        assert (result.value.page, result.value.limit) == (1, 10)
        assert result.value.level is None

    def test_parses_strings(self) -> None:
        result = validate_course_query({"page": "2", "limit": "5", "level": "advanced"})

        assert (result.value.page, result.value.limit) == (2, 5)
        assert result.value.level is CourseLevel.ADVANCED

    def test_shape_only_no_bounds(self) -> None:
        result = validate_course_query({"page": "0", "limit": "1000"})

        assert result.ok
        assert (result.value.page, result.value.limit) == (0, 1000)

    def test_non_numeric_page(self) -> None:
        result = validate_course_query({"page": "two"})

        assert _messages(result) == {"page": "Page must be a whole number"}

    def test_invalid_level(self) -> None:
        result = validate_course_query({"level": "expert"})

        assert result.errors[0].field == "level"
