"""
Course domain models.

Stored course record and its level enumeration.

Dependencies: pydantic
System role: Course API contracts
"""

import enum

from pydantic import BaseModel, Field


class CourseLevel(str, enum.Enum):
    """Difficulty level of a course."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Course(BaseModel):
    """Course record as stored and returned by the API."""

    id: int
    title: str
    description: str
    instructor: str
    duration: int = Field(description="Course length in hours")
    level: CourseLevel
    created: str
    updated: str
