"""
User domain models.

Dependencies: pydantic
System role: User API contracts
"""

from pydantic import BaseModel


class User(BaseModel):
    """User record as stored and returned by the API."""

    id: int
    name: str
    email: str
    created: str
    updated: str
