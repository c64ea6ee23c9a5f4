"""
User request schemas.

Input contracts for creating, updating and listing users.

Dependencies: pydantic, serverless_api.schemas.rules
System role: User input validation
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field

from serverless_api.schemas.result import ValidationResult, validate_model
from serverless_api.schemas.rules import email_rule, integer_string_rule, name_rule

_name = BeforeValidator(name_rule("Name"))
_email = BeforeValidator(email_rule("Email"))


class CreateUserRequest(BaseModel):
    """Request schema for creating a new user."""

    name: Annotated[str, _name, Field(title="Name")]
    email: Annotated[str, _email, Field(title="Email")]


class UpdateUserRequest(BaseModel):
    """Request schema for updating a user. Every field optional."""

    name: Annotated[str | None, _name, Field(title="Name")] = None
    email: Annotated[str | None, _email, Field(title="Email")] = None

    def changes(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class UserListQuery(BaseModel):
    """Query parameters for listing users."""

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


def validate_create_user(data: Any) -> ValidationResult[CreateUserRequest]:
    return validate_model(CreateUserRequest, data)


def validate_update_user(data: Any) -> ValidationResult[UpdateUserRequest]:
    return validate_model(UpdateUserRequest, data)


def validate_user_query(params: Any) -> ValidationResult[UserListQuery]:
    present = {key: value for key, value in dict(params).items() if value not in (None, "")}
    return validate_model(UserListQuery, present)
