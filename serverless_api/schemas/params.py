"""
Path parameter schemas.

Identifiers arrive as path strings and must be ASCII digits only; they are
converted to integers as part of validation.

Dependencies: pydantic, serverless_api.schemas.rules
System role: Path parameter parsing
"""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, Field

from serverless_api.schemas.result import ValidationResult, validate_model
from serverless_api.schemas.rules import digits_rule


class ResourceIdParams(BaseModel):
    """Path parameters of /{id} routes."""

    id: Annotated[int, BeforeValidator(digits_rule("ID")), Field(title="ID")]


def validate_id_params(params: Any) -> ValidationResult[ResourceIdParams]:
    return validate_model(ResourceIdParams, params)


def parse_id(raw: Any) -> ValidationResult[int]:
    """
    Parse a path identifier.

    Args:
        raw: Raw path segment

    Returns:
        ValidationResult[int]: The integer id, or an "id" field error
    """
    result = validate_id_params({"id": raw})
    if not result.ok:
        return ValidationResult(errors=result.errors)
    return ValidationResult(value=result.value.id)
