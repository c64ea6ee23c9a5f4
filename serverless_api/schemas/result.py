"""
Validation result model.

Applying a schema is a pure function from raw input to either a normalized
value or an ordered list of field errors. ValidationResult carries that
outcome; unwrap() is the single place where a failure becomes an exception.

Dependencies: pydantic, serverless_api.models.common, serverless_api.core.exceptions
System role: Result type for the schema layer
"""

from collections.abc import Mapping
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, ValidationError

from serverless_api.core.exceptions import InvalidInputError
from serverless_api.models.common import FieldError

T = TypeVar("T")
ModelT = TypeVar("ModelT", bound=BaseModel)


class ValidationResult(BaseModel, Generic[T]):
    """Outcome of applying a schema: a value or field errors, never both."""

    value: T | None = None
    errors: list[FieldError] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    def unwrap(self) -> T:
        """
        Return the normalized value.

        Raises:
            InvalidInputError: If validation failed
        """
        if self.errors:
            raise InvalidInputError(self.errors)
        return self.value  # type: ignore[return-value]


def _label(model: type[BaseModel], field: str) -> str:
    info = model.model_fields.get(field)
    if info is not None and info.title:
        return info.title
    return field.capitalize()


def field_errors(model: type[BaseModel], exc: ValidationError) -> list[FieldError]:
    """
    Convert a pydantic ValidationError into ordered field errors.

    Only the first error reported for each field is kept.

    Args:
        model: Schema that raised the error
        exc: The validation error

    Returns:
        list[FieldError]: One entry per violated field, in schema order
    """
    errors: list[FieldError] = []
    seen: set[str] = set()
    for error in exc.errors():
        field = str(error["loc"][0]) if error["loc"] else "body"
        if field in seen:
            continue
        seen.add(field)
        if error["type"] == "missing":
            message = f"{_label(model, field)} is required"
        else:
            message = error["msg"]
        errors.append(FieldError(field=field, message=message))
    return errors


def validate_model(model: type[ModelT], data: Any) -> ValidationResult[Any]:
    """
    Apply a schema to raw input.

    Args:
        model: Pydantic schema class
        data: Raw input, expected to be a mapping

    Returns:
        ValidationResult: The model instance, or the field errors
    """
    if not isinstance(data, Mapping):
        return ValidationResult(
            errors=[FieldError(field="body", message="Request body must be a JSON object")]
        )
    try:
        return ValidationResult(value=model.model_validate(dict(data)))
    except ValidationError as exc:
        return ValidationResult(errors=field_errors(model, exc))
