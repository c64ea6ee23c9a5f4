"""
Field rule combinators.

Each factory returns a plain function that checks and normalizes one raw
value, raising PydanticCustomError with a message that names the concrete
bound. The functions are attached to schema fields with BeforeValidator, so
a field reports the first rule it violates.

Dependencies: pydantic_core, serverless_api.utils.formatters
System role: Per-field validation rules for request schemas
"""

import re
from collections.abc import Callable, Sequence
from typing import Any

from pydantic_core import PydanticCustomError

from serverless_api.utils.formatters import sanitize_string, validate_email, validate_name

Rule = Callable[[Any], Any]

_DIGITS = re.compile(r"[0-9]+")
_SIGNED_INTEGER = re.compile(r"[+-]?[0-9]+")


def _fail(error_type: str, message: str) -> PydanticCustomError:
    return PydanticCustomError(error_type, message)


def _quantity(amount: int, unit: str) -> str:
    return f"{amount} {unit}" if amount == 1 else f"{amount} {unit}s"


def _require_string(label: str, value: Any) -> str:
    if not isinstance(value, str):
        raise _fail("string_type", f"{label} must be a string")
    return value


def text_rule(label: str, min_length: int, max_length: int) -> Rule:
    """
    Trimmed string with length bounds.

    Args:
        label: Name used in messages, e.g. "Title"
        min_length: Minimum length of the trimmed value
        max_length: Maximum length of the trimmed value

    Returns:
        Rule: Function returning the trimmed string
    """

    def check(value: Any) -> str:
        text = sanitize_string(_require_string(label, value))
        if len(text) < min_length:
            raise _fail("string_too_short", f"{label} must be at least {min_length} characters")
        if len(text) > max_length:
            raise _fail("string_too_long", f"{label} must not exceed {max_length} characters")
        return text

    return check


def whole_number_rule(label: str, minimum: int, maximum: int, unit: str) -> Rule:
    """
    Integer within [minimum, maximum].

    Booleans and strings are rejected. Integral floats (40.0) are accepted
    and converted, fractional ones are not.
    """

    def check(value: Any) -> int:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _fail("int_type", f"{label} must be a number")
        if isinstance(value, float):
            if not value.is_integer():
                raise _fail("int_from_float", f"{label} must be a whole number")
            value = int(value)
        if value < minimum:
            raise _fail("greater_than_equal", f"{label} must be at least {_quantity(minimum, unit)}")
        if value > maximum:
            raise _fail("less_than_equal", f"{label} must not exceed {_quantity(maximum, unit)}")
        return value

    return check


def choice_rule(label: str, choices: Sequence[str]) -> Rule:
    """Exact match against a fixed set of string values."""
    if len(choices) > 1:
        listed = f"{', '.join(choices[:-1])}, or {choices[-1]}"
    else:
        listed = choices[0]

    def check(value: Any) -> str:
        if value not in choices:
            raise _fail("enum", f"{label} must be {listed}")
        return value

    return check


def name_rule(label: str) -> Rule:
    """Person name: trimmed, 2 to 100 characters."""

    def check(value: Any) -> str:
        text = sanitize_string(_require_string(label, value))
        if not validate_name(text):
            raise _fail("name_length", f"{label} must be between 2 and 100 characters")
        return text

    return check


def email_rule(label: str) -> Rule:
    """Email address: trimmed, lower-cased and matched against a permissive pattern."""

    def check(value: Any) -> str:
        text = sanitize_string(_require_string(label, value)).lower()
        if not validate_email(text):
            raise _fail("email_format", "Invalid email format")
        return text

    return check


def digits_rule(label: str) -> Rule:
    """Path identifier made of ASCII digits only, converted to int."""

    def check(value: Any) -> int:
        if not isinstance(value, str) or not _DIGITS.fullmatch(value):
            raise _fail("digits_pattern", f"{label} must be a valid number")
        return int(value)

    return check


def integer_string_rule(label: str) -> Rule:
    """Query-string integer, converted to int. No bounds are applied here."""

    def check(value: Any) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if not isinstance(value, str) or not _SIGNED_INTEGER.fullmatch(value.strip()):
            raise _fail("int_parsing", f"{label} must be a whole number")
        return int(value.strip())

    return check
