"""
Formatting and utility helpers.

Resource-agnostic helpers used by every route: pagination policy and
metadata, response envelope stamping, simple field checks, string
sanitization and request size parsing.

Dependencies: serverless_api.models.common, serverless_api.core.exceptions
System role: Cross-cutting formatting layer
"""

import math
import random
import re
from collections.abc import Mapping, Sequence
from datetime import datetime, timezone
from typing import Any, TypeVar

from serverless_api.core.exceptions import PaginationError
from serverless_api.models.common import PaginationMeta, PaginationParams

T = TypeVar("T")

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
MAX_LIMIT = 100

_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
_SIZE_PATTERN = re.compile(r"([0-9]+)(mb|kb|b)?", re.IGNORECASE)
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_SIZE_UNITS = {"b": 1, "kb": 1024, "mb": 1024 * 1024}


def current_timestamp() -> str:
    """Current UTC time as an ISO-8601 string with millisecond precision."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _to_int(value: str | int) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not _INTEGER_PATTERN.fullmatch(text):
        return None
    return int(text)


def validate_pagination(
    page: str | int | None = None,
    limit: str | int | None = None,
) -> PaginationParams:
    """
    Validate and normalize pagination parameters.

    Absent values default to page 1 and limit 10. This is the policy pass,
    applied after the query schema has checked the shape.

    Args:
        page: Requested page number
        limit: Requested page size

    Returns:
        PaginationParams: Normalized page and limit

    Raises:
        PaginationError: If page is not a positive integer or limit is
            not an integer between 1 and 100
    """
    parsed_page = DEFAULT_PAGE if page in (None, "") else _to_int(page)
    parsed_limit = DEFAULT_LIMIT if limit in (None, "") else _to_int(limit)

    if parsed_page is None or parsed_page < 1:
        raise PaginationError("Page must be a positive integer", field="page")

    if parsed_limit is None or not 1 <= parsed_limit <= MAX_LIMIT:
        raise PaginationError(f"Limit must be between 1 and {MAX_LIMIT}", field="limit")

    return PaginationParams(page=parsed_page, limit=parsed_limit)


def calculate_pagination(page: int, limit: int, total: int) -> PaginationMeta:
    """
    Calculate pagination metadata.

    Args:
        page: Current page
        limit: Page size (at least 1)
        total: Number of matching records

    Returns:
        PaginationMeta: page, limit, total and totalPages = ceil(total / limit)
    """
    return PaginationMeta(
        page=page,
        limit=limit,
        total=total,
        total_pages=math.ceil(total / limit),
    )


def paginate(items: Sequence[T], params: PaginationParams) -> list[T]:
    """Return the slice of items that falls on the requested page."""
    start = (params.page - 1) * params.limit
    return list(items[start:start + params.limit])


def validate_email(email: str) -> bool:
    """Permissive email check: something@something.something without spaces."""
    return bool(_EMAIL_PATTERN.fullmatch(email))


def validate_name(name: str) -> bool:
    return 2 <= len(name) <= 100


def sanitize_string(value: str) -> str:
    """Trim surrounding whitespace. No escaping is performed."""
    return value.strip()


def format_response(data: Mapping[str, Any]) -> dict[str, Any]:
    """
    Stamp a response payload with the current timestamp.

    Args:
        data: Envelope fields

    Returns:
        dict: A new dict with the input fields plus timestamp
    """
    return {**data, "timestamp": current_timestamp()}


def generate_id() -> int:
    """
    Random identifier in [0, 10000).

    Not collision-safe; the resource stores use a monotonic counter instead.
    """
    return random.randrange(10000)


def parse_request_size(size: str) -> int:
    """
    Convert a request size string to bytes.

    Accepts "<digits><unit>" where unit is b, kb or mb (case-insensitive,
    bytes when omitted).

    Args:
        size: Size string, e.g. "10mb"

    Returns:
        int: Size in bytes

    Raises:
        ValueError: If the string does not match the expected format
    """
    match = _SIZE_PATTERN.fullmatch(size)
    if not match:
        raise ValueError("Invalid request size format")

    value = int(match.group(1))
    unit = (match.group(2) or "b").lower()
    return value * _SIZE_UNITS[unit]
