"""Formatting and utility helpers shared by all routes."""

from serverless_api.utils.formatters import (
    calculate_pagination,
    current_timestamp,
    format_response,
    generate_id,
    paginate,
    parse_request_size,
    sanitize_string,
    validate_email,
    validate_name,
    validate_pagination,
)

__all__ = [
    "calculate_pagination",
    "current_timestamp",
    "format_response",
    "generate_id",
    "paginate",
    "parse_request_size",
    "sanitize_string",
    "validate_email",
    "validate_name",
    "validate_pagination",
]
