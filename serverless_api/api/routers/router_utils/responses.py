"""
Response envelope helpers.

Builds success payloads and error JSONResponses in the uniform envelope
shape: success discriminant, data or error, and a timestamp.

Dependencies: fastapi, serverless_api.utils.formatters
System role: Response envelope construction
"""

from typing import Any

from fastapi.responses import JSONResponse

from serverless_api.models.common import ErrorResponse, FieldError
from serverless_api.utils.formatters import format_response


def success_payload(data: Any, message: str | None = None, **extra: Any) -> dict[str, Any]:
    """
    Build a success envelope.

    Args:
        data: Record or list of records
        message: Optional human-readable message
        **extra: Additional envelope fields, e.g. pagination

    Returns:
        dict: Envelope stamped with the current timestamp
    """
    payload: dict[str, Any] = {"success": True, "data": data, **extra}
    if message is not None:
        payload["message"] = message
    return format_response(payload)


def error_response(
    status_code: int,
    message: str,
    details: list[FieldError] | None = None,
) -> JSONResponse:
    """
    Build an error envelope response.

    Args:
        status_code: HTTP status code
        message: Error message
        details: Optional field-level errors

    Returns:
        JSONResponse: {success: false, error, [details], timestamp}
    """
    envelope = ErrorResponse.model_validate(
        format_response({"success": False, "error": message, "details": details})
    )
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", exclude_none=True),
    )
