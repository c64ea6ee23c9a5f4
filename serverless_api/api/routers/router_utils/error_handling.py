"""
Route error handling utilities.

Provides a decorator for consistent error handling across resource
endpoints and the application-level exception handlers for errors raised
outside of them (malformed JSON, unknown routes, stray exceptions).

Unexpected errors are logged with full detail; the caller only sees the
exception message in development.

Dependencies: fastapi, starlette, serverless_api.core.exceptions
System role: Exception to error-envelope translation
"""

import functools
from typing import Any, Callable, TypeVar

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from serverless_api.core.exceptions import (
    InvalidInputError,
    PolicyError,
    ResourceNotFoundError,
)

from .responses import error_response

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])

GENERIC_ERROR = "Internal server error"


def _public_message(request: Request, exc: Exception) -> str:
    settings = request.app.state.container.settings
    return str(exc) if settings.is_development else GENERIC_ERROR


def handle_resource_errors(func: F) -> F:
    """
    Decorator to translate resource errors into error envelopes.

    The decorated endpoint must declare a ``request: Request`` parameter.

    This centralizes:
    - Logging of errors with request context
    - Mapping shape and policy errors to 400, missing records to 404
    - Turning anything else into a 500 with an environment-dependent message
    """

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        request: Request = kwargs["request"]
        logger = request.app.state.container.logger
        context = {"method": request.method, "path": request.url.path}

        try:
            return await func(*args, **kwargs)

        except InvalidInputError as e:
            logger.warn(
                "Invalid request",
                {**context, "errors": [f"{error.field}: {error.message}" for error in e.errors]},
            )
            return error_response(status.HTTP_400_BAD_REQUEST, e.message, details=e.errors)

        except PolicyError as e:
            logger.warn("Request rejected", {**context, "error": e.message})
            return error_response(status.HTTP_400_BAD_REQUEST, e.message)

        except ResourceNotFoundError as e:
            logger.warn(
                f"{e.resource} not found",
                {**context, "resource": e.resource, "id": e.resource_id},
            )
            return error_response(status.HTTP_404_NOT_FOUND, e.message)

        except Exception as e:
            logger.failure("Unexpected failure in resource operation", e, context)
            return error_response(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                _public_message(request, e),
            )

    return wrapper  # type: ignore


async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Malformed JSON or a body FastAPI could not read."""
    logger = request.app.state.container.logger
    invalid_json = any(error.get("type") == "json_invalid" for error in exc.errors())
    message = "Invalid JSON payload" if invalid_json else "Invalid request"
    logger.warn(message, {"method": request.method, "path": request.url.path})
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger = request.app.state.container.logger
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        logger.warn("404 - Route not found", {"path": request.url.path, "method": request.method})
        return error_response(exc.status_code, "Route not found")
    return error_response(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger = request.app.state.container.logger
    logger.error("Application error", exc, {"path": request.url.path, "method": request.method})
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        _public_message(request, exc),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the envelope-producing exception handlers on the app."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
