"""
FastAPI middleware for observability and request limits.

Request logging and request size limiting middleware. Both read the
application's service container from app.state.

Dependencies: fastapi, starlette, serverless_api.observability.logger
System role: Request/response observability injection
"""

import time

from fastapi import Request, Response, status
from starlette.middleware.base import BaseHTTPMiddleware

from serverless_api.api.routers.router_utils.responses import error_response
from serverless_api.utils.formatters import parse_request_size


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests with timing."""

    async def dispatch(self, request: Request, call_next):
        """
        Log HTTP request outcome with duration.

        Args:
            request: FastAPI request
            call_next: Next middleware in chain

        Returns:
            Response: Response object
        """
        logger = request.app.state.container.logger
        start_time = time.perf_counter()

        # Stray exceptions propagate to unhandled_exception_handler, which logs them
        response: Response = await call_next(request)

        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.request(request.method, request.url.path, response.status_code, duration_ms)
        return response


class RequestSizeLimitMiddleware(BaseHTTPMiddleware):
    """Reject requests whose declared Content-Length exceeds the configured limit."""

    async def dispatch(self, request: Request, call_next):
        settings = request.app.state.container.settings
        content_length = request.headers.get("content-length")

        if content_length and content_length.isdigit():
            max_size = parse_request_size(settings.server.max_request_size)
            if int(content_length) > max_size:
                return error_response(
                    status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
                    f"Request too large. Maximum size: {settings.server.max_request_size}",
                )

        return await call_next(request)
