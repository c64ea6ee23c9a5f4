"""Shared helpers for resource routers."""

from .error_handling import handle_resource_errors, register_exception_handlers
from .responses import error_response, success_payload

__all__ = [
    "error_response",
    "handle_resource_errors",
    "register_exception_handlers",
    "success_payload",
]
