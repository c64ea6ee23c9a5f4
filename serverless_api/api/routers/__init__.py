"""API routers."""

from .courses import router as courses_router
from .health import router as health_router
from .users import router as users_router

__all__ = [
    "courses_router",
    "health_router",
    "users_router",
]
