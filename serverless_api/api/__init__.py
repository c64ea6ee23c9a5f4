"""
API routes module.

FastAPI routers for all resource endpoints, mounted under /api.
"""

from fastapi import APIRouter

from .routers import courses_router, users_router

api_router = APIRouter(prefix="/api")

# Include all resource routers
api_router.include_router(users_router)
api_router.include_router(courses_router)

__all__ = ["api_router"]
