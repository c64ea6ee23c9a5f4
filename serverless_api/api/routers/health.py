"""
Health check and index endpoints.

Routes: GET /health, GET /

Dependencies: serverless_api.configs
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from serverless_api.api.deps.dependencies import get_settings_dependency
from serverless_api.configs import Settings
from serverless_api.utils.formatters import current_timestamp

ENDPOINTS = [
    "GET /health - Health check",
    "GET /api/users - Get users list with pagination",
    "GET /api/users/{id} - Get user by ID",
    "POST /api/users - Create new user",
    "PUT /api/users/{id} - Update user",
    "GET /api/courses - Get courses list with pagination and level filter",
    "GET /api/courses/{id} - Get course by ID",
    "POST /api/courses - Create new course",
    "PUT /api/courses/{id} - Update course",
]


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    timestamp: str
    version: str
    region: str
    memory: str


class IndexResponse(BaseModel):
    """API banner listing the available endpoints."""

    message: str
    version: str
    endpoints: list[str]
    timestamp: str


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings_dependency)) -> HealthResponse:
    """Basic health check with deployment metadata."""
    return HealthResponse(
        status="healthy",
        timestamp=current_timestamp(),
        version=settings.server.function_version,
        region=settings.server.function_region,
        memory=settings.server.function_memory,
    )


@router.get("/", response_model=IndexResponse)
async def index(settings: Settings = Depends(get_settings_dependency)) -> IndexResponse:
    return IndexResponse(
        message="Serverless Course API",
        version=settings.server.function_version,
        endpoints=ENDPOINTS,
        timestamp=current_timestamp(),
    )
