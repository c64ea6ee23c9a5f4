"""
FastAPI application with assembled routers.

Initializes the FastAPI app with middleware, exception handlers and routers,
and configures the uvicorn development server.

Dependencies: fastapi, serverless_api.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from serverless_api.api import api_router
from serverless_api.api.deps.dependencies import ServiceContainer
from serverless_api.api.routers import health_router
from serverless_api.api.routers.router_utils import register_exception_handlers
from serverless_api.configs import Settings, get_settings
from serverless_api.observability.logger import configure_logging
from serverless_api.observability.middleware import (
    RequestLoggingMiddleware,
    RequestSizeLimitMiddleware,
)
from serverless_api.utils.formatters import parse_request_size


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    container: ServiceContainer = app.state.container
    settings = container.settings
    logger = container.logger

    # Startup
    logger.info(f"Loading {settings.environment} environment configuration")
    logger.info(
        "Environment configuration loaded",
        {
            "environment": settings.environment,
            "corsOrigins": ", ".join(settings.server.cors_origin_list) or "None configured",
            "logLevel": settings.log_level,
        },
    )
    if settings.is_production and not settings.server.cors_origin_list:
        logger.warn("No CORS origins configured for production environment")

    yield

    # Shutdown
    logger.info("Application shutting down")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Settings to use (defaults to the cached environment settings)

    Returns:
        FastAPI: Configured application instance with its own logger and stores
    """
    settings = settings or get_settings()
    # Fail fast on a malformed size limit
    parse_request_size(settings.server.max_request_size)

    app = FastAPI(
        title="Serverless Course API",
        description="User and course CRUD endpoints backed by in-memory stores",
        version=settings.server.function_version,
        lifespan=lifespan,
    )
    app.state.container = ServiceContainer(settings=settings, logger=configure_logging(settings))

    # Innermost first: size limit, then request logging, then CORS
    app.add_middleware(RequestSizeLimitMiddleware)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.server.cors_origin_list,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
        expose_headers=["X-Total-Count", "X-Page-Count"],
        max_age=0 if settings.is_development else 86400,
    )

    register_exception_handlers(app)

    app.include_router(health_router)
    app.include_router(api_router)

    return app


def run() -> None:
    """Start the local development server."""
    settings = get_settings()
    uvicorn.run(
        "serverless_api.api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.server.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
