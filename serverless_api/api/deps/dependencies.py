"""
Dependency injection container.

Factory functions for FastAPI dependencies. The container is created once
per application by create_app and stored on app.state; nothing here is a
module-level singleton.

Dependencies: serverless_api.configs, serverless_api.application, serverless_api.boundary
System role: DI container for service injection
"""

from fastapi import Depends, Request

from serverless_api.application.services import CourseService, UserService
from serverless_api.boundary.seed import SEED_COURSES, SEED_USERS
from serverless_api.boundary.store import ResourceStore
from serverless_api.configs import Settings
from serverless_api.models.course import Course
from serverless_api.models.user import User
from serverless_api.observability.logger import StructuredLogger


class ServiceContainer:
    """Application-owned settings, logger and resource stores."""

    def __init__(
        self,
        settings: Settings,
        logger: StructuredLogger,
        course_store: ResourceStore[Course] | None = None,
        user_store: ResourceStore[User] | None = None,
    ) -> None:
        self.settings = settings
        self.logger = logger
        self.course_store = course_store or ResourceStore(Course, "Course", SEED_COURSES)
        self.user_store = user_store or ResourceStore(User, "User", SEED_USERS)


def get_container(request: Request) -> ServiceContainer:
    """Get the container of the application serving this request."""
    return request.app.state.container


def get_settings_dependency(container: ServiceContainer = Depends(get_container)) -> Settings:
    return container.settings


def get_logger(container: ServiceContainer = Depends(get_container)) -> StructuredLogger:
    return container.logger


def get_course_service(container: ServiceContainer = Depends(get_container)) -> CourseService:
    """
    Get course service instance.

    Args:
        container: Application service container (injected via Depends)

    Returns:
        CourseService: Course service bound to the application's course store
    """
    return CourseService(store=container.course_store, logger=container.logger)


def get_user_service(container: ServiceContainer = Depends(get_container)) -> UserService:
    """
    Get user service instance.

    Args:
        container: Application service container (injected via Depends)

    Returns:
        UserService: User service bound to the application's user store
    """
    return UserService(store=container.user_store, logger=container.logger)
