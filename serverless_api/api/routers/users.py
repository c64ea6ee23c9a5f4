"""
User API endpoints.

Routes:
- GET /users - List users (page, limit)
- GET /users/{id} - Get single user
- POST /users - Create new user
- PUT /users/{id} - Update user

Dependencies: serverless_api.application.services, serverless_api.schemas
System role: User management HTTP API
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, Request

from serverless_api.api.deps.dependencies import get_logger, get_user_service
from serverless_api.application.services import UserService
from serverless_api.models.common import PaginatedResponse, SuccessResponse
from serverless_api.models.user import User
from serverless_api.observability.logger import StructuredLogger
from serverless_api.schemas.params import parse_id
from serverless_api.schemas.user import (
    validate_create_user,
    validate_update_user,
    validate_user_query,
)

from .router_utils import handle_resource_errors, success_payload

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=PaginatedResponse[User])
@handle_resource_errors
async def list_users(
    request: Request,
    page: str | None = None,
    limit: str | None = None,
    user_service: UserService = Depends(get_user_service),
    logger: StructuredLogger = Depends(get_logger),
) -> Any:
    """List users with pagination."""
    query = validate_user_query({"page": page, "limit": limit}).unwrap()
    users, pagination = user_service.list_users(query)

    logger.info(
        "Users retrieved successfully",
        {
            "page": pagination.page,
            "limit": pagination.limit,
            "total": pagination.total,
            "returned": len(users),
        },
    )
    return success_payload(users, pagination=pagination)


@router.get("/{user_id}", response_model=SuccessResponse[User], response_model_exclude_none=True)
@handle_resource_errors
async def get_user(
    request: Request,
    user_id: str,
    user_service: UserService = Depends(get_user_service),
    logger: StructuredLogger = Depends(get_logger),
) -> Any:
    resolved_id = parse_id(user_id).unwrap()
    user = user_service.get_user(resolved_id)

    logger.info("User retrieved successfully", {"userId": resolved_id})
    return success_payload(user)


@router.post(
    "",
    response_model=SuccessResponse[User],
    response_model_exclude_none=True,
    status_code=201,
)
@handle_resource_errors
async def create_user(
    request: Request,
    payload: Any = Body(default=None),
    user_service: UserService = Depends(get_user_service),
    logger: StructuredLogger = Depends(get_logger),
) -> Any:
    """
    Create a new user. Name and email are trimmed, email is lower-cased.

    Raises:
        400: Invalid body
    """
    user_request = validate_create_user(payload).unwrap()
    user = user_service.create_user(user_request)

    logger.success("User created successfully", {"userId": user.id, "email": user.email})
    return success_payload(user, message="User created successfully")


@router.put("/{user_id}", response_model=SuccessResponse[User], response_model_exclude_none=True)
@handle_resource_errors
async def update_user(
    request: Request,
    user_id: str,
    payload: Any = Body(default=None),
    user_service: UserService = Depends(get_user_service),
    logger: StructuredLogger = Depends(get_logger),
) -> Any:
    resolved_id = parse_id(user_id).unwrap()
    changes = validate_update_user(payload).unwrap()
    user = user_service.update_user(resolved_id, changes)

    logger.info("User updated successfully", {"userId": resolved_id})
    return success_payload(user, message="User updated successfully")
