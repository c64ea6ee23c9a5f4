"""
User service orchestrator.

Dependencies: serverless_api.boundary, serverless_api.utils.formatters
System role: User use case orchestration
"""

from serverless_api.boundary.store import ResourceStore
from serverless_api.core.exceptions import ResourceNotFoundError
from serverless_api.models.common import PaginationMeta
from serverless_api.models.user import User
from serverless_api.observability.logger import StructuredLogger
from serverless_api.schemas.user import CreateUserRequest, UpdateUserRequest, UserListQuery
from serverless_api.utils.formatters import calculate_pagination, paginate, validate_pagination


class UserService:
    """User service orchestrator."""

    def __init__(self, store: ResourceStore[User], logger: StructuredLogger) -> None:
        self.store = store
        self.logger = logger

    def list_users(self, query: UserListQuery) -> tuple[list[User], PaginationMeta]:
        """
        List users for one page.

        Raises:
            PaginationError: If page or limit violate the pagination policy
        """
        pagination = validate_pagination(query.page, query.limit)
        users = self.store.get_all()
        return paginate(users, pagination), calculate_pagination(
            pagination.page, pagination.limit, len(users)
        )

    def get_user(self, user_id: int) -> User:
        user = self.store.get_by_id(user_id)
        if user is None:
            raise ResourceNotFoundError(self.store.resource, user_id)
        return user

    def create_user(self, request: CreateUserRequest) -> User:
        return self.store.create(**request.model_dump())

    def update_user(self, user_id: int, request: UpdateUserRequest) -> User:
        """
        Apply a partial update. Fields absent from the request keep their values.

        Raises:
            ResourceNotFoundError: If no user has this id
        """
        user = self.store.update_by_id(user_id, **request.changes())
        if user is None:
            raise ResourceNotFoundError(self.store.resource, user_id)
        return user
