"""User use cases."""

from .get_current_user import GetCurrentUserRequest, GetCurrentUserUseCase
from .list_users import ListUsersRequest, ListUsersResponse, ListUsersUseCase
from .register_user import (
    RegisterUserRequest,
    RegisterUserResponse,
    RegisterUserUseCase,
)
from .update_user_role import UpdateUserRoleRequest, UpdateUserRoleUseCase
from .views import UserView

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserUseCase",
    "ListUsersRequest",
    "ListUsersResponse",
    "ListUsersUseCase",
    "RegisterUserRequest",
    "RegisterUserResponse",
    "RegisterUserUseCase",
    "UpdateUserRoleRequest",
    "UpdateUserRoleUseCase",
    "UserView",
]
