"""Update user role use case."""

from pydantic import BaseModel

from civicfix.domain.service import UserService
from civicfix.domain.value import UserRole

from .views import UserView


class UpdateUserRoleRequest(BaseModel):
    """Update user role request."""

    email: str
    role: UserRole


class UpdateUserRoleUseCase:
    """Use case for admins promoting or demoting users."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user role use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserRoleRequest) -> UserView:
        """Execute role change.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.change_role(request.email, request.role)
        return UserView.from_user(user)
