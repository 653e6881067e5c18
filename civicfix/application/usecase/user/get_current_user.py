"""Get current user use case."""

from pydantic import BaseModel

from civicfix.domain.service import UserService

from .views import UserView


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    email: str  # From verified token


class GetCurrentUserUseCase:
    """Use case for getting the authenticated user's profile."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserView:
        """Raises NotFoundError if the user never registered."""
        user = await self.user_service.get_by_email(request.email)
        return UserView.from_user(user)
