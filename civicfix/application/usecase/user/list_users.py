"""List users use case."""

from pydantic import BaseModel, Field

from civicfix.domain.service import UserService
from civicfix.domain.value import UserRole

from .views import UserView


class ListUsersRequest(BaseModel):
    """List users request."""

    role: UserRole | None = None
    limit: int = Field(default=50, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListUsersResponse(BaseModel):
    """List users response."""

    users: list[UserView]
    total: int
    limit: int
    offset: int


class ListUsersUseCase:
    """Use case for admins browsing users."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: ListUsersRequest) -> ListUsersResponse:
        users, total = await self.user_service.list_users(
            role=request.role, limit=request.limit, offset=request.offset
        )
        return ListUsersResponse(
            users=[UserView.from_user(u) for u in users],
            total=total,
            limit=request.limit,
            offset=request.offset,
        )
