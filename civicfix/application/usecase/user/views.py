"""Response shape shared by the user use cases."""

from datetime import datetime

from pydantic import BaseModel

from civicfix.domain.model import User
from civicfix.domain.value import UserRole


class UserView(BaseModel):
    """User profile as returned to clients."""

    user_id: str
    email: str
    name: str | None
    photo_url: str | None
    role: UserRole
    issue_count: int
    is_premium: bool
    created_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserView":
        return cls(
            user_id=str(user.id),
            email=user.email,
            name=user.name,
            photo_url=user.photo_url,
            role=user.role,
            issue_count=user.issue_count,
            is_premium=user.is_premium,
            created_at=user.created_at,
        )
