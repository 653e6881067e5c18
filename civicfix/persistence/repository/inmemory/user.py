"""In-memory user repository for testing."""

from datetime import datetime
from typing import Optional

from civicfix.domain.model import User
from civicfix.domain.repository import UserRepository
from civicfix.domain.value import UserId, UserRole


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def find_all(
        self, role: Optional[UserRole] = None, limit: int = 50, offset: int = 0
    ) -> list[User]:
        """Find users, newest first."""
        users = [u for u in self._users.values() if role is None or u.role == role]
        users.sort(key=lambda u: u.created_at, reverse=True)
        return users[offset : offset + limit]

    async def count(self, role: Optional[UserRole] = None) -> int:
        """Count users."""
        return sum(1 for u in self._users.values() if role is None or u.role == role)

    async def save(self, user: User) -> User:
        """Save or update a user."""
        self._users[user.id] = user
        return user

    async def increment_issue_count(self, email: str) -> None:
        """Atomically increment the user's issue count by 1."""
        user = await self.find_by_email(email)
        if user:
            self._users[user.id] = user.model_copy(
                update={"issue_count": user.issue_count + 1}
            )

    async def decrement_issue_count(self, email: str) -> None:
        """Atomically decrement the user's issue count by 1 (minimum 0)."""
        user = await self.find_by_email(email)
        if user:
            self._users[user.id] = user.model_copy(
                update={"issue_count": max(0, user.issue_count - 1)}
            )

    async def update_role(self, email: str, role: UserRole) -> Optional[User]:
        """Change a user's role."""
        user = await self.find_by_email(email)
        if user is None:
            return None
        updated = user.model_copy(update={"role": role, "updated_at": datetime.now()})
        self._users[user.id] = updated
        return updated

    async def set_premium(self, email: str) -> Optional[User]:
        """Mark a user as premium."""
        user = await self.find_by_email(email)
        if user is None:
            return None
        updated = user.model_copy(
            update={"is_premium": True, "updated_at": datetime.now()}
        )
        self._users[user.id] = updated
        return updated
