"""User repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from civicfix.domain.model.user import User
from civicfix.domain.value import UserRole


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by their email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self, role: Optional[UserRole] = None, limit: int = 50, offset: int = 0
    ) -> List[User]:
        """Find users, newest first, optionally filtered by role."""
        pass

    @abstractmethod
    async def count(self, role: Optional[UserRole] = None) -> int:
        """Count users, optionally filtered by role."""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def increment_issue_count(self, email: str) -> None:
        """Atomically increment the user's issue count by 1."""
        pass

    @abstractmethod
    async def decrement_issue_count(self, email: str) -> None:
        """Atomically decrement the user's issue count by 1 (minimum 0)."""
        pass

    @abstractmethod
    async def update_role(self, email: str, role: UserRole) -> Optional[User]:
        """Change a user's role.

        Returns:
            Updated user, or None if the user doesn't exist
        """
        pass

    @abstractmethod
    async def set_premium(self, email: str) -> Optional[User]:
        """Mark a user as premium.

        Returns:
            Updated user, or None if the user doesn't exist
        """
        pass
