"""User domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from civicfix.domain.error import NotFoundError
from civicfix.domain.model import User
from civicfix.domain.repository import UserRepository
from civicfix.domain.value import UserId, UserRole

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_email(self, email: str) -> User:
        """Get user by email.

        Args:
            email: User email

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_email", email=email):
            user = await self.user_repository.find_by_email(email)
            if not user:
                logfire.warn("User not found", email=email)
                raise NotFoundError("User", email)
            return user

    async def find_by_email(self, email: str) -> User | None:
        """Get user by email, or None if not registered."""
        return await self.user_repository.find_by_email(email)

    async def register(
        self,
        email: str,
        name: str | None = None,
        photo_url: str | None = None,
        role: UserRole = UserRole.CITIZEN,
    ) -> tuple[User, bool]:
        """Register a user if the email is not known yet.

        Args:
            email: Email from the identity token
            name: Display name
            photo_url: Avatar URL
            role: Initial role

        Returns:
            Tuple of (user, created). ``created`` is False when the email was
            already registered, in which case the stored user is returned
            unchanged.
        """
        with logfire.span("user_service.register", email=email, role=role.value):
            existing = await self.user_repository.find_by_email(email)
            if existing:
                logfire.info("User already exists", email=email)
                return existing, False

            now = datetime.now()
            user = User(
                id=UserId(uuid4()),
                email=email,
                name=name,
                photo_url=photo_url,
                role=role,
                issue_count=0,
                is_premium=False,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", email=email, role=role.value)
            return saved, True

    async def list_users(
        self, role: UserRole | None = None, limit: int = 50, offset: int = 0
    ) -> tuple[list[User], int]:
        """List users with their total count.

        Returns:
            Tuple of (users page, total matching users)
        """
        with logfire.span(
            "user_service.list_users",
            role=role.value if role else None,
            limit=limit,
            offset=offset,
        ):
            total = await self.user_repository.count(role=role)
            users = await self.user_repository.find_all(
                role=role, limit=limit, offset=offset
            )
            return users, total

    async def change_role(self, email: str, role: UserRole) -> User:
        """Change a user's role.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.change_role", email=email, role=role.value):
            updated = await self.user_repository.update_role(email, role)
            if not updated:
                logfire.warn("Role change for unknown user", email=email)
                raise NotFoundError("User", email)
            logfire.info("User role changed", email=email, role=role.value)
            return updated

    async def set_premium(self, email: str) -> User:
        """Mark a user as premium after a confirmed subscription payment.

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.set_premium", email=email):
            updated = await self.user_repository.set_premium(email)
            if not updated:
                logfire.warn("Premium upgrade for unknown user", email=email)
                raise NotFoundError("User", email)
            logfire.info("User upgraded to premium", email=email)
            return updated

    async def increment_issue_count(self, email: str) -> None:
        """Atomically increment a reporter's issue count.

        Called exactly once per successful report.
        """
        with logfire.span("user_service.increment_issue_count", email=email):
            await self.user_repository.increment_issue_count(email)

    async def decrement_issue_count(self, email: str) -> None:
        """Atomically decrement a reporter's issue count (minimum 0).

        Called exactly once per successful deletion.
        """
        with logfire.span("user_service.decrement_issue_count", email=email):
            await self.user_repository.decrement_issue_count(email)
