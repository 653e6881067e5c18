"""PostgreSQL user repository."""

from typing import List, Optional

from sqlalchemy import case, desc, func, select, update

from civicfix.domain.model import User
from civicfix.domain.repository import UserRepository
from civicfix.domain.value import UserRole
from civicfix.persistence.mappers import row_to_user, user_to_dict
from civicfix.persistence.tables import users_table

from .base import PostgresRepository

users = users_table.c


class PostgresUserRepository(PostgresRepository[User], UserRepository):
    """Users keyed by id, looked up by their unique email."""

    table = users_table
    to_model = staticmethod(row_to_user)

    def _by_email(self, email: str):
        return update(users_table).where(users.email == email)

    async def find_by_email(self, email: str) -> Optional[User]:
        return await self._one(select(users_table).where(users.email == email))

    async def find_all(
        self, role: Optional[UserRole] = None, limit: int = 50, offset: int = 0
    ) -> List[User]:
        stmt = select(users_table)
        if role is not None:
            stmt = stmt.where(users.role == role.value)
        return await self._all(
            stmt.order_by(desc(users.created_at)).limit(limit).offset(offset)
        )

    async def count(self, role: Optional[UserRole] = None) -> int:
        stmt = select(func.count()).select_from(users_table)
        if role is not None:
            stmt = stmt.where(users.role == role.value)
        return await self._scalar(stmt)

    async def save(self, user: User) -> User:
        await self._upsert(user_to_dict(user))
        return user

    async def increment_issue_count(self, email: str) -> None:
        await self._write(
            self._by_email(email).values(issue_count=users.issue_count + 1)
        )

    async def decrement_issue_count(self, email: str) -> None:
        # Clamped in SQL so concurrent deletes cannot drive it negative
        await self._write(
            self._by_email(email).values(
                issue_count=case(
                    (users.issue_count > 0, users.issue_count - 1), else_=0
                )
            )
        )

    async def update_role(self, email: str, role: UserRole) -> Optional[User]:
        return await self._write_returning(
            self._by_email(email).values(role=role.value, updated_at=func.now())
        )

    async def set_premium(self, email: str) -> Optional[User]:
        return await self._write_returning(
            self._by_email(email).values(is_premium=True, updated_at=func.now())
        )
