"""Shared statement helpers for the PostgreSQL repositories."""

from collections.abc import Callable, Mapping
from typing import Any, Generic, List, Optional, TypeVar

from sqlalchemy import Table
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

T = TypeVar("T")


class PostgresRepository(Generic[T]):
    """Runs Core statements on the request session and maps rows to models.

    Subclasses set ``table`` and ``to_model``, a staticmethod row mapper.
    Every write is flushed immediately so constraint violations surface
    inside the operation that caused them, not at commit.
    """

    table: Table
    to_model: Callable[[Mapping[str, Any]], T]

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    def _map(self, row: Mapping[str, Any]) -> T:
        return self.to_model(dict(row))

    async def _one(self, stmt) -> Optional[T]:
        row = (await self.session.execute(stmt)).mappings().first()
        return self._map(row) if row else None

    async def _all(self, stmt) -> List[T]:
        rows = (await self.session.execute(stmt)).mappings().all()
        return [self._map(row) for row in rows]

    async def _scalar(self, stmt) -> int:
        return int((await self.session.execute(stmt)).scalar() or 0)

    async def _write(self, stmt) -> int:
        """Execute a write and return the affected row count."""
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def _write_returning(self, stmt) -> Optional[T]:
        """Execute an UPDATE and map the row it touched, if any."""
        row = (
            (await self.session.execute(stmt.returning(*self.table.c)))
            .mappings()
            .first()
        )
        await self.session.flush()
        return self._map(row) if row else None

    async def _upsert(self, values: dict[str, Any]) -> None:
        """Insert ``values`` or overwrite the row with the same primary key."""
        stmt = pg_insert(self.table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[self.table.c.id],
            set_={k: v for k, v in values.items() if k != "id"},
        )
        await self._write(stmt)
