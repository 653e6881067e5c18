"""PostgreSQL timeline repository."""

from typing import List

from sqlalchemy import func, insert, select

from civicfix.domain.model import TimelineEntry
from civicfix.domain.repository import TimelineRepository
from civicfix.domain.value import IssueId
from civicfix.persistence.mappers import row_to_timeline_entry, timeline_entry_to_dict
from civicfix.persistence.tables import issue_timeline_table

from .base import PostgresRepository

entries = issue_timeline_table.c


class PostgresTimelineRepository(
    PostgresRepository[TimelineEntry], TimelineRepository
):
    """Append-only issue timeline.

    Rows are ordered by the ``seq`` identity column, which preserves insertion
    order even when two entries share a timestamp. A trigger in the schema
    rejects UPDATE and DELETE on this table.
    """

    table = issue_timeline_table
    to_model = staticmethod(row_to_timeline_entry)

    async def append(self, entry: TimelineEntry) -> TimelineEntry:
        await self._write(
            insert(issue_timeline_table).values(**timeline_entry_to_dict(entry))
        )
        return entry

    async def find_by_issue(self, issue_id: IssueId) -> List[TimelineEntry]:
        return await self._all(
            select(issue_timeline_table)
            .where(entries.issue_id == issue_id)
            .order_by(entries.seq)
        )

    async def count_by_issue(self, issue_id: IssueId) -> int:
        return await self._scalar(
            select(func.count())
            .select_from(issue_timeline_table)
            .where(entries.issue_id == issue_id)
        )
