"""PostgreSQL issue repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Select, delete, desc, func, or_, select, update

from civicfix.domain.model import Issue
from civicfix.domain.repository import IssueFilter, IssueRepository
from civicfix.domain.value import IssueId, IssueStatus
from civicfix.persistence.mappers import issue_to_dict, row_to_issue
from civicfix.persistence.tables import issues_table

from .base import PostgresRepository

issues = issues_table.c


def _apply_filters(stmt: Select, filters: IssueFilter) -> Select:
    """Add WHERE clauses for the given listing filters."""
    if filters.status is not None:
        stmt = stmt.where(issues.status == filters.status.value)
    if filters.category:
        stmt = stmt.where(func.lower(issues.category) == filters.category.lower())
    if filters.reporter_email:
        stmt = stmt.where(issues.reporter_email == filters.reporter_email)
    if filters.assigned_staff_email:
        stmt = stmt.where(issues.assigned_staff_email == filters.assigned_staff_email)
    if filters.search:
        pattern = f"%{filters.search}%"
        stmt = stmt.where(
            or_(
                issues.title.ilike(pattern),
                issues.category.ilike(pattern),
                issues.location.ilike(pattern),
            )
        )
    return stmt


class PostgresIssueRepository(PostgresRepository[Issue], IssueRepository):
    """Issues, with the lifecycle writes done as single conditional UPDATEs.

    A conditional UPDATE that matches no row returns None (or False), which
    the service reads as "someone else got there first".
    """

    table = issues_table
    to_model = staticmethod(row_to_issue)

    def _touch(self, issue_id: IssueId, *conditions):
        return (
            update(issues_table)
            .where(issues.id == issue_id, *conditions)
            .values(updated_at=func.now())
        )

    async def find_by_id(self, issue_id: IssueId) -> Optional[Issue]:
        return await self._one(select(issues_table).where(issues.id == issue_id))

    async def find_all(
        self,
        filters: IssueFilter = IssueFilter(),
        limit: int = 10,
        offset: int = 0,
    ) -> List[Issue]:
        """Boosted issues first, then newest first."""
        with logfire.span("issue_repository.find_all", limit=limit, offset=offset):
            stmt = (
                _apply_filters(select(issues_table), filters)
                .order_by(desc(issues.is_boosted), desc(issues.created_at))
                .limit(limit)
                .offset(offset)
            )
            return await self._all(stmt)

    async def count(self, filters: IssueFilter = IssueFilter()) -> int:
        return await self._scalar(
            _apply_filters(select(func.count()).select_from(issues_table), filters)
        )

    async def count_by_status(
        self, filters: IssueFilter = IssueFilter()
    ) -> dict[IssueStatus, int]:
        stmt = _apply_filters(
            select(issues.status, func.count()).select_from(issues_table), filters
        ).group_by(issues.status)
        result = await self.session.execute(stmt)
        return {IssueStatus(status): n for status, n in result.all()}

    async def save(self, issue: Issue) -> Issue:
        await self._upsert(issue_to_dict(issue))
        return issue

    async def update_details_if_pending(
        self, issue_id: IssueId, reporter_email: str, changes: dict[str, str]
    ) -> Optional[Issue]:
        stmt = self._touch(
            issue_id,
            issues.reporter_email == reporter_email,
            issues.status == IssueStatus.PENDING.value,
        ).values(**changes)
        return await self._write_returning(stmt)

    async def delete(self, issue_id: IssueId) -> bool:
        return await self._write(delete(issues_table).where(issues.id == issue_id)) > 0

    async def compare_and_set_status(
        self, issue_id: IssueId, expected: IssueStatus, status: IssueStatus
    ) -> Optional[Issue]:
        stmt = self._touch(issue_id, issues.status == expected.value).values(
            status=status.value
        )
        return await self._write_returning(stmt)

    async def set_status(
        self, issue_id: IssueId, status: IssueStatus
    ) -> Optional[Issue]:
        return await self._write_returning(
            self._touch(issue_id).values(status=status.value)
        )

    async def assign_if_unassigned(
        self, issue_id: IssueId, staff_email: str, staff_name: str
    ) -> Optional[Issue]:
        stmt = self._touch(issue_id, issues.assigned_staff_email.is_(None)).values(
            assigned_staff_email=staff_email, assigned_staff_name=staff_name
        )
        return await self._write_returning(stmt)

    async def add_upvote(self, issue_id: IssueId, voter_email: str) -> bool:
        """Append the voter and bump the count, unless they already voted."""
        stmt = (
            update(issues_table)
            .where(issues.id == issue_id, ~issues.upvoted_by.contains([voter_email]))
            .values(
                upvoted_by=func.array_append(
                    issues.upvoted_by, voter_email, type_=issues.upvoted_by.type
                ),
                upvote_count=issues.upvote_count + 1,
            )
        )
        return await self._write(stmt) > 0

    async def set_boosted(self, issue_id: IssueId) -> Optional[Issue]:
        return await self._write_returning(
            self._touch(issue_id).values(is_boosted=True)
        )
