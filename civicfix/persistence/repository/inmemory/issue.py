"""In-memory issue repository for testing."""

from datetime import datetime
from typing import Optional

from civicfix.domain.model import Issue
from civicfix.domain.repository import IssueFilter, IssueRepository
from civicfix.domain.value import IssueId, IssueStatus


def _matches(issue: Issue, filters: IssueFilter) -> bool:
    if filters.status is not None and issue.status != filters.status:
        return False
    if filters.category and issue.category.lower() != filters.category.lower():
        return False
    if filters.reporter_email and issue.reporter_email != filters.reporter_email:
        return False
    if (
        filters.assigned_staff_email
        and issue.assigned_staff_email != filters.assigned_staff_email
    ):
        return False
    if filters.search:
        needle = filters.search.lower()
        haystack = (issue.title, issue.category, issue.location)
        if not any(needle in field.lower() for field in haystack):
            return False
    return True


class InMemoryIssueRepository(IssueRepository):
    """In-memory implementation of IssueRepository for testing."""

    def __init__(self) -> None:
        self._issues: dict[IssueId, Issue] = {}

    def _replace(self, issue: Issue, **changes) -> Issue:
        updated = issue.model_copy(update={**changes, "updated_at": datetime.now()})
        self._issues[issue.id] = updated
        return updated

    async def find_by_id(self, issue_id: IssueId) -> Optional[Issue]:
        """Find an issue by ID."""
        return self._issues.get(issue_id)

    async def find_all(
        self,
        filters: IssueFilter = IssueFilter(),
        limit: int = 10,
        offset: int = 0,
    ) -> list[Issue]:
        """Find issues, boosted first, then newest first."""
        issues = [i for i in self._issues.values() if _matches(i, filters)]
        issues.sort(key=lambda i: (i.is_boosted, i.created_at), reverse=True)
        return issues[offset : offset + limit]

    async def count(self, filters: IssueFilter = IssueFilter()) -> int:
        """Count issues matching the given filters."""
        return sum(1 for i in self._issues.values() if _matches(i, filters))

    async def count_by_status(
        self, filters: IssueFilter = IssueFilter()
    ) -> dict[IssueStatus, int]:
        """Count issues per status."""
        counts: dict[IssueStatus, int] = {}
        for issue in self._issues.values():
            if _matches(issue, filters):
                counts[issue.status] = counts.get(issue.status, 0) + 1
        return counts

    async def save(self, issue: Issue) -> Issue:
        """Save or update an issue."""
        self._issues[issue.id] = issue
        return issue

    async def update_details_if_pending(
        self, issue_id: IssueId, reporter_email: str, changes: dict[str, str]
    ) -> Optional[Issue]:
        """Apply edits only while pending and owned by ``reporter_email``."""
        issue = self._issues.get(issue_id)
        if (
            issue is None
            or issue.reporter_email != reporter_email
            or issue.status != IssueStatus.PENDING
        ):
            return None
        return self._replace(issue, **changes)

    async def delete(self, issue_id: IssueId) -> bool:
        """Delete an issue."""
        return self._issues.pop(issue_id, None) is not None

    async def compare_and_set_status(
        self, issue_id: IssueId, expected: IssueStatus, status: IssueStatus
    ) -> Optional[Issue]:
        """Set status only if the current status equals ``expected``."""
        issue = self._issues.get(issue_id)
        if issue is None or issue.status != expected:
            return None
        return self._replace(issue, status=status)

    async def set_status(
        self, issue_id: IssueId, status: IssueStatus
    ) -> Optional[Issue]:
        """Set status unconditionally."""
        issue = self._issues.get(issue_id)
        if issue is None:
            return None
        return self._replace(issue, status=status)

    async def assign_if_unassigned(
        self, issue_id: IssueId, staff_email: str, staff_name: str
    ) -> Optional[Issue]:
        """Set the assignee only if none is set."""
        issue = self._issues.get(issue_id)
        if issue is None or issue.is_assigned:
            return None
        return self._replace(
            issue, assigned_staff_email=staff_email, assigned_staff_name=staff_name
        )

    async def add_upvote(self, issue_id: IssueId, voter_email: str) -> bool:
        """Add a voter and increment the vote count together."""
        issue = self._issues.get(issue_id)
        if issue is None or issue.has_voted(voter_email):
            return False
        self._issues[issue_id] = issue.model_copy(
            update={
                "upvoted_by": [*issue.upvoted_by, voter_email],
                "upvote_count": issue.upvote_count + 1,
            }
        )
        return True

    async def set_boosted(self, issue_id: IssueId) -> Optional[Issue]:
        """Mark an issue as boosted."""
        issue = self._issues.get(issue_id)
        if issue is None:
            return None
        return self._replace(issue, is_boosted=True)
