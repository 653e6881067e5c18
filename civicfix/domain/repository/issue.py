"""Issue repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from civicfix.domain.model.issue import Issue
from civicfix.domain.value import IssueId, IssueStatus
from civicfix.domain.value.common import ValueObject


class IssueFilter(ValueObject):
    """Filters for issue listings. ``None`` means no filtering on that field."""

    status: Optional[IssueStatus] = None
    category: Optional[str] = None
    search: Optional[str] = None  # Case-insensitive match on title, category, location
    reporter_email: Optional[str] = None
    assigned_staff_email: Optional[str] = None


class IssueRepository(ABC):
    """Repository for Issue aggregate.

    Conditional updates (status compare-and-set, one-way assignment, vote
    append) must be single atomic statements so concurrent requests cannot
    both succeed.
    """

    @abstractmethod
    async def find_by_id(self, issue_id: IssueId) -> Optional[Issue]:
        """Find an issue by ID.

        Args:
            issue_id: The issue's unique identifier

        Returns:
            The issue if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        filters: IssueFilter = IssueFilter(),
        limit: int = 10,
        offset: int = 0,
    ) -> List[Issue]:
        """Find issues, boosted first, then newest first.

        Args:
            filters: Listing filters
            limit: Maximum number of issues to return
            offset: Number of issues to skip

        Returns:
            List of issues matching the criteria
        """
        pass

    @abstractmethod
    async def count(self, filters: IssueFilter = IssueFilter()) -> int:
        """Count issues matching the given filters."""
        pass

    @abstractmethod
    async def count_by_status(
        self, filters: IssueFilter = IssueFilter()
    ) -> dict[IssueStatus, int]:
        """Count issues per status. Statuses with no issues are omitted."""
        pass

    @abstractmethod
    async def save(self, issue: Issue) -> Issue:
        """Save an issue (create or update).

        Args:
            issue: The issue to save

        Returns:
            The saved issue
        """
        pass

    @abstractmethod
    async def update_details_if_pending(
        self, issue_id: IssueId, reporter_email: str, changes: dict[str, str]
    ) -> Optional[Issue]:
        """Apply reporter edits only while the issue is pending and theirs.

        Only the columns named in ``changes`` are written; status, votes,
        assignment and boost are left as stored.

        Returns:
            Updated issue, or None if the issue is missing, belongs to
            someone else or has left ``Pending``
        """
        pass

    @abstractmethod
    async def delete(self, issue_id: IssueId) -> bool:
        """Delete an issue (hard delete).

        Returns:
            True if an issue was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def compare_and_set_status(
        self, issue_id: IssueId, expected: IssueStatus, status: IssueStatus
    ) -> Optional[Issue]:
        """Set status only if the current status equals ``expected``.

        Returns:
            Updated issue, or None if the issue is missing or its status changed
        """
        pass

    @abstractmethod
    async def set_status(
        self, issue_id: IssueId, status: IssueStatus
    ) -> Optional[Issue]:
        """Set status unconditionally.

        Returns:
            Updated issue, or None if the issue doesn't exist
        """
        pass

    @abstractmethod
    async def assign_if_unassigned(
        self, issue_id: IssueId, staff_email: str, staff_name: str
    ) -> Optional[Issue]:
        """Set the assignee only if none is set.

        Returns:
            Updated issue, or None if the issue is missing or already assigned
        """
        pass

    @abstractmethod
    async def add_upvote(self, issue_id: IssueId, voter_email: str) -> bool:
        """Add a voter and increment the vote count in one step.

        Returns:
            True if the vote was recorded, False if the voter already voted
            or the issue doesn't exist
        """
        pass

    @abstractmethod
    async def set_boosted(self, issue_id: IssueId) -> Optional[Issue]:
        """Mark an issue as boosted.

        Returns:
            Updated issue, or None if the issue doesn't exist
        """
        pass
