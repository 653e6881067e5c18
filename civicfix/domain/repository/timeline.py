"""Timeline repository interface."""

from abc import ABC, abstractmethod
from typing import List

from civicfix.domain.model.timeline import TimelineEntry
from civicfix.domain.value import IssueId


class TimelineRepository(ABC):
    """Append-only store of timeline entries.

    There is deliberately no update or delete: entries outlive their issue.
    """

    @abstractmethod
    async def append(self, entry: TimelineEntry) -> TimelineEntry:
        """Append an entry.

        Args:
            entry: The entry to append

        Returns:
            The stored entry
        """
        pass

    @abstractmethod
    async def find_by_issue(self, issue_id: IssueId) -> List[TimelineEntry]:
        """Find all entries for an issue, oldest first.

        Args:
            issue_id: The issue's ID

        Returns:
            Entries in insertion order
        """
        pass

    @abstractmethod
    async def count_by_issue(self, issue_id: IssueId) -> int:
        """Count entries recorded for an issue."""
        pass
