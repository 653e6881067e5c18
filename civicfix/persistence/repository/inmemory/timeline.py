"""In-memory timeline repository for testing."""

from civicfix.domain.model import TimelineEntry
from civicfix.domain.repository import TimelineRepository
from civicfix.domain.value import IssueId


class InMemoryTimelineRepository(TimelineRepository):
    """In-memory implementation of TimelineRepository for testing.

    Entries are kept in insertion order, which stands in for the ``seq``
    column of the database table.
    """

    def __init__(self) -> None:
        self._entries: list[TimelineEntry] = []

    async def append(self, entry: TimelineEntry) -> TimelineEntry:
        """Append an entry."""
        self._entries.append(entry)
        return entry

    async def find_by_issue(self, issue_id: IssueId) -> list[TimelineEntry]:
        """Find all entries for an issue in insertion order."""
        return [e for e in self._entries if e.issue_id == issue_id]

    async def count_by_issue(self, issue_id: IssueId) -> int:
        """Count entries recorded for an issue."""
        return sum(1 for e in self._entries if e.issue_id == issue_id)
