"""Timeline domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from civicfix.domain.model.timeline import TimelineEntry
from civicfix.domain.repository import TimelineRepository
from civicfix.domain.value import IssueId, TimelineEntryId, TimelineStatus

from .base import Service


class TimelineService(Service):
    """Domain service for the issue audit timeline."""

    def __init__(self, timeline_repository: TimelineRepository) -> None:
        """Initialize timeline service.

        Args:
            timeline_repository: Timeline repository
        """
        self.timeline_repository = timeline_repository

    async def record(
        self,
        issue_id: IssueId,
        status: TimelineStatus,
        message: str,
        updated_by: str,
    ) -> TimelineEntry:
        """Append one entry to an issue's timeline.

        Args:
            issue_id: Issue the event belongs to
            status: Resulting status label
            message: Human-readable description of the event
            updated_by: Actor label or email

        Returns:
            Stored entry
        """
        entry = TimelineEntry(
            id=TimelineEntryId(uuid4()),
            issue_id=issue_id,
            status=status,
            message=message,
            updated_by=updated_by,
            created_at=datetime.now(),
        )
        saved = await self.timeline_repository.append(entry)
        logfire.info(
            "Timeline entry recorded",
            issue_id=str(issue_id),
            status=status.value,
            updated_by=updated_by,
        )
        return saved

    async def get_for_issue(self, issue_id: IssueId) -> list[TimelineEntry]:
        """Get an issue's timeline, oldest first.

        Entries are returned even if the issue itself has been deleted.
        """
        with logfire.span("timeline_service.get_for_issue", issue_id=str(issue_id)):
            return await self.timeline_repository.find_by_issue(issue_id)

    async def count_for_issue(self, issue_id: IssueId) -> int:
        """Count an issue's timeline entries."""
        return await self.timeline_repository.count_by_issue(issue_id)
