"""Get issue timeline use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from civicfix.domain.service import TimelineService
from civicfix.domain.value import IssueId

from .views import TimelineEntryView


class GetTimelineRequest(BaseModel):
    """Get timeline request."""

    issue_id: UUID


class GetTimelineResponse(BaseModel):
    """Timeline entries, oldest first."""

    issue_id: str
    entries: list[TimelineEntryView]


class GetTimelineUseCase:
    """Use case for reading an issue's audit timeline.

    Entries outlive their issue, so the timeline of a deleted issue is still
    returned. Unknown ids yield an empty timeline.
    """

    def __init__(self, timeline_service: TimelineService) -> None:
        self.timeline_service = timeline_service

    async def execute(self, request: GetTimelineRequest) -> GetTimelineResponse:
        with logfire.span("get_timeline.execute", issue_id=str(request.issue_id)):
            entries = await self.timeline_service.get_for_issue(
                IssueId(request.issue_id)
            )
            return GetTimelineResponse(
                issue_id=str(request.issue_id),
                entries=[TimelineEntryView.from_entry(e) for e in entries],
            )
