"""Response shapes shared by the issue use cases."""

from datetime import datetime

from pydantic import BaseModel

from civicfix.domain.model import Issue, TimelineEntry
from civicfix.domain.value import IssueStatus, TimelineStatus


class IssueView(BaseModel):
    """Issue as returned to clients."""

    issue_id: str
    title: str
    description: str
    category: str
    location: str
    image_url: str | None
    reporter_email: str
    reporter_name: str | None
    status: IssueStatus
    is_boosted: bool
    upvote_count: int
    upvoted_by: list[str]
    assigned_staff_email: str | None
    assigned_staff_name: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_issue(cls, issue: Issue) -> "IssueView":
        return cls(
            issue_id=str(issue.id),
            title=issue.title,
            description=issue.description,
            category=issue.category,
            location=issue.location,
            image_url=issue.image_url,
            reporter_email=issue.reporter_email,
            reporter_name=issue.reporter_name,
            status=issue.status,
            is_boosted=issue.is_boosted,
            upvote_count=issue.upvote_count,
            upvoted_by=list(issue.upvoted_by),
            assigned_staff_email=issue.assigned_staff_email,
            assigned_staff_name=issue.assigned_staff_name,
            created_at=issue.created_at,
            updated_at=issue.updated_at,
        )


class TimelineEntryView(BaseModel):
    """Timeline entry as returned to clients."""

    entry_id: str
    issue_id: str
    status: TimelineStatus
    message: str
    updated_by: str
    created_at: datetime

    @classmethod
    def from_entry(cls, entry: TimelineEntry) -> "TimelineEntryView":
        return cls(
            entry_id=str(entry.id),
            issue_id=str(entry.issue_id),
            status=entry.status,
            message=entry.message,
            updated_by=entry.updated_by,
            created_at=entry.created_at,
        )
