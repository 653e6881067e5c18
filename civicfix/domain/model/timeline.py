"""Timeline entry entity.

The timeline is the append-only audit log of an issue. Entries are written
once per lifecycle event and never changed afterwards.
"""

from datetime import datetime

from pydantic import Field

from civicfix.domain.model.common import DomainModel
from civicfix.domain.value import IssueId, TimelineEntryId, TimelineStatus


class TimelineEntry(DomainModel):
    """Single audit record for an issue event.

    ``updated_by`` is an actor label (citizen, staff, admin) or the email of
    the payer who boosted the issue.
    """

    id: TimelineEntryId
    issue_id: IssueId
    status: TimelineStatus
    message: str = Field(min_length=1)
    updated_by: str = Field(min_length=1)
    created_at: datetime = Field(default_factory=datetime.now)
