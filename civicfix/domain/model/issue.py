"""Issue aggregate root.

Issues are infrastructure problems reported by citizens and worked through
a fixed status lifecycle by staff.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from civicfix.domain.model.common import DomainModel
from civicfix.domain.value import IssueId, IssueStatus


class Issue(DomainModel):
    """Issue aggregate root - current-state snapshot.

    Business rules:
    - upvote_count always equals the number of distinct voters
    - an issue is assigned at most once
    - is_boosted is orthogonal to status
    """

    id: IssueId
    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    category: str = Field(min_length=1, max_length=100)
    location: str = Field(min_length=1, max_length=300)
    image_url: Optional[str] = None
    reporter_email: str
    reporter_name: Optional[str] = None
    status: IssueStatus = IssueStatus.PENDING
    is_boosted: bool = False
    upvote_count: int = Field(default=0, ge=0)
    upvoted_by: list[str] = Field(default_factory=list)
    assigned_staff_email: Optional[str] = None
    assigned_staff_name: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_votes(self) -> "Issue":
        """Voters are unique and counted exactly once."""
        if len(set(self.upvoted_by)) != len(self.upvoted_by):
            raise ValueError("Voter list contains duplicates")
        if self.upvote_count != len(self.upvoted_by):
            raise ValueError("Upvote count does not match number of voters")
        return self

    @property
    def is_assigned(self) -> bool:
        """Whether a staff member has been assigned."""
        return self.assigned_staff_email is not None

    def has_voted(self, voter_email: str) -> bool:
        """Whether ``voter_email`` has already upvoted this issue."""
        return voter_email in self.upvoted_by
