"""Domain value objects for CivicFix.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import Field, field_validator

from civicfix.domain.value.common import ValueObject


class IssueStatus(str, Enum):
    """Lifecycle status of an issue."""

    PENDING = "Pending"
    IN_PROGRESS = "In-progress"
    WORKING = "Working"
    RESOLVED = "Resolved"
    CLOSED = "Closed"
    REJECTED = "Rejected"

    @property
    def allowed_next(self) -> frozenset["IssueStatus"]:
        """Statuses staff may move an issue to from this one."""
        return STAFF_TRANSITIONS.get(self, frozenset())

    def can_transition_to(self, target: "IssueStatus") -> bool:
        """Whether ``target`` is reachable from this status by staff."""
        return target in self.allowed_next


# Staff-driven transitions. Closed and Rejected have no outgoing edges,
# Rejected is only reachable through the admin reject operation.
STAFF_TRANSITIONS: dict[IssueStatus, frozenset[IssueStatus]] = {
    IssueStatus.PENDING: frozenset({IssueStatus.IN_PROGRESS}),
    IssueStatus.IN_PROGRESS: frozenset({IssueStatus.WORKING}),
    IssueStatus.WORKING: frozenset({IssueStatus.RESOLVED}),
    IssueStatus.RESOLVED: frozenset({IssueStatus.CLOSED}),
}


class TimelineStatus(str, Enum):
    """Status label recorded on a timeline entry.

    Mirrors IssueStatus plus ``Boosted``, which marks a boost event without
    changing the issue status.
    """

    PENDING = "Pending"
    IN_PROGRESS = "In-progress"
    WORKING = "Working"
    RESOLVED = "Resolved"
    CLOSED = "Closed"
    REJECTED = "Rejected"
    BOOSTED = "Boosted"

    @classmethod
    def from_issue_status(cls, status: IssueStatus) -> "TimelineStatus":
        """Timeline label for an issue status."""
        return cls(status.value)


class UserRole(str, Enum):
    """Role of a user."""

    CITIZEN = "citizen"
    STAFF = "staff"
    ADMIN = "admin"


class Actor(str, Enum):
    """Generic actor labels written to the timeline.

    Boosts record the payer's email instead.
    """

    CITIZEN = "citizen"
    STAFF = "staff"
    ADMIN = "admin"


class PaymentKind(str, Enum):
    """What a confirmed payment unlocks."""

    BOOST = "boost"
    SUBSCRIPTION = "subscription"


class IssueChanges(ValueObject):
    """Fields a reporter may edit on a pending issue."""

    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = Field(default=None, max_length=5000)
    category: str | None = Field(default=None, min_length=1, max_length=100)
    location: str | None = Field(default=None, min_length=1, max_length=300)
    image_url: str | None = None

    @field_validator("title", "category", "location")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        """Reject whitespace-only values."""
        if v is not None and not v.strip():
            raise ValueError("Value must not be blank")
        return v.strip() if v is not None else v

    def as_update(self) -> dict[str, str]:
        """Changed fields only."""
        return self.model_dump(exclude_none=True)
