"""Domain value objects for CivicFix."""

from civicfix.domain.value.identifiers import (
    IssueId,
    PaymentId,
    TimelineEntryId,
    UserId,
)
from civicfix.domain.value.types import (
    STAFF_TRANSITIONS,
    Actor,
    IssueChanges,
    IssueStatus,
    PaymentKind,
    TimelineStatus,
    UserRole,
)

__all__ = [
    # Identifiers
    "IssueId",
    "PaymentId",
    "TimelineEntryId",
    "UserId",
    # Types
    "STAFF_TRANSITIONS",
    "Actor",
    "IssueChanges",
    "IssueStatus",
    "PaymentKind",
    "TimelineStatus",
    "UserRole",
]
