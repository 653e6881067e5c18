"""Strongly typed identifiers for CivicFix domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

IssueId = NewType("IssueId", UUID)
TimelineEntryId = NewType("TimelineEntryId", UUID)
UserId = NewType("UserId", UUID)
PaymentId = NewType("PaymentId", UUID)
