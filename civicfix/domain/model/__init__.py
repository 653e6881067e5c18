"""Domain model entities for CivicFix."""

from civicfix.domain.model.issue import Issue
from civicfix.domain.model.payment import Payment
from civicfix.domain.model.timeline import TimelineEntry
from civicfix.domain.model.user import User

__all__ = [
    "Issue",
    "Payment",
    "TimelineEntry",
    "User",
]
