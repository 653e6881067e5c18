"""Repository interfaces for CivicFix domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from civicfix.domain.repository.issue import IssueFilter, IssueRepository
from civicfix.domain.repository.payment import PaymentRepository
from civicfix.domain.repository.timeline import TimelineRepository
from civicfix.domain.repository.user import UserRepository

__all__ = [
    "IssueFilter",
    "IssueRepository",
    "PaymentRepository",
    "TimelineRepository",
    "UserRepository",
]
