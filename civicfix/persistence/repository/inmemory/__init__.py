"""In-memory repository implementations for testing."""

from .issue import InMemoryIssueRepository
from .payment import InMemoryPaymentRepository
from .timeline import InMemoryTimelineRepository
from .user import InMemoryUserRepository

__all__ = [
    "InMemoryIssueRepository",
    "InMemoryPaymentRepository",
    "InMemoryTimelineRepository",
    "InMemoryUserRepository",
]
