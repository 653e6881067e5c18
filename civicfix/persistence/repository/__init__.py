"""PostgreSQL repository implementations."""

from civicfix.persistence.repository.base import PostgresRepository
from civicfix.persistence.repository.issue import PostgresIssueRepository
from civicfix.persistence.repository.payment import PostgresPaymentRepository
from civicfix.persistence.repository.timeline import PostgresTimelineRepository
from civicfix.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresIssueRepository",
    "PostgresPaymentRepository",
    "PostgresRepository",
    "PostgresTimelineRepository",
    "PostgresUserRepository",
]
