"""Domain services."""

from .base import Service
from .issue_service import IssueService
from .payment_service import PaymentService
from .timeline_service import TimelineService
from .token_service import TokenService
from .user_service import UserService

__all__ = [
    "IssueService",
    "PaymentService",
    "Service",
    "TimelineService",
    "TokenService",
    "UserService",
]
