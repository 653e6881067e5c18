"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from civicfix.domain.model import Issue, Payment, TimelineEntry, User
from civicfix.domain.value import (
    IssueId,
    IssueStatus,
    PaymentId,
    PaymentKind,
    TimelineEntryId,
    TimelineStatus,
    UserId,
    UserRole,
)


def _uuid(value: Any) -> UUID:
    """Coerce a driver value (UUID or str) to UUID."""
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        name=row.get("name"),
        photo_url=row.get("photo_url"),
        role=UserRole(row["role"]),
        issue_count=row["issue_count"],
        is_premium=row["is_premium"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    data = user.model_dump()
    data["role"] = user.role.value
    return data


def row_to_issue(row: Dict[str, Any]) -> Issue:
    """Convert database row to Issue domain model."""
    return Issue(
        id=IssueId(_uuid(row["id"])),
        title=row["title"],
        description=row.get("description") or "",
        category=row["category"],
        location=row["location"],
        image_url=row.get("image_url"),
        reporter_email=row["reporter_email"],
        reporter_name=row.get("reporter_name"),
        status=IssueStatus(row["status"]),
        is_boosted=row["is_boosted"],
        upvote_count=row["upvote_count"],
        upvoted_by=list(row.get("upvoted_by") or []),
        assigned_staff_email=row.get("assigned_staff_email"),
        assigned_staff_name=row.get("assigned_staff_name"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def issue_to_dict(issue: Issue) -> Dict[str, Any]:
    """Convert Issue domain model to database dict."""
    data = issue.model_dump()
    data["status"] = issue.status.value
    return data


def row_to_timeline_entry(row: Dict[str, Any]) -> TimelineEntry:
    """Convert database row to TimelineEntry domain model."""
    return TimelineEntry(
        id=TimelineEntryId(_uuid(row["id"])),
        issue_id=IssueId(_uuid(row["issue_id"])),
        status=TimelineStatus(row["status"]),
        message=row["message"],
        updated_by=row["updated_by"],
        created_at=row["created_at"],
    )


def timeline_entry_to_dict(entry: TimelineEntry) -> Dict[str, Any]:
    """Convert TimelineEntry domain model to database dict.

    ``seq`` is left to the database identity column.
    """
    data = entry.model_dump()
    data["status"] = entry.status.value
    return data


def row_to_payment(row: Dict[str, Any]) -> Payment:
    """Convert database row to Payment domain model."""
    issue_id = row.get("issue_id")
    return Payment(
        id=PaymentId(_uuid(row["id"])),
        session_id=row["session_id"],
        email=row["email"],
        kind=PaymentKind(row["kind"]),
        amount=row["amount"],
        currency=row["currency"],
        issue_id=IssueId(_uuid(issue_id)) if issue_id else None,
        created_at=row["created_at"],
    )


def payment_to_dict(payment: Payment) -> Dict[str, Any]:
    """Convert Payment domain model to database dict."""
    data = payment.model_dump()
    data["kind"] = payment.kind.value
    return data
