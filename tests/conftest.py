"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from civicfix.domain.model import Issue, User
from civicfix.domain.value import IssueId, IssueStatus, UserId, UserRole

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_issue(**overrides) -> Issue:
    """Build a pending, unassigned issue with sensible defaults."""
    now = datetime.now()
    fields = {
        "id": IssueId(uuid4()),
        "title": "Broken streetlight",
        "description": "The light on the corner has been out for a week",
        "category": "Streetlight",
        "location": "Main St & 3rd Ave",
        "image_url": None,
        "reporter_email": "citizen@example.com",
        "reporter_name": "Casey Citizen",
        "status": IssueStatus.PENDING,
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return Issue(**fields)


def make_user(email: str = "citizen@example.com", **overrides) -> User:
    """Build a user with sensible defaults."""
    now = datetime.now()
    fields = {
        "id": UserId(uuid4()),
        "email": email,
        "name": email.split("@")[0].title(),
        "role": UserRole.CITIZEN,
        "created_at": now,
        "updated_at": now,
    }
    fields.update(overrides)
    return User(**fields)


def minutes_ago(minutes: int) -> datetime:
    """Timestamp ``minutes`` before now."""
    return datetime.now() - timedelta(minutes=minutes)
