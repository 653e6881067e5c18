"""User aggregate root."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from civicfix.domain.model.common import DomainModel
from civicfix.domain.value import UserId, UserRole


class User(DomainModel):
    """User aggregate root.

    Users are identified by the email claim of their identity token.
    ``issue_count`` tracks how many issues the user currently has on file.
    """

    id: UserId
    email: str = Field(min_length=3, max_length=255)
    name: Optional[str] = None
    photo_url: Optional[str] = None
    role: UserRole = UserRole.CITIZEN
    issue_count: int = Field(default=0, ge=0)
    is_premium: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)
