"""Payment entity.

Records a payment confirmed by the external processor. The processor's
session id is unique, which makes webhook redelivery harmless.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from civicfix.domain.model.common import DomainModel
from civicfix.domain.value import IssueId, PaymentId, PaymentKind


class Payment(DomainModel):
    """Confirmed payment."""

    id: PaymentId
    session_id: str = Field(min_length=1, max_length=255)
    email: str
    kind: PaymentKind
    amount: int = Field(ge=0)  # Minor units
    currency: str = Field(default="usd", min_length=3, max_length=3)
    issue_id: Optional[IssueId] = None
    created_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_boost_target(self) -> "Payment":
        """Boost payments must reference an issue."""
        if self.kind == PaymentKind.BOOST and self.issue_id is None:
            raise ValueError("Boost payments require an issue_id")
        return self
