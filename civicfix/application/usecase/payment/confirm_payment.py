"""Confirm payment use case."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire
from pydantic import BaseModel, Field

from civicfix.domain.model import Payment
from civicfix.domain.service import PaymentService
from civicfix.domain.value import IssueId, PaymentId, PaymentKind


class ConfirmPaymentRequest(BaseModel):
    """Payment confirmation delivered by the processor's webhook."""

    session_id: str = Field(min_length=1)
    kind: PaymentKind
    email: str
    amount: int = Field(ge=0)
    currency: str = "usd"
    issue_id: UUID | None = None


class ConfirmPaymentResponse(BaseModel):
    """Confirm payment response."""

    payment_id: str
    session_id: str
    kind: PaymentKind
    applied: bool
    message: str


class ConfirmPaymentUseCase:
    """Use case applying a confirmed boost or subscription payment.

    Redelivered confirmations are acknowledged without applying anything.
    """

    def __init__(self, payment_service: PaymentService) -> None:
        """Initialize confirm payment use case.

        Args:
            payment_service: Payment domain service
        """
        self.payment_service = payment_service

    async def execute(self, request: ConfirmPaymentRequest) -> ConfirmPaymentResponse:
        """Execute payment confirmation.

        Raises:
            NotFoundError: If the boosted issue or subscribing user is unknown
            ValueError: If a boost payment carries no issue id
        """
        with logfire.span(
            "confirm_payment.execute",
            session_id=request.session_id,
            kind=request.kind.value,
        ):
            payment = Payment(
                id=PaymentId(uuid4()),
                session_id=request.session_id,
                email=request.email,
                kind=request.kind,
                amount=request.amount,
                currency=request.currency.lower(),
                issue_id=IssueId(request.issue_id) if request.issue_id else None,
                created_at=datetime.now(),
            )

            stored, applied = await self.payment_service.confirm(payment)
            return ConfirmPaymentResponse(
                payment_id=str(stored.id),
                session_id=stored.session_id,
                kind=stored.kind,
                applied=applied,
                message="Payment applied" if applied else "Payment already processed",
            )
