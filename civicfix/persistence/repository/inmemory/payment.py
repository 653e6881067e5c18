"""In-memory payment repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from civicfix.domain.model import Payment
from civicfix.domain.repository import PaymentRepository


class InMemoryPaymentRepository(PaymentRepository):
    """In-memory implementation of PaymentRepository for testing."""

    def __init__(self) -> None:
        self._payments: list[Payment] = []

    async def find_by_session_id(self, session_id: str) -> Optional[Payment]:
        """Find a payment by the processor's session id."""
        for payment in self._payments:
            if payment.session_id == session_id:
                return payment
        return None

    async def save(self, payment: Payment) -> Payment:
        """Save a payment.

        Raises:
            IntegrityError: If the session id was already recorded
        """
        if await self.find_by_session_id(payment.session_id):
            raise IntegrityError("Duplicate payment", None, Exception())

        self._payments.append(payment)
        return payment

    async def total_amount(self) -> int:
        """Sum of confirmed payment amounts."""
        return sum(p.amount for p in self._payments)
