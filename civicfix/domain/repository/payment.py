"""Payment repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from civicfix.domain.model.payment import Payment


class PaymentRepository(ABC):
    """Repository for confirmed payments."""

    @abstractmethod
    async def find_by_session_id(self, session_id: str) -> Optional[Payment]:
        """Find a payment by the processor's session id."""
        pass

    @abstractmethod
    async def save(self, payment: Payment) -> Payment:
        """Save a payment (create).

        Raises:
            IntegrityError: If a payment with the same session id exists
        """
        pass

    @abstractmethod
    async def total_amount(self) -> int:
        """Sum of confirmed payment amounts."""
        pass
