"""PostgreSQL payment repository."""

from typing import Optional

from sqlalchemy import func, insert, select

from civicfix.domain.model import Payment
from civicfix.domain.repository import PaymentRepository
from civicfix.persistence.mappers import payment_to_dict, row_to_payment
from civicfix.persistence.tables import payments_table

from .base import PostgresRepository


class PostgresPaymentRepository(PostgresRepository[Payment], PaymentRepository):
    """Confirmed payments. ``session_id`` is unique."""

    table = payments_table
    to_model = staticmethod(row_to_payment)

    async def find_by_session_id(self, session_id: str) -> Optional[Payment]:
        return await self._one(
            select(payments_table).where(payments_table.c.session_id == session_id)
        )

    async def save(self, payment: Payment) -> Payment:
        """Insert a payment. A duplicate session id raises ``IntegrityError``.

        The insert runs in a SAVEPOINT so a duplicate leaves the request
        transaction usable.
        """
        async with self.session.begin_nested():
            await self._write(
                insert(payments_table).values(**payment_to_dict(payment))
            )
        return payment

    async def total_amount(self) -> int:
        return await self._scalar(
            select(func.coalesce(func.sum(payments_table.c.amount), 0))
        )
