"""Integration tests for PostgresPaymentRepository."""

from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from civicfix.domain.model import Payment
from civicfix.domain.repository import PaymentRepository
from civicfix.domain.value import PaymentId, PaymentKind
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real PostgreSQL
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def clean_database(integration_env):
    """Clean database before each test."""
    session = await integration_env.get(AsyncSession)
    await session.execute(
        text("TRUNCATE TABLE issue_timeline, payments, issues, users CASCADE")
    )
    await session.commit()

    yield


def _subscription(session_id: str, amount: int = 1000) -> Payment:
    return Payment(
        id=PaymentId(uuid4()),
        session_id=session_id,
        email="citizen@example.com",
        kind=PaymentKind.SUBSCRIPTION,
        amount=amount,
    )


class TestPaymentRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_duplicate_session_id_keeps_transaction_usable(
        self, integration_env
    ):
        """A redelivered webhook fails its insert without aborting the request."""
        # Arrange
        payment_repo = await integration_env.get(PaymentRepository)
        original = await payment_repo.save(_subscription("cs_test_1"))

        # Act
        with pytest.raises(IntegrityError):
            await payment_repo.save(_subscription("cs_test_1", amount=5000))

        # Assert - the same transaction still answers queries
        found = await payment_repo.find_by_session_id("cs_test_1")
        assert found.id == original.id
        assert found.amount == 1000
        assert await payment_repo.total_amount() == 1000

    @pytest.mark.asyncio
    async def test_total_amount_is_zero_without_payments(self, integration_env):
        payment_repo = await integration_env.get(PaymentRepository)

        assert await payment_repo.total_amount() == 0
