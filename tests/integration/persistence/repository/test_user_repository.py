"""Integration tests for PostgresUserRepository."""

import pytest
import pytest_asyncio
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from civicfix.domain.repository import UserRepository
from civicfix.domain.value import UserRole
from tests.conftest import make_user
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


class TestUserRepositoryIntegration:
    @pytest.mark.asyncio
    async def test_issue_count_decrement_stops_at_zero(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.save(make_user())
        await user_repo.increment_issue_count(user.email)

        # Act
        await user_repo.decrement_issue_count(user.email)
        await user_repo.decrement_issue_count(user.email)

        # Assert
        stored = await user_repo.find_by_email(user.email)
        assert stored.issue_count == 0

    @pytest.mark.asyncio
    async def test_update_role_returns_updated_user(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.save(make_user("sam@city.gov"))

        # Act
        updated = await user_repo.update_role(user.email, UserRole.STAFF)
        missing = await user_repo.update_role("nobody@example.com", UserRole.STAFF)

        # Assert
        assert updated.role == UserRole.STAFF
        assert missing is None
        assert await user_repo.count(UserRole.STAFF) == 1
