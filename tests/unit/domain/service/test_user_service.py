"""Unit tests for UserService."""

import pytest

from civicfix.domain.error import NotFoundError
from civicfix.domain.repository import UserRepository
from civicfix.domain.service import UserService
from civicfix.domain.value import UserRole
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_creates_citizen(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        user, created = await user_service.register(
            email="new@example.com", name="New Person"
        )

        # Assert
        assert created is True
        assert user.role == UserRole.CITIZEN
        assert user.issue_count == 0
        assert user.is_premium is False

    @pytest.mark.asyncio
    async def test_register_is_idempotent(self, unit_env):
        """A second registration returns the stored user unchanged."""
        # Arrange
        user_service = await unit_env.get(UserService)
        first, _ = await user_service.register(email="new@example.com", name="First")

        # Act
        second, created = await user_service.register(
            email="new@example.com", name="Second", role=UserRole.ADMIN
        )

        # Assert
        assert created is False
        assert second.id == first.id
        assert second.name == "First"
        assert second.role == UserRole.CITIZEN


class TestRoleAndPremium:
    @pytest.mark.asyncio
    async def test_change_role(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("sam@city.gov"))

        updated = await user_service.change_role("sam@city.gov", UserRole.STAFF)

        assert updated.role == UserRole.STAFF
        assert (await user_repo.find_by_email("sam@city.gov")).role == UserRole.STAFF

    @pytest.mark.asyncio
    async def test_change_role_of_unknown_user_raises(self, unit_env):
        user_service = await unit_env.get(UserService)

        with pytest.raises(NotFoundError):
            await user_service.change_role("ghost@example.com", UserRole.ADMIN)

    @pytest.mark.asyncio
    async def test_set_premium(self, unit_env):
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user())

        updated = await user_service.set_premium("citizen@example.com")

        assert updated.is_premium is True


class TestListUsers:
    @pytest.mark.asyncio
    async def test_list_filters_by_role_and_reports_total(self, unit_env):
        # Arrange
        user_service = await unit_env.get(UserService)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("a@example.com"))
        await user_repo.save(make_user("b@example.com"))
        await user_repo.save(make_user("s@city.gov", role=UserRole.STAFF))

        # Act
        staff, staff_total = await user_service.list_users(role=UserRole.STAFF)
        page, total = await user_service.list_users(limit=2)

        # Assert
        assert [u.email for u in staff] == ["s@city.gov"]
        assert staff_total == 1
        assert len(page) == 2
        assert total == 3
