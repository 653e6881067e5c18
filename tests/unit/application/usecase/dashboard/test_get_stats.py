"""Unit tests for GetStatsUseCase."""

from uuid import uuid4

import pytest

from civicfix.application.usecase.dashboard import GetStatsRequest, GetStatsUseCase
from civicfix.domain.model import Payment
from civicfix.domain.repository import IssueRepository, PaymentRepository
from civicfix.domain.value import IssueStatus, PaymentId, PaymentKind, UserRole
from tests.conftest import make_issue
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(unit_env):
    issue_repo = await unit_env.get(IssueRepository)
    payment_repo = await unit_env.get(PaymentRepository)
    await issue_repo.save(make_issue(reporter_email="a@example.com"))
    await issue_repo.save(
        make_issue(
            reporter_email="a@example.com",
            status=IssueStatus.WORKING,
            assigned_staff_email="sam@city.gov",
        )
    )
    await issue_repo.save(
        make_issue(reporter_email="b@example.com", status=IssueStatus.RESOLVED)
    )
    await payment_repo.save(
        Payment(
            id=PaymentId(uuid4()),
            session_id="cs_1",
            email="a@example.com",
            kind=PaymentKind.SUBSCRIPTION,
            amount=1000,
        )
    )


class TestGetStats:
    @pytest.mark.asyncio
    async def test_citizen_sees_own_reports(self, unit_env):
        use_case = await unit_env.get(GetStatsUseCase)
        await _seed(unit_env)

        stats = await use_case.execute(
            GetStatsRequest(email="a@example.com", role=UserRole.CITIZEN)
        )

        assert stats.total_issues == 2
        assert stats.by_status["Pending"] == 1
        assert stats.by_status["Working"] == 1
        assert stats.by_status["Closed"] == 0
        assert stats.total_revenue is None

    @pytest.mark.asyncio
    async def test_staff_sees_assigned_issues(self, unit_env):
        use_case = await unit_env.get(GetStatsUseCase)
        await _seed(unit_env)

        stats = await use_case.execute(
            GetStatsRequest(email="sam@city.gov", role=UserRole.STAFF)
        )

        assert stats.total_issues == 1
        assert stats.by_status["Working"] == 1

    @pytest.mark.asyncio
    async def test_admin_sees_everything_and_revenue(self, unit_env):
        use_case = await unit_env.get(GetStatsUseCase)
        await _seed(unit_env)

        stats = await use_case.execute(
            GetStatsRequest(email="boss@city.gov", role=UserRole.ADMIN)
        )

        assert stats.total_issues == 3
        assert stats.total_revenue == 1000
        assert stats.total_users == 0
