"""Unit tests for ChangeStatusUseCase."""

import pytest

from civicfix.application.usecase.issue import ChangeStatusRequest, ChangeStatusUseCase
from civicfix.domain.error import InvalidTransitionError, NotAuthorizedError
from civicfix.domain.repository import IssueRepository, TimelineRepository
from civicfix.domain.value import IssueStatus
from tests.conftest import make_issue
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestChangeStatus:
    @pytest.mark.asyncio
    async def test_assignee_moves_issue_forward(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ChangeStatusUseCase)
        issue_repo = await unit_env.get(IssueRepository)
        timeline_repo = await unit_env.get(TimelineRepository)
        issue = await issue_repo.save(
            make_issue(assigned_staff_email="sam@city.gov", assigned_staff_name="Sam")
        )

        # Act
        result = await use_case.execute(
            ChangeStatusRequest(
                issue_id=issue.id,
                status=IssueStatus.IN_PROGRESS,
                staff_email="sam@city.gov",
            )
        )

        # Assert
        assert result.status == IssueStatus.IN_PROGRESS
        entries = await timeline_repo.find_by_issue(issue.id)
        assert entries[-1].updated_by == "staff"

    @pytest.mark.asyncio
    async def test_other_staff_member_is_refused(self, unit_env):
        use_case = await unit_env.get(ChangeStatusUseCase)
        issue_repo = await unit_env.get(IssueRepository)
        issue = await issue_repo.save(make_issue(assigned_staff_email="sam@city.gov"))

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                ChangeStatusRequest(
                    issue_id=issue.id,
                    status=IssueStatus.IN_PROGRESS,
                    staff_email="alex@city.gov",
                )
            )

    @pytest.mark.asyncio
    async def test_unassigned_issue_is_refused(self, unit_env):
        use_case = await unit_env.get(ChangeStatusUseCase)
        issue_repo = await unit_env.get(IssueRepository)
        issue = await issue_repo.save(make_issue())

        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                ChangeStatusRequest(
                    issue_id=issue.id,
                    status=IssueStatus.IN_PROGRESS,
                    staff_email="sam@city.gov",
                )
            )

    @pytest.mark.asyncio
    async def test_invalid_transition_propagates(self, unit_env):
        use_case = await unit_env.get(ChangeStatusUseCase)
        issue_repo = await unit_env.get(IssueRepository)
        issue = await issue_repo.save(make_issue(assigned_staff_email="sam@city.gov"))

        with pytest.raises(InvalidTransitionError):
            await use_case.execute(
                ChangeStatusRequest(
                    issue_id=issue.id,
                    status=IssueStatus.CLOSED,
                    staff_email="sam@city.gov",
                )
            )
