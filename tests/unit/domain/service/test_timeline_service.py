"""Unit tests for TimelineService."""

from uuid import uuid4

import pytest

from civicfix.domain.service import TimelineService
from civicfix.domain.value import IssueId, TimelineStatus
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestTimeline:
    @pytest.mark.asyncio
    async def test_entries_are_returned_in_insertion_order(self, unit_env):
        # Arrange
        timeline_service = await unit_env.get(TimelineService)
        issue_id = IssueId(uuid4())
        other_issue = IssueId(uuid4())

        # Act
        await timeline_service.record(
            issue_id, TimelineStatus.PENDING, "Issue reported by citizen", "citizen"
        )
        await timeline_service.record(
            other_issue, TimelineStatus.PENDING, "Issue reported by citizen", "citizen"
        )
        await timeline_service.record(
            issue_id, TimelineStatus.IN_PROGRESS, "Work started on the issue", "staff"
        )

        # Assert
        entries = await timeline_service.get_for_issue(issue_id)
        assert [e.status for e in entries] == [
            TimelineStatus.PENDING,
            TimelineStatus.IN_PROGRESS,
        ]
        assert all(e.issue_id == issue_id for e in entries)
        assert await timeline_service.count_for_issue(issue_id) == 2

    @pytest.mark.asyncio
    async def test_unknown_issue_has_empty_timeline(self, unit_env):
        timeline_service = await unit_env.get(TimelineService)

        assert await timeline_service.get_for_issue(IssueId(uuid4())) == []
