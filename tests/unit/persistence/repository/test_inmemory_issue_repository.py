"""Unit tests for the in-memory issue repository's conditional updates."""

from uuid import uuid4

import pytest

from civicfix.domain.value import IssueId, IssueStatus
from civicfix.persistence.repository.inmemory import InMemoryIssueRepository
from tests.conftest import make_issue


class TestConditionalUpdates:
    @pytest.mark.asyncio
    async def test_compare_and_set_only_applies_on_expected_status(self):
        repo = InMemoryIssueRepository()
        issue = await repo.save(make_issue())

        applied = await repo.compare_and_set_status(
            issue.id, IssueStatus.PENDING, IssueStatus.IN_PROGRESS
        )
        stale = await repo.compare_and_set_status(
            issue.id, IssueStatus.PENDING, IssueStatus.IN_PROGRESS
        )

        assert applied.status == IssueStatus.IN_PROGRESS
        assert stale is None

    @pytest.mark.asyncio
    async def test_assign_if_unassigned_is_one_way(self):
        repo = InMemoryIssueRepository()
        issue = await repo.save(make_issue())

        first = await repo.assign_if_unassigned(issue.id, "sam@city.gov", "Sam")
        second = await repo.assign_if_unassigned(issue.id, "alex@city.gov", "Alex")

        assert first.assigned_staff_email == "sam@city.gov"
        assert second is None
        assert (await repo.find_by_id(issue.id)).assigned_staff_name == "Sam"

    @pytest.mark.asyncio
    async def test_add_upvote_keeps_count_and_voters_in_step(self):
        repo = InMemoryIssueRepository()
        issue = await repo.save(make_issue())

        assert await repo.add_upvote(issue.id, "a@example.com") is True
        assert await repo.add_upvote(issue.id, "a@example.com") is False

        stored = await repo.find_by_id(issue.id)
        assert stored.upvote_count == 1
        assert stored.upvoted_by == ["a@example.com"]

    @pytest.mark.asyncio
    async def test_updates_on_missing_issue_return_nothing(self):
        repo = InMemoryIssueRepository()
        missing = IssueId(uuid4())

        assert await repo.set_status(missing, IssueStatus.REJECTED) is None
        assert await repo.set_boosted(missing) is None
        assert await repo.add_upvote(missing, "a@example.com") is False
        assert await repo.delete(missing) is False

    @pytest.mark.asyncio
    async def test_update_details_only_while_pending_and_owned(self):
        repo = InMemoryIssueRepository()
        issue = await repo.save(make_issue())

        wrong_owner = await repo.update_details_if_pending(
            issue.id, "someone@example.com", {"title": "Hijacked"}
        )
        edited = await repo.update_details_if_pending(
            issue.id, issue.reporter_email, {"title": "Light flickering"}
        )
        await repo.compare_and_set_status(
            issue.id, IssueStatus.PENDING, IssueStatus.IN_PROGRESS
        )
        too_late = await repo.update_details_if_pending(
            issue.id, issue.reporter_email, {"title": "Too late"}
        )

        assert wrong_owner is None
        assert edited.title == "Light flickering"
        assert too_late is None
        stored = await repo.find_by_id(issue.id)
        assert stored.title == "Light flickering"
        assert stored.status == IssueStatus.IN_PROGRESS
