"""Unit tests for IssueService."""

from uuid import uuid4

import pytest

from civicfix.domain.error import (
    AlreadyAssignedError,
    AlreadyVotedError,
    InvalidTransitionError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from civicfix.domain.repository import (
    IssueRepository,
    TimelineRepository,
    UserRepository,
)
from civicfix.domain.service import IssueService
from civicfix.domain.value import (
    IssueChanges,
    IssueId,
    IssueStatus,
    TimelineStatus,
)
from tests.conftest import make_issue, make_user
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _reported_issue(unit_env, **overrides):
    """Register the reporter and report an issue through the service."""
    user_repo = await unit_env.get(UserRepository)
    issue_service = await unit_env.get(IssueService)

    issue = make_issue(**overrides)
    if not await user_repo.find_by_email(issue.reporter_email):
        await user_repo.save(make_user(issue.reporter_email))
    return await issue_service.report_new(issue)


class TestReportNew:
    """Tests for report_new method."""

    @pytest.mark.asyncio
    async def test_report_creates_pending_issue_with_one_entry(self, unit_env):
        """A new report is Pending with a single 'reported' entry."""
        # Arrange
        timeline_repo = await unit_env.get(TimelineRepository)

        # Act
        issue = await _reported_issue(unit_env)

        # Assert
        assert issue.status == IssueStatus.PENDING
        entries = await timeline_repo.find_by_issue(issue.id)
        assert len(entries) == 1
        assert entries[0].status == TimelineStatus.PENDING
        assert entries[0].message == "Issue reported by citizen"
        assert entries[0].updated_by == "citizen"

    @pytest.mark.asyncio
    async def test_report_increments_reporter_count(self, unit_env):
        """Each report increments the reporter's issue count once."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)

        # Act
        await _reported_issue(unit_env)
        await _reported_issue(unit_env)

        # Assert
        user = await user_repo.find_by_email("citizen@example.com")
        assert user.issue_count == 2

    @pytest.mark.asyncio
    async def test_report_rejects_non_initial_state(self, unit_env):
        """Issues must enter the system Pending and unassigned."""
        issue_service = await unit_env.get(IssueService)

        with pytest.raises(ValidationError):
            await issue_service.report_new(make_issue(status=IssueStatus.WORKING))

        with pytest.raises(ValidationError):
            await issue_service.report_new(
                make_issue(assigned_staff_email="staff@example.com")
            )


class TestRequestTransition:
    """Tests for request_transition method."""

    @pytest.mark.asyncio
    async def test_legal_path_records_one_entry_per_step(self, unit_env):
        """N legal transitions produce N+1 entries ending at the Nth target."""
        # Arrange
        issue_service = await unit_env.get(IssueService)
        timeline_repo = await unit_env.get(TimelineRepository)
        issue = await _reported_issue(unit_env)
        path = [
            IssueStatus.IN_PROGRESS,
            IssueStatus.WORKING,
            IssueStatus.RESOLVED,
            IssueStatus.CLOSED,
        ]

        # Act
        for target in path:
            updated = await issue_service.request_transition(issue.id, target, "staff")

        # Assert
        assert updated.status == IssueStatus.CLOSED
        entries = await timeline_repo.find_by_issue(issue.id)
        assert len(entries) == len(path) + 1
        assert [e.status.value for e in entries[1:]] == [s.value for s in path]
        assert [e.message for e in entries[1:]] == [
            "Work started on the issue",
            "Work is actively being done on the issue",
            "Issue marked as resolved",
            "Issue closed by staff",
        ]
        assert all(e.updated_by == "staff" for e in entries[1:])

    @pytest.mark.asyncio
    async def test_skipping_a_step_fails_without_writes(self, unit_env):
        """In-progress -> Resolved is rejected and nothing is recorded."""
        # Arrange
        issue_service = await unit_env.get(IssueService)
        issue_repo = await unit_env.get(IssueRepository)
        timeline_repo = await unit_env.get(TimelineRepository)
        issue = await _reported_issue(unit_env)
        await issue_service.request_transition(
            issue.id, IssueStatus.IN_PROGRESS, "staff"
        )

        # Act & Assert
        with pytest.raises(InvalidTransitionError) as exc_info:
            await issue_service.request_transition(
                issue.id, IssueStatus.RESOLVED, "staff"
            )

        assert exc_info.value.current == "In-progress"
        assert exc_info.value.requested == "Resolved"
        stored = await issue_repo.find_by_id(issue.id)
        assert stored.status == IssueStatus.IN_PROGRESS
        assert await timeline_repo.count_by_issue(issue.id) == 2

    @pytest.mark.asyncio
    async def test_nothing_leaves_closed(self, unit_env):
        """Closed is terminal for staff transitions."""
        issue_service = await unit_env.get(IssueService)
        issue = await _reported_issue(unit_env, status=IssueStatus.PENDING)
        for target in (
            IssueStatus.IN_PROGRESS,
            IssueStatus.WORKING,
            IssueStatus.RESOLVED,
            IssueStatus.CLOSED,
        ):
            await issue_service.request_transition(issue.id, target, "staff")

        for target in IssueStatus:
            with pytest.raises(InvalidTransitionError):
                await issue_service.request_transition(issue.id, target, "staff")

    @pytest.mark.asyncio
    async def test_rejected_is_not_reachable_by_transition(self, unit_env):
        """Rejection goes through reject(), never the transition table."""
        issue_service = await unit_env.get(IssueService)
        issue = await _reported_issue(unit_env)

        with pytest.raises(InvalidTransitionError):
            await issue_service.request_transition(
                issue.id, IssueStatus.REJECTED, "staff"
            )

    @pytest.mark.asyncio
    async def test_unknown_issue_raises_not_found(self, unit_env):
        issue_service = await unit_env.get(IssueService)

        with pytest.raises(NotFoundError):
            await issue_service.request_transition(
                IssueId(uuid4()), IssueStatus.IN_PROGRESS, "staff"
            )

    @pytest.mark.asyncio
    async def test_stale_status_is_reported_as_invalid_transition(self, unit_env):
        """A status changed underneath the caller fails the compare-and-set."""
        # Arrange
        issue_service = await unit_env.get(IssueService)
        issue_repo = await unit_env.get(IssueRepository)
        timeline_repo = await unit_env.get(TimelineRepository)
        issue = await _reported_issue(unit_env)

        original_find = issue_repo.find_by_id
        stale = await issue_repo.find_by_id(issue.id)

        # Another request moves the issue on after our read
        await issue_repo.compare_and_set_status(
            issue.id, IssueStatus.PENDING, IssueStatus.IN_PROGRESS
        )
        calls = []

        async def find_returning_stale_once(issue_id):
            calls.append(issue_id)
            if len(calls) == 1:
                return stale
            return await original_find(issue_id)

        issue_repo.find_by_id = find_returning_stale_once

        # Act & Assert
        with pytest.raises(InvalidTransitionError) as exc_info:
            await issue_service.request_transition(
                issue.id, IssueStatus.IN_PROGRESS, "staff"
            )

        assert exc_info.value.current == "In-progress"
        assert await timeline_repo.count_by_issue(issue.id) == 1


class TestAssign:
    """Tests for assign method."""

    @pytest.mark.asyncio
    async def test_assign_sets_staff_and_records_entry(self, unit_env):
        # Arrange
        issue_service = await unit_env.get(IssueService)
        timeline_repo = await unit_env.get(TimelineRepository)
        issue = await _reported_issue(unit_env)

        # Act
        updated = await issue_service.assign(issue.id, "sam@city.gov", "Sam")

        # Assert
        assert updated.assigned_staff_email == "sam@city.gov"
        assert updated.assigned_staff_name == "Sam"
        assert updated.status == IssueStatus.PENDING
        entries = await timeline_repo.find_by_issue(issue.id)
        assert entries[-1].status == TimelineStatus.PENDING
        assert entries[-1].message == "Issue assigned to Staff: Sam"
        assert entries[-1].updated_by == "admin"

    @pytest.mark.asyncio
    async def test_second_assign_fails_and_keeps_first_assignee(self, unit_env):
        """Assignment is one-way."""
        # Arrange
        issue_service = await unit_env.get(IssueService)
        issue_repo = await unit_env.get(IssueRepository)
        timeline_repo = await unit_env.get(TimelineRepository)
        issue = await _reported_issue(unit_env)
        await issue_service.assign(issue.id, "sam@city.gov", "Sam")

        # Act & Assert
        with pytest.raises(AlreadyAssignedError):
            await issue_service.assign(issue.id, "alex@city.gov", "Alex")

        stored = await issue_repo.find_by_id(issue.id)
        assert stored.assigned_staff_email == "sam@city.gov"
        assert await timeline_repo.count_by_issue(issue.id) == 2


class TestReject:
    """Tests for reject method."""

    @pytest.mark.asyncio
    async def test_reject_pending_issue(self, unit_env):
        # Arrange
        issue_service = await unit_env.get(IssueService)
        timeline_repo = await unit_env.get(TimelineRepository)
        issue = await _reported_issue(unit_env)

        # Act
        updated = await issue_service.reject(issue.id)

        # Assert
        assert updated.status == IssueStatus.REJECTED
        entries = await timeline_repo.find_by_issue(issue.id)
        assert len(entries) == 2
        assert entries[-1].status == TimelineStatus.REJECTED
        assert entries[-1].message == "Issue rejected by admin"
        assert entries[-1].updated_by == "admin"

    @pytest.mark.asyncio
    async def test_reject_is_allowed_from_resolved(self, unit_env):
        """Rejection is not checked against the transition table."""
        issue_service = await unit_env.get(IssueService)
        issue = await _reported_issue(unit_env)
        for target in (
            IssueStatus.IN_PROGRESS,
            IssueStatus.WORKING,
            IssueStatus.RESOLVED,
        ):
            await issue_service.request_transition(issue.id, target, "staff")

        updated = await issue_service.reject(issue.id)

        assert updated.status == IssueStatus.REJECTED

    @pytest.mark.asyncio
    async def test_reject_unknown_issue_raises_not_found(self, unit_env):
        issue_service = await unit_env.get(IssueService)
        timeline_repo = await unit_env.get(TimelineRepository)
        missing = IssueId(uuid4())

        with pytest.raises(NotFoundError):
            await issue_service.reject(missing)

        assert await timeline_repo.count_by_issue(missing) == 0


class TestDeleteIssue:
    """Tests for delete_issue method."""

    @pytest.mark.asyncio
    async def test_delete_decrements_counter_and_keeps_timeline(self, unit_env):
        """Delete with counter 3 leaves counter 2 and orphaned entries."""
        # Arrange
        issue_service = await unit_env.get(IssueService)
        issue_repo = await unit_env.get(IssueRepository)
        user_repo = await unit_env.get(UserRepository)
        timeline_repo = await unit_env.get(TimelineRepository)
        issues = [await _reported_issue(unit_env) for _ in range(3)]
        target = issues[0]

        # Act
        await issue_service.delete_issue(target.id, "citizen@example.com")

        # Assert
        assert await issue_repo.find_by_id(target.id) is None
        user = await user_repo.find_by_email("citizen@example.com")
        assert user.issue_count == 2
        assert await timeline_repo.count_by_issue(target.id) == 1

    @pytest.mark.asyncio
    async def test_only_reporter_may_delete(self, unit_env):
        issue_service = await unit_env.get(IssueService)
        issue_repo = await unit_env.get(IssueRepository)
        issue = await _reported_issue(unit_env)

        with pytest.raises(NotAuthorizedError):
            await issue_service.delete_issue(issue.id, "someone@example.com")

        assert await issue_repo.find_by_id(issue.id) is not None

    @pytest.mark.asyncio
    async def test_counter_never_goes_negative(self, unit_env):
        """A reporter whose counter is already 0 stays at 0."""
        # Arrange
        issue_service = await unit_env.get(IssueService)
        issue_repo = await unit_env.get(IssueRepository)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user("legacy@example.com", issue_count=0))
        issue = make_issue(reporter_email="legacy@example.com")
        await issue_repo.save(issue)

        # Act
        await issue_service.delete_issue(issue.id, "legacy@example.com")

        # Assert
        user = await user_repo.find_by_email("legacy@example.com")
        assert user.issue_count == 0


class TestUpvote:
    """Tests for upvote method."""

    @pytest.mark.asyncio
    async def test_double_upvote_counts_once(self, unit_env):
        # Arrange
        issue_service = await unit_env.get(IssueService)
        issue = await _reported_issue(unit_env)

        # Act
        first = await issue_service.upvote(issue.id, "neighbour@example.com")
        with pytest.raises(AlreadyVotedError):
            await issue_service.upvote(issue.id, "neighbour@example.com")

        # Assert
        stored = await issue_service.get_by_id(issue.id)
        assert first.upvote_count == 1
        assert stored.upvote_count == 1
        assert stored.upvoted_by == ["neighbour@example.com"]

    @pytest.mark.asyncio
    async def test_distinct_voters_each_count(self, unit_env):
        issue_service = await unit_env.get(IssueService)
        issue = await _reported_issue(unit_env)

        await issue_service.upvote(issue.id, "a@example.com")
        updated = await issue_service.upvote(issue.id, "b@example.com")

        assert updated.upvote_count == 2
        assert set(updated.upvoted_by) == {"a@example.com", "b@example.com"}

    @pytest.mark.asyncio
    async def test_reporter_cannot_upvote_own_issue(self, unit_env):
        issue_service = await unit_env.get(IssueService)
        issue = await _reported_issue(unit_env)

        with pytest.raises(ValidationError, match="own issue"):
            await issue_service.upvote(issue.id, issue.reporter_email)

    @pytest.mark.asyncio
    async def test_upvote_does_not_touch_timeline(self, unit_env):
        issue_service = await unit_env.get(IssueService)
        timeline_repo = await unit_env.get(TimelineRepository)
        issue = await _reported_issue(unit_env)

        await issue_service.upvote(issue.id, "a@example.com")

        assert await timeline_repo.count_by_issue(issue.id) == 1


class TestEdit:
    """Tests for edit method."""

    @pytest.mark.asyncio
    async def test_reporter_edits_pending_issue(self, unit_env):
        # Arrange
        issue_service = await unit_env.get(IssueService)
        timeline_repo = await unit_env.get(TimelineRepository)
        issue = await _reported_issue(unit_env)

        # Act
        edited = await issue_service.edit(
            issue.id,
            issue.reporter_email,
            IssueChanges(title="Streetlight flickering", location="Main St"),
        )

        # Assert
        assert edited.title == "Streetlight flickering"
        assert edited.location == "Main St"
        assert edited.category == issue.category
        assert await timeline_repo.count_by_issue(issue.id) == 1

    @pytest.mark.asyncio
    async def test_edit_after_work_started_fails(self, unit_env):
        issue_service = await unit_env.get(IssueService)
        issue = await _reported_issue(unit_env)
        await issue_service.request_transition(
            issue.id, IssueStatus.IN_PROGRESS, "staff"
        )

        with pytest.raises(ValidationError, match="pending"):
            await issue_service.edit(
                issue.id, issue.reporter_email, IssueChanges(title="New title")
            )

    @pytest.mark.asyncio
    async def test_edit_by_other_user_fails(self, unit_env):
        issue_service = await unit_env.get(IssueService)
        issue = await _reported_issue(unit_env)

        with pytest.raises(NotAuthorizedError):
            await issue_service.edit(
                issue.id, "other@example.com", IssueChanges(title="Mine now")
            )

    @pytest.mark.asyncio
    async def test_empty_edit_fails(self, unit_env):
        issue_service = await unit_env.get(IssueService)
        issue = await _reported_issue(unit_env)

        with pytest.raises(ValidationError, match="No changes"):
            await issue_service.edit(issue.id, issue.reporter_email, IssueChanges())

    @pytest.mark.asyncio
    async def test_edit_does_not_undo_concurrent_transition(self, unit_env):
        """A transition landing after the edit's read survives the edit."""
        # Arrange
        issue_service = await unit_env.get(IssueService)
        issue_repo = await unit_env.get(IssueRepository)
        timeline_repo = await unit_env.get(TimelineRepository)
        issue = await _reported_issue(unit_env)
        stale = await issue_repo.find_by_id(issue.id)
        original_find = issue_repo.find_by_id

        # Another request starts work and upvotes after the edit has read
        await issue_service.request_transition(
            issue.id, IssueStatus.IN_PROGRESS, "staff"
        )
        await issue_repo.add_upvote(issue.id, "neighbour@example.com")
        calls = []

        async def find_returning_stale_once(issue_id):
            calls.append(issue_id)
            if len(calls) == 1:
                return stale
            return await original_find(issue_id)

        issue_repo.find_by_id = find_returning_stale_once

        # Act & Assert
        with pytest.raises(ValidationError, match="pending"):
            await issue_service.edit(
                issue.id, issue.reporter_email, IssueChanges(title="Late edit")
            )

        stored = await original_find(issue.id)
        entries = await timeline_repo.find_by_issue(issue.id)
        assert stored.status == IssueStatus.IN_PROGRESS
        assert stored.title == issue.title
        assert stored.upvote_count == 1
        assert entries[-1].status == TimelineStatus.IN_PROGRESS

    @pytest.mark.asyncio
    async def test_edit_keeps_concurrent_vote_and_boost(self, unit_env):
        # Arrange
        issue_service = await unit_env.get(IssueService)
        issue_repo = await unit_env.get(IssueRepository)
        issue = await _reported_issue(unit_env)
        await issue_repo.add_upvote(issue.id, "neighbour@example.com")
        await issue_repo.set_boosted(issue.id)

        # Act
        edited = await issue_service.edit(
            issue.id, issue.reporter_email, IssueChanges(description="Now sparking")
        )

        # Assert
        assert edited.description == "Now sparking"
        assert edited.upvote_count == 1
        assert edited.upvoted_by == ["neighbour@example.com"]
        assert edited.is_boosted is True
        assert edited.status == IssueStatus.PENDING


class TestBoost:
    """Tests for boost method."""

    @pytest.mark.asyncio
    async def test_boost_sets_flag_and_keeps_status(self, unit_env):
        # Arrange
        issue_service = await unit_env.get(IssueService)
        timeline_repo = await unit_env.get(TimelineRepository)
        issue = await _reported_issue(unit_env)

        # Act
        boosted = await issue_service.boost(issue.id, "payer@example.com")

        # Assert
        assert boosted.is_boosted is True
        assert boosted.status == IssueStatus.PENDING
        entries = await timeline_repo.find_by_issue(issue.id)
        assert entries[-1].status == TimelineStatus.BOOSTED
        assert entries[-1].message == "Issue boosted by payer@example.com"
        assert entries[-1].updated_by == "payer@example.com"


class TestListAndCount:
    """Tests for list_issues and status_counts."""

    @pytest.mark.asyncio
    async def test_status_counts_include_zero_statuses(self, unit_env):
        from civicfix.domain.repository import IssueFilter

        issue_service = await unit_env.get(IssueService)
        first = await _reported_issue(unit_env)
        await _reported_issue(unit_env)
        await issue_service.reject(first.id)

        counts = await issue_service.status_counts(IssueFilter())

        assert set(counts) == set(IssueStatus)
        assert counts[IssueStatus.PENDING] == 1
        assert counts[IssueStatus.REJECTED] == 1
        assert counts[IssueStatus.CLOSED] == 0
