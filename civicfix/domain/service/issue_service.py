"""Issue lifecycle domain service.

Owns the status state machine. Every accepted lifecycle event is paired with
exactly one timeline entry; both writes share the caller's transaction, so a
failure in either rolls back the other.
"""


import logfire

from civicfix.domain.error import (
    AlreadyAssignedError,
    AlreadyVotedError,
    InvalidTransitionError,
    NotAuthorizedError,
    NotFoundError,
    ValidationError,
)
from civicfix.domain.model import Issue
from civicfix.domain.repository import IssueFilter, IssueRepository
from civicfix.domain.value import (
    Actor,
    IssueChanges,
    IssueId,
    IssueStatus,
    TimelineStatus,
)

from .base import Service
from .timeline_service import TimelineService
from .user_service import UserService

REPORTED_MESSAGE = "Issue reported by citizen"
REJECTED_MESSAGE = "Issue rejected by admin"

TRANSITION_MESSAGES: dict[IssueStatus, str] = {
    IssueStatus.IN_PROGRESS: "Work started on the issue",
    IssueStatus.WORKING: "Work is actively being done on the issue",
    IssueStatus.RESOLVED: "Issue marked as resolved",
    IssueStatus.CLOSED: "Issue closed by staff",
}


def transition_message(status: IssueStatus) -> str:
    """Timeline message for a staff transition to ``status``."""
    return TRANSITION_MESSAGES.get(status, f"Issue status updated to {status.value}")


def assignment_message(staff_name: str) -> str:
    """Timeline message for an assignment."""
    return f"Issue assigned to Staff: {staff_name}"


def boost_message(payer_email: str) -> str:
    """Timeline message for a confirmed boost."""
    return f"Issue boosted by {payer_email}"


class IssueService(Service):
    """Domain service for the issue lifecycle."""

    def __init__(
        self,
        issue_repository: IssueRepository,
        timeline_service: TimelineService,
        user_service: UserService,
    ) -> None:
        """Initialize issue service.

        Args:
            issue_repository: Issue repository
            timeline_service: Timeline domain service
            user_service: User domain service
        """
        self.issue_repository = issue_repository
        self.timeline_service = timeline_service
        self.user_service = user_service

    async def get_by_id(self, issue_id: IssueId) -> Issue:
        """Get an issue by ID.

        Raises:
            NotFoundError: If issue not found
        """
        with logfire.span("issue_service.get_by_id", issue_id=str(issue_id)):
            issue = await self.issue_repository.find_by_id(issue_id)
            if not issue:
                logfire.warn("Issue not found", issue_id=str(issue_id))
                raise NotFoundError("Issue", str(issue_id))
            return issue

    async def list_issues(
        self, filters: IssueFilter, limit: int, offset: int
    ) -> tuple[list[Issue], int]:
        """List issues (boosted first, newest first) with the total count."""
        with logfire.span(
            "issue_service.list_issues",
            status=filters.status.value if filters.status else None,
            category=filters.category,
            search=filters.search,
            limit=limit,
            offset=offset,
        ):
            total = await self.issue_repository.count(filters)
            issues = await self.issue_repository.find_all(
                filters, limit=limit, offset=offset
            )
            logfire.info("Issues listed", count=len(issues), total=total)
            return issues, total

    async def report_new(self, issue: Issue) -> Issue:
        """Create a newly reported issue.

        Saves the issue as Pending, records the initial timeline entry and
        increments the reporter's issue count.

        Args:
            issue: Issue built from the citizen's report

        Returns:
            Saved issue

        Raises:
            ValidationError: If the issue is not in its initial state
        """
        with logfire.span(
            "issue_service.report_new",
            issue_id=str(issue.id),
            reporter=issue.reporter_email,
            category=issue.category,
        ):
            if issue.status != IssueStatus.PENDING or issue.is_assigned:
                raise ValidationError("New issues must be pending and unassigned")
            if issue.upvote_count or issue.is_boosted:
                raise ValidationError("New issues cannot carry votes or boosts")

            saved = await self.issue_repository.save(issue)
            await self.timeline_service.record(
                saved.id,
                TimelineStatus.PENDING,
                REPORTED_MESSAGE,
                Actor.CITIZEN.value,
            )
            await self.user_service.increment_issue_count(saved.reporter_email)

            logfire.info("Issue reported", issue_id=str(saved.id))
            return saved

    async def request_transition(
        self, issue_id: IssueId, requested: IssueStatus, actor: str
    ) -> Issue:
        """Move an issue along the staff transition table.

        Args:
            issue_id: Issue to transition
            requested: Target status
            actor: Who requested the change (not validated against roles)

        Returns:
            Updated issue

        Raises:
            NotFoundError: If issue not found
            InvalidTransitionError: If ``requested`` is not reachable from the
                current status
        """
        with logfire.span(
            "issue_service.request_transition",
            issue_id=str(issue_id),
            requested=requested.value,
            actor=actor,
        ):
            issue = await self.get_by_id(issue_id)
            current = issue.status

            if not current.can_transition_to(requested):
                logfire.warn(
                    "Invalid status transition",
                    issue_id=str(issue_id),
                    current=current.value,
                    requested=requested.value,
                )
                raise InvalidTransitionError(current.value, requested.value)

            updated = await self.issue_repository.compare_and_set_status(
                issue_id, expected=current, status=requested
            )
            if updated is None:
                # Status moved between read and write
                latest = await self.get_by_id(issue_id)
                logfire.warn(
                    "Concurrent status change detected",
                    issue_id=str(issue_id),
                    expected=current.value,
                    actual=latest.status.value,
                )
                raise InvalidTransitionError(latest.status.value, requested.value)

            await self.timeline_service.record(
                issue_id,
                TimelineStatus.from_issue_status(requested),
                transition_message(requested),
                actor,
            )

            logfire.info(
                "Issue status changed",
                issue_id=str(issue_id),
                previous=current.value,
                status=requested.value,
            )
            return updated

    async def assign(
        self, issue_id: IssueId, staff_email: str, staff_name: str
    ) -> Issue:
        """Assign a staff member to an issue. Assignment is one-way.

        Raises:
            NotFoundError: If issue not found
            AlreadyAssignedError: If the issue already has an assignee
        """
        with logfire.span(
            "issue_service.assign", issue_id=str(issue_id), staff_email=staff_email
        ):
            issue = await self.get_by_id(issue_id)
            if issue.is_assigned:
                logfire.warn(
                    "Issue already assigned",
                    issue_id=str(issue_id),
                    assigned_to=issue.assigned_staff_email,
                )
                raise AlreadyAssignedError(str(issue_id))

            updated = await self.issue_repository.assign_if_unassigned(
                issue_id, staff_email, staff_name
            )
            if updated is None:
                logfire.warn("Issue assigned concurrently", issue_id=str(issue_id))
                raise AlreadyAssignedError(str(issue_id))

            await self.timeline_service.record(
                issue_id,
                TimelineStatus.PENDING,
                assignment_message(staff_name),
                Actor.ADMIN.value,
            )
            return updated

    async def reject(self, issue_id: IssueId) -> Issue:
        """Reject an issue. Allowed from any status.

        Raises:
            NotFoundError: If issue not found
        """
        with logfire.span("issue_service.reject", issue_id=str(issue_id)):
            updated = await self.issue_repository.set_status(
                issue_id, IssueStatus.REJECTED
            )
            if updated is None:
                logfire.warn("Reject on non-existent issue", issue_id=str(issue_id))
                raise NotFoundError("Issue", str(issue_id))

            await self.timeline_service.record(
                issue_id,
                TimelineStatus.REJECTED,
                REJECTED_MESSAGE,
                Actor.ADMIN.value,
            )
            logfire.info("Issue rejected", issue_id=str(issue_id))
            return updated

    async def delete_issue(self, issue_id: IssueId, reporter_email: str) -> None:
        """Delete an issue on behalf of its reporter.

        The reporter's issue count is decremented. Timeline entries are kept.

        Raises:
            NotFoundError: If issue not found
            NotAuthorizedError: If the caller did not report the issue
        """
        with logfire.span(
            "issue_service.delete_issue",
            issue_id=str(issue_id),
            reporter=reporter_email,
        ):
            issue = await self.get_by_id(issue_id)
            if issue.reporter_email != reporter_email:
                raise NotAuthorizedError("issue", str(issue_id), reporter_email)

            deleted = await self.issue_repository.delete(issue_id)
            if not deleted:
                raise NotFoundError("Issue", str(issue_id))

            await self.user_service.decrement_issue_count(reporter_email)
            logfire.info("Issue deleted", issue_id=str(issue_id))

    async def upvote(self, issue_id: IssueId, voter_email: str) -> Issue:
        """Upvote an issue once per voter.

        Raises:
            NotFoundError: If issue not found
            ValidationError: If the voter reported the issue
            AlreadyVotedError: If the voter already upvoted
        """
        with logfire.span(
            "issue_service.upvote", issue_id=str(issue_id), voter=voter_email
        ):
            issue = await self.get_by_id(issue_id)
            if issue.reporter_email == voter_email:
                raise ValidationError("You cannot upvote your own issue")
            if issue.has_voted(voter_email):
                logfire.warn(
                    "Duplicate vote attempt", issue_id=str(issue_id), voter=voter_email
                )
                raise AlreadyVotedError(str(issue_id))

            recorded = await self.issue_repository.add_upvote(issue_id, voter_email)
            if not recorded:
                logfire.warn(
                    "Concurrent duplicate vote", issue_id=str(issue_id), voter=voter_email
                )
                raise AlreadyVotedError(str(issue_id))

            return await self.get_by_id(issue_id)

    def _check_editable(self, issue: Issue, reporter_email: str) -> None:
        if issue.reporter_email != reporter_email:
            raise NotAuthorizedError("issue", str(issue.id), reporter_email)
        if issue.status != IssueStatus.PENDING:
            raise ValidationError(
                f"Only pending issues can be edited (status: {issue.status.value})"
            )

    async def edit(
        self, issue_id: IssueId, reporter_email: str, changes: IssueChanges
    ) -> Issue:
        """Edit a pending issue's details on behalf of its reporter.

        Only the edited columns are written, guarded on the issue still being
        pending, so a concurrent transition, vote, assignment or boost is
        never overwritten.

        Raises:
            NotFoundError: If issue not found
            NotAuthorizedError: If the caller did not report the issue
            ValidationError: If the issue is no longer pending or nothing changed
        """
        with logfire.span(
            "issue_service.edit", issue_id=str(issue_id), reporter=reporter_email
        ):
            issue = await self.get_by_id(issue_id)
            self._check_editable(issue, reporter_email)

            update = changes.as_update()
            if not update:
                raise ValidationError("No changes provided")

            edited = await self.issue_repository.update_details_if_pending(
                issue_id, reporter_email, update
            )
            if edited is None:
                # Moved on or deleted between read and write
                latest = await self.get_by_id(issue_id)
                logfire.warn(
                    "Concurrent change during edit",
                    issue_id=str(issue_id),
                    status=latest.status.value,
                )
                self._check_editable(latest, reporter_email)
                raise ValidationError("Issue changed while being edited")

            logfire.info(
                "Issue edited", issue_id=str(issue_id), fields=sorted(update.keys())
            )
            return edited

    async def boost(self, issue_id: IssueId, payer_email: str) -> Issue:
        """Mark an issue as boosted after a confirmed payment.

        Status is left unchanged; a ``Boosted`` entry is recorded.

        Raises:
            NotFoundError: If issue not found
        """
        with logfire.span(
            "issue_service.boost", issue_id=str(issue_id), payer=payer_email
        ):
            updated = await self.issue_repository.set_boosted(issue_id)
            if updated is None:
                logfire.warn("Boost on non-existent issue", issue_id=str(issue_id))
                raise NotFoundError("Issue", str(issue_id))

            await self.timeline_service.record(
                issue_id,
                TimelineStatus.BOOSTED,
                boost_message(payer_email),
                payer_email,
            )
            logfire.info("Issue boosted", issue_id=str(issue_id))
            return updated

    async def status_counts(self, filters: IssueFilter) -> dict[IssueStatus, int]:
        """Count issues per status, including zero counts."""
        with logfire.span("issue_service.status_counts"):
            counts = await self.issue_repository.count_by_status(filters)
            return {status: counts.get(status, 0) for status in IssueStatus}
