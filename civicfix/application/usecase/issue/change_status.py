"""Change issue status use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from civicfix.domain.error import NotAuthorizedError
from civicfix.domain.service import IssueService
from civicfix.domain.value import Actor, IssueId, IssueStatus

from .views import IssueView


class ChangeStatusRequest(BaseModel):
    """Change status request."""

    issue_id: UUID
    status: IssueStatus
    staff_email: str  # From authenticated staff user


class ChangeStatusUseCase:
    """Use case for the assigned staff member moving an issue forward."""

    def __init__(self, issue_service: IssueService) -> None:
        """Initialize change status use case.

        Args:
            issue_service: Issue domain service
        """
        self.issue_service = issue_service

    async def execute(self, request: ChangeStatusRequest) -> IssueView:
        """Execute change status flow.

        Args:
            request: Change status request

        Returns:
            Updated issue

        Raises:
            NotFoundError: If the issue does not exist
            NotAuthorizedError: If the caller is not the assigned staff member
            InvalidTransitionError: If the status is not reachable
        """
        issue_id = IssueId(request.issue_id)
        with logfire.span(
            "change_status.execute",
            issue_id=str(issue_id),
            status=request.status.value,
            staff_email=request.staff_email,
        ):
            issue = await self.issue_service.get_by_id(issue_id)
            if issue.assigned_staff_email != request.staff_email:
                logfire.warn(
                    "Status change by non-assignee",
                    issue_id=str(issue_id),
                    staff_email=request.staff_email,
                    assigned_to=issue.assigned_staff_email,
                )
                raise NotAuthorizedError("issue", str(issue_id), request.staff_email)

            updated = await self.issue_service.request_transition(
                issue_id, request.status, Actor.STAFF.value
            )
            return IssueView.from_issue(updated)
