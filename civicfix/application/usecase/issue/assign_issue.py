"""Assign issue use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from civicfix.domain.error import ValidationError
from civicfix.domain.service import IssueService, UserService
from civicfix.domain.value import IssueId, UserRole

from .views import IssueView


class AssignIssueRequest(BaseModel):
    """Assign issue request."""

    issue_id: UUID
    staff_email: str


class AssignIssueUseCase:
    """Use case for an admin assigning a staff member to an issue."""

    def __init__(self, issue_service: IssueService, user_service: UserService) -> None:
        """Initialize assign issue use case.

        Args:
            issue_service: Issue domain service
            user_service: User domain service (resolves the staff member)
        """
        self.issue_service = issue_service
        self.user_service = user_service

    async def execute(self, request: AssignIssueRequest) -> IssueView:
        """Execute assign flow.

        Raises:
            NotFoundError: If the issue or staff user does not exist
            ValidationError: If the target user is not staff
            AlreadyAssignedError: If the issue already has an assignee
        """
        with logfire.span(
            "assign_issue.execute",
            issue_id=str(request.issue_id),
            staff_email=request.staff_email,
        ):
            staff = await self.user_service.get_by_email(request.staff_email)
            if staff.role != UserRole.STAFF:
                raise ValidationError(f"User {staff.email} is not a staff member")

            issue = await self.issue_service.assign(
                IssueId(request.issue_id), staff.email, staff.name or staff.email
            )
            return IssueView.from_issue(issue)
