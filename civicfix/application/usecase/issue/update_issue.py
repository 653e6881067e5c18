"""Update issue use case."""

from uuid import UUID

from pydantic import BaseModel

from civicfix.domain.service import IssueService
from civicfix.domain.value import IssueChanges, IssueId

from .views import IssueView


class UpdateIssueRequest(BaseModel):
    """Update issue request. Omitted fields are left unchanged."""

    issue_id: UUID
    reporter_email: str  # From authenticated user
    title: str | None = None
    description: str | None = None
    category: str | None = None
    location: str | None = None
    image_url: str | None = None


class UpdateIssueUseCase:
    """Use case for a reporter editing their pending issue."""

    def __init__(self, issue_service: IssueService) -> None:
        """Initialize update issue use case.

        Args:
            issue_service: Issue domain service
        """
        self.issue_service = issue_service

    async def execute(self, request: UpdateIssueRequest) -> IssueView:
        """Execute update issue flow.

        Raises:
            NotFoundError: If the issue does not exist
            NotAuthorizedError: If the caller did not report the issue
            ValidationError: If the issue is no longer pending or nothing changed
        """
        changes = IssueChanges(
            title=request.title,
            description=request.description,
            category=request.category,
            location=request.location,
            image_url=request.image_url,
        )
        issue = await self.issue_service.edit(
            IssueId(request.issue_id), request.reporter_email, changes
        )
        return IssueView.from_issue(issue)
