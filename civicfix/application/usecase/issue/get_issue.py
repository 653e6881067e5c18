"""Get issue use case."""

from uuid import UUID

from pydantic import BaseModel

from civicfix.domain.service import IssueService
from civicfix.domain.value import IssueId

from .views import IssueView


class GetIssueRequest(BaseModel):
    """Get issue request."""

    issue_id: UUID


class GetIssueUseCase:
    """Use case for fetching a single issue."""

    def __init__(self, issue_service: IssueService) -> None:
        self.issue_service = issue_service

    async def execute(self, request: GetIssueRequest) -> IssueView:
        """Raises NotFoundError if the issue does not exist."""
        issue = await self.issue_service.get_by_id(IssueId(request.issue_id))
        return IssueView.from_issue(issue)
