"""Delete issue use case."""

from uuid import UUID

from pydantic import BaseModel

from civicfix.domain.service import IssueService
from civicfix.domain.value import IssueId


class DeleteIssueRequest(BaseModel):
    """Delete issue request."""

    issue_id: UUID
    reporter_email: str  # From authenticated user


class DeleteIssueResponse(BaseModel):
    """Delete issue response."""

    issue_id: str
    deleted: bool


class DeleteIssueUseCase:
    """Use case for a reporter deleting their own issue."""

    def __init__(self, issue_service: IssueService) -> None:
        self.issue_service = issue_service

    async def execute(self, request: DeleteIssueRequest) -> DeleteIssueResponse:
        await self.issue_service.delete_issue(
            IssueId(request.issue_id), request.reporter_email
        )
        return DeleteIssueResponse(issue_id=str(request.issue_id), deleted=True)
