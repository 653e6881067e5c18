"""Reject issue use case."""

from uuid import UUID

from pydantic import BaseModel

from civicfix.domain.service import IssueService
from civicfix.domain.value import IssueId

from .views import IssueView


class RejectIssueRequest(BaseModel):
    """Reject issue request."""

    issue_id: UUID


class RejectIssueUseCase:
    """Use case for an admin rejecting an issue from any status."""

    def __init__(self, issue_service: IssueService) -> None:
        self.issue_service = issue_service

    async def execute(self, request: RejectIssueRequest) -> IssueView:
        issue = await self.issue_service.reject(IssueId(request.issue_id))
        return IssueView.from_issue(issue)
