"""Upvote issue use case."""

from uuid import UUID

from pydantic import BaseModel

from civicfix.domain.service import IssueService
from civicfix.domain.value import IssueId


class UpvoteIssueRequest(BaseModel):
    """Upvote request."""

    issue_id: UUID
    voter_email: str  # From authenticated user


class UpvoteIssueResponse(BaseModel):
    """Upvote response."""

    issue_id: str
    upvote_count: int


class UpvoteIssueUseCase:
    """Use case for upvoting an issue."""

    def __init__(self, issue_service: IssueService) -> None:
        """Initialize upvote use case.

        Args:
            issue_service: Issue domain service
        """
        self.issue_service = issue_service

    async def execute(self, request: UpvoteIssueRequest) -> UpvoteIssueResponse:
        """Execute upvote flow.

        Args:
            request: Upvote request

        Returns:
            Issue id and its new vote count

        Raises:
            AlreadyVotedError: If the voter already upvoted this issue
            ValidationError: If the voter reported the issue
        """
        issue = await self.issue_service.upvote(
            IssueId(request.issue_id), request.voter_email
        )
        return UpvoteIssueResponse(
            issue_id=str(issue.id), upvote_count=issue.upvote_count
        )
