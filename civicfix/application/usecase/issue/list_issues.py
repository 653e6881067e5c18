"""List issues use case."""

import logfire
from pydantic import BaseModel, Field

from civicfix.config import IssueSettings
from civicfix.domain.repository import IssueFilter
from civicfix.domain.service import IssueService
from civicfix.domain.value import IssueStatus

from .views import IssueView


class ListIssuesRequest(BaseModel):
    """List issues request."""

    status: IssueStatus | None = None
    category: str | None = None
    search: str | None = None
    reporter_email: str | None = None
    assigned_staff_email: str | None = None
    limit: int | None = Field(default=None, ge=1)  # None: configured page size
    offset: int = Field(default=0, ge=0)


class ListIssuesResponse(BaseModel):
    """List issues response."""

    issues: list[IssueView]
    total: int
    limit: int
    offset: int


class ListIssuesUseCase:
    """Use case for listing issues with filtering and pagination.

    Boosted issues are listed first, newest first within each group.
    """

    def __init__(
        self, issue_service: IssueService, issue_settings: IssueSettings
    ) -> None:
        self.issue_service = issue_service
        self.issue_settings = issue_settings

    async def execute(self, request: ListIssuesRequest) -> ListIssuesResponse:
        limit = min(
            request.limit or self.issue_settings.default_page_size,
            self.issue_settings.max_page_size,
        )
        filters = IssueFilter(
            status=request.status,
            category=request.category or None,
            search=(request.search or "").strip() or None,
            reporter_email=request.reporter_email,
            assigned_staff_email=request.assigned_staff_email,
        )

        with logfire.span("list_issues.execute", limit=limit, offset=request.offset):
            issues, total = await self.issue_service.list_issues(
                filters, limit=limit, offset=request.offset
            )
            return ListIssuesResponse(
                issues=[IssueView.from_issue(issue) for issue in issues],
                total=total,
                limit=limit,
                offset=request.offset,
            )
