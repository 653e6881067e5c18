"""Report issue use case."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import BaseModel, Field

from civicfix.config import IssueSettings
from civicfix.domain.error import ValidationError
from civicfix.domain.model import Issue, User
from civicfix.domain.service import IssueService, UserService
from civicfix.domain.value import IssueId, IssueStatus, UserRole

from .views import IssueView


class ReportIssueRequest(BaseModel):
    """Report issue request."""

    title: str = Field(min_length=1, max_length=200)
    description: str = Field(default="", max_length=5000)
    category: str = Field(min_length=1, max_length=100)
    location: str = Field(min_length=1, max_length=300)
    image_url: str | None = None
    reporter_email: str  # From authenticated user


class ReportIssueUseCase:
    """Use case for a citizen reporting a new issue."""

    def __init__(
        self,
        issue_service: IssueService,
        user_service: UserService,
        issue_settings: IssueSettings,
    ) -> None:
        """Initialize report issue use case.

        Args:
            issue_service: Issue domain service
            user_service: User domain service
            issue_settings: Issue reporting settings (free-tier limit)
        """
        self.issue_service = issue_service
        self.user_service = user_service
        self.issue_settings = issue_settings

    def _check_report_quota(self, reporter: User) -> None:
        """Refuse free citizens who already hold the maximum number of reports."""
        if reporter.role != UserRole.CITIZEN or reporter.is_premium:
            return

        limit = self.issue_settings.free_report_limit
        if reporter.issue_count >= limit:
            logfire.warn(
                "Free report limit reached",
                email=reporter.email,
                issue_count=reporter.issue_count,
                limit=limit,
            )
            raise ValidationError(
                f"Free users can report up to {limit} issues. "
                "Upgrade to premium for unlimited reports."
            )

    async def execute(self, request: ReportIssueRequest) -> IssueView:
        """Execute report issue flow.

        Args:
            request: Report issue request

        Returns:
            The newly created issue

        Raises:
            NotFoundError: If the reporter is not registered
            ValidationError: If the reporter has used up their free reports
        """
        with logfire.span(
            "report_issue.execute",
            reporter=request.reporter_email,
            category=request.category,
        ):
            reporter = await self.user_service.get_by_email(request.reporter_email)
            self._check_report_quota(reporter)

            now = datetime.now()
            issue = Issue(
                id=IssueId(uuid4()),
                title=request.title.strip(),
                description=request.description.strip(),
                category=request.category.strip(),
                location=request.location.strip(),
                image_url=request.image_url,
                reporter_email=reporter.email,
                reporter_name=reporter.name,
                status=IssueStatus.PENDING,
                created_at=now,
                updated_at=now,
            )

            saved = await self.issue_service.report_new(issue)
            return IssueView.from_issue(saved)
