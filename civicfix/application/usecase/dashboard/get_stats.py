"""Dashboard statistics use case."""

import logfire
from pydantic import BaseModel

from civicfix.domain.repository import IssueFilter
from civicfix.domain.service import IssueService, PaymentService, UserService
from civicfix.domain.value import UserRole


class GetStatsRequest(BaseModel):
    """Get stats request."""

    email: str  # From verified token
    role: UserRole


class GetStatsResponse(BaseModel):
    """Issue counts scoped to the caller's role.

    ``by_status`` maps every status label to a count, zero included.
    Revenue and user totals are only filled in for admins.
    """

    role: UserRole
    total_issues: int
    by_status: dict[str, int]
    total_revenue: int | None = None
    total_users: int | None = None


class GetStatsUseCase:
    """Use case for the role-specific dashboard.

    Citizens see their own reports, staff the issues assigned to them and
    admins everything.
    """

    def __init__(
        self,
        issue_service: IssueService,
        payment_service: PaymentService,
        user_service: UserService,
    ) -> None:
        """Initialize get stats use case.

        Args:
            issue_service: Issue domain service
            payment_service: Payment domain service (admin revenue)
            user_service: User domain service (admin user total)
        """
        self.issue_service = issue_service
        self.payment_service = payment_service
        self.user_service = user_service

    def _scope(self, request: GetStatsRequest) -> IssueFilter:
        if request.role == UserRole.CITIZEN:
            return IssueFilter(reporter_email=request.email)
        if request.role == UserRole.STAFF:
            return IssueFilter(assigned_staff_email=request.email)
        return IssueFilter()

    async def execute(self, request: GetStatsRequest) -> GetStatsResponse:
        with logfire.span(
            "get_stats.execute", email=request.email, role=request.role.value
        ):
            counts = await self.issue_service.status_counts(self._scope(request))
            response = GetStatsResponse(
                role=request.role,
                total_issues=sum(counts.values()),
                by_status={status.value: n for status, n in counts.items()},
            )

            if request.role == UserRole.ADMIN:
                response.total_revenue = await self.payment_service.total_revenue()
                _, total_users = await self.user_service.list_users(limit=1)
                response.total_users = total_users

            return response
