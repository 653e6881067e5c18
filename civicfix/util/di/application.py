"""Application layer DI providers."""

from dishka import Scope, provide

from civicfix.application.usecase.dashboard import GetStatsUseCase
from civicfix.application.usecase.issue import (
    AssignIssueUseCase,
    ChangeStatusUseCase,
    DeleteIssueUseCase,
    GetIssueUseCase,
    GetTimelineUseCase,
    ListIssuesUseCase,
    RejectIssueUseCase,
    ReportIssueUseCase,
    UpdateIssueUseCase,
    UpvoteIssueUseCase,
)
from civicfix.application.usecase.payment import ConfirmPaymentUseCase
from civicfix.application.usecase.user import (
    GetCurrentUserUseCase,
    ListUsersUseCase,
    RegisterUserUseCase,
    UpdateUserRoleUseCase,
)
from civicfix.config import AuthSettings, IssueSettings
from civicfix.domain.service import (
    IssueService,
    PaymentService,
    TimelineService,
    UserService,
)
from civicfix.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    scope = Scope.REQUEST

    # Issue use cases
    @provide
    def get_report_issue_use_case(
        self,
        issue_service: IssueService,
        user_service: UserService,
        issue_settings: IssueSettings,
    ) -> ReportIssueUseCase:
        """Provide report issue use case."""
        return ReportIssueUseCase(
            issue_service=issue_service,
            user_service=user_service,
            issue_settings=issue_settings,
        )

    @provide
    def get_list_issues_use_case(
        self, issue_service: IssueService, issue_settings: IssueSettings
    ) -> ListIssuesUseCase:
        """Provide list issues use case."""
        return ListIssuesUseCase(
            issue_service=issue_service, issue_settings=issue_settings
        )

    @provide
    def get_get_issue_use_case(self, issue_service: IssueService) -> GetIssueUseCase:
        """Provide get issue use case."""
        return GetIssueUseCase(issue_service=issue_service)

    @provide
    def get_get_timeline_use_case(
        self, timeline_service: TimelineService
    ) -> GetTimelineUseCase:
        """Provide get timeline use case."""
        return GetTimelineUseCase(timeline_service=timeline_service)

    @provide
    def get_update_issue_use_case(
        self, issue_service: IssueService
    ) -> UpdateIssueUseCase:
        """Provide update issue use case."""
        return UpdateIssueUseCase(issue_service=issue_service)

    @provide
    def get_delete_issue_use_case(
        self, issue_service: IssueService
    ) -> DeleteIssueUseCase:
        """Provide delete issue use case."""
        return DeleteIssueUseCase(issue_service=issue_service)

    @provide
    def get_upvote_issue_use_case(
        self, issue_service: IssueService
    ) -> UpvoteIssueUseCase:
        """Provide upvote issue use case."""
        return UpvoteIssueUseCase(issue_service=issue_service)

    @provide
    def get_assign_issue_use_case(
        self, issue_service: IssueService, user_service: UserService
    ) -> AssignIssueUseCase:
        """Provide assign issue use case."""
        return AssignIssueUseCase(
            issue_service=issue_service, user_service=user_service
        )

    @provide
    def get_change_status_use_case(
        self, issue_service: IssueService
    ) -> ChangeStatusUseCase:
        """Provide change status use case."""
        return ChangeStatusUseCase(issue_service=issue_service)

    @provide
    def get_reject_issue_use_case(
        self, issue_service: IssueService
    ) -> RejectIssueUseCase:
        """Provide reject issue use case."""
        return RejectIssueUseCase(issue_service=issue_service)

    # User use cases
    @provide
    def get_register_user_use_case(
        self, user_service: UserService, auth_settings: AuthSettings
    ) -> RegisterUserUseCase:
        """Provide register user use case."""
        return RegisterUserUseCase(
            user_service=user_service, auth_settings=auth_settings
        )

    @provide
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        """Provide get current user use case."""
        return GetCurrentUserUseCase(user_service=user_service)

    @provide
    def get_list_users_use_case(self, user_service: UserService) -> ListUsersUseCase:
        """Provide list users use case."""
        return ListUsersUseCase(user_service=user_service)

    @provide
    def get_update_user_role_use_case(
        self, user_service: UserService
    ) -> UpdateUserRoleUseCase:
        """Provide update user role use case."""
        return UpdateUserRoleUseCase(user_service=user_service)

    # Payment use cases
    @provide
    def get_confirm_payment_use_case(
        self, payment_service: PaymentService
    ) -> ConfirmPaymentUseCase:
        """Provide confirm payment use case."""
        return ConfirmPaymentUseCase(payment_service=payment_service)

    # Dashboard use cases
    @provide
    def get_get_stats_use_case(
        self,
        issue_service: IssueService,
        payment_service: PaymentService,
        user_service: UserService,
    ) -> GetStatsUseCase:
        """Provide dashboard stats use case."""
        return GetStatsUseCase(
            issue_service=issue_service,
            payment_service=payment_service,
            user_service=user_service,
        )
