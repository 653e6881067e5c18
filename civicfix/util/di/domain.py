"""Domain layer DI providers."""

from dishka import Scope, provide

from civicfix.config import AuthSettings
from civicfix.domain.repository import (
    IssueRepository,
    PaymentRepository,
    TimelineRepository,
    UserRepository,
)
from civicfix.domain.service import (
    IssueService,
    PaymentService,
    TimelineService,
    TokenService,
    UserService,
)
from civicfix.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances sharing one transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_token_service(self, auth_settings: AuthSettings) -> TokenService:
        """Provide identity token domain service."""
        return TokenService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_timeline_service(
        self, timeline_repository: TimelineRepository
    ) -> TimelineService:
        """Provide timeline domain service."""
        return TimelineService(timeline_repository=timeline_repository)

    @provide
    def get_issue_service(
        self,
        issue_repository: IssueRepository,
        timeline_service: TimelineService,
        user_service: UserService,
    ) -> IssueService:
        """Provide issue lifecycle domain service."""
        return IssueService(
            issue_repository=issue_repository,
            timeline_service=timeline_service,
            user_service=user_service,
        )

    @provide
    def get_payment_service(
        self,
        payment_repository: PaymentRepository,
        issue_service: IssueService,
        user_service: UserService,
    ) -> PaymentService:
        """Provide payment domain service."""
        return PaymentService(
            payment_repository=payment_repository,
            issue_service=issue_service,
            user_service=user_service,
        )
