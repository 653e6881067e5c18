"""Mock persistence providers for testing."""

from dishka import Scope, provide

from civicfix.domain.repository import (
    IssueRepository,
    PaymentRepository,
    TimelineRepository,
    UserRepository,
)
from civicfix.persistence.repository.inmemory import (
    InMemoryIssueRepository,
    InMemoryPaymentRepository,
    InMemoryTimelineRepository,
    InMemoryUserRepository,
)
from civicfix.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so state survives across requests made
    against one container (API tests issue several requests). Every test
    builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_issue_repository(self) -> IssueRepository:
        """Provide in-memory issue repository."""
        return InMemoryIssueRepository()

    @provide(scope=Scope.APP)
    def get_timeline_repository(self) -> TimelineRepository:
        """Provide in-memory timeline repository."""
        return InMemoryTimelineRepository()

    @provide(scope=Scope.APP)
    def get_payment_repository(self) -> PaymentRepository:
        """Provide in-memory payment repository."""
        return InMemoryPaymentRepository()
