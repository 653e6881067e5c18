"""PostgreSQL persistence wiring."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from civicfix.config import Settings
from civicfix.domain.repository import (
    IssueRepository,
    PaymentRepository,
    TimelineRepository,
    UserRepository,
)
from civicfix.persistence.database import create_engine, create_session_factory
from civicfix.persistence.repository import (
    PostgresIssueRepository,
    PostgresPaymentRepository,
    PostgresTimelineRepository,
    PostgresUserRepository,
)
from civicfix.util.di.base import ProviderBase
from civicfix.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Mockable component: where repositories come from."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories over one PostgreSQL transaction per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """One transaction per request.

        Committed when the request finishes, rolled back if an exception
        escapes the handler. An issue write and its timeline entry therefore
        land together or not at all.
        """
        async with factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Rolling back request transaction", error=str(e))
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def users(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def issues(self, session: AsyncSession) -> IssueRepository:
        return PostgresIssueRepository(session)

    @provide(scope=Scope.REQUEST)
    def timeline(self, session: AsyncSession) -> TimelineRepository:
        return PostgresTimelineRepository(session)

    @provide(scope=Scope.REQUEST)
    def payments(self, session: AsyncSession) -> PaymentRepository:
        return PostgresPaymentRepository(session)
