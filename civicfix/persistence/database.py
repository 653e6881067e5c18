"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from civicfix.config import Settings

APPLICATION_NAME = "civicfix"


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg-backed engine.

    Connections are tagged with ``application_name`` so they can be picked
    out in ``pg_stat_activity``.
    """
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
        connect_args={"server_settings": {"application_name": APPLICATION_NAME}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the per-request session factory.

    Repositories build their own statements and read rows back with
    ``RETURNING``, so nothing relies on ORM expiry or autoflush.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
