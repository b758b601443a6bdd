"""Async PostgreSQL engine and sessions."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from discuss.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine for ``settings.database``; SQL is echoed in debug mode."""
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory whose sessions keep rows readable after commit.

    Repositories issue Core statements only, so ORM autoflush is off.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
