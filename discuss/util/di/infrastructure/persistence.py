"""Persistence component: PostgreSQL in production, in-memory in tests."""

from collections.abc import AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from discuss.config import CommentSettings, Settings
from discuss.domain.repository import (
    CommentRepository,
    FileRepository,
    TrackerRepository,
    UserRepository,
)
from discuss.persistence.database import create_engine, create_session_factory
from discuss.persistence.repository import (
    PostgresCommentRepository,
    PostgresFileRepository,
    PostgresTrackerRepository,
    PostgresUserRepository,
)
from discuss.util.di.base import ProviderBase
from discuss.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Binds the four repository interfaces."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories over one PostgreSQL session per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Instrumented engine, disposed when the container closes."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Request session: committed when the request succeeds.

        An exception escaping the request rolls every write back.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn(
                    "Rolling back request session",
                    error=str(e),
                    error_type=type(e).__name__,
                )
                await session.rollback()
                raise
            await session.commit()

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(
        self, session: AsyncSession, settings: CommentSettings
    ) -> CommentRepository:
        return PostgresCommentRepository(session, entity_type=settings.entity_type)

    @provide(scope=Scope.REQUEST)
    def get_tracker_repository(self, session: AsyncSession) -> TrackerRepository:
        return PostgresTrackerRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_file_repository(self, session: AsyncSession) -> FileRepository:
        return PostgresFileRepository(session)
