"""Persistence providers: PostgreSQL in production, in-memory in tests."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from ranker.config import DatabaseSettings, Settings
from ranker.domain.repository import CommentRepository, RestaurantRepository
from ranker.persistence.database import create_engine, create_session_factory
from ranker.persistence.repository import (
    PostgresCommentRepository,
    PostgresRestaurantRepository,
)
from ranker.util.di.base import ProviderBase
from ranker.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Slot for the ``persistence`` component."""

    __mock_component__ = "persistence"


class PostgresPersistenceProvider(PersistenceProvider):
    """One engine per process, one session (transaction) per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def engine(
        self, database: DatabaseSettings, settings: Settings
    ) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(database, debug=settings.debug)
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Commit when the request finishes cleanly, roll back otherwise."""
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                logfire.warn("Rolling back request transaction", error=str(e))
                await session.rollback()
                raise
            await session.commit()

    restaurant_repository = provide(
        PostgresRestaurantRepository,
        provides=RestaurantRepository,
        scope=Scope.REQUEST,
    )
    comment_repository = provide(
        PostgresCommentRepository,
        provides=CommentRepository,
        scope=Scope.REQUEST,
    )
