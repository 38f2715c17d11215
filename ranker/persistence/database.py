"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ranker.config import DatabaseSettings


def create_engine(database: DatabaseSettings, debug: bool = False) -> AsyncEngine:
    """Build the asyncpg engine; SQL is echoed when either flag asks for it."""
    return create_async_engine(
        database.url,
        echo=database.echo or debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Entities are rebuilt from rows, so nothing relies on expiry or autoflush
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
