"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

import asyncio

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from updoot.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,  # Verify connections before using
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,  # Don't expire objects after commit
        autoflush=False,  # Manual flushing for better control
    )


def session_lock(session: AsyncSession) -> asyncio.Lock:
    """Lock guarding one session's connection.

    GraphQL resolves sibling fields concurrently (e.g. both batch loaders
    on a feed page) while they share the request session, and a session
    runs one statement at a time.

    Args:
        session: The session to guard

    Returns:
        The same lock for every caller of this session
    """
    return session.info.setdefault("updoot.lock", asyncio.Lock())
