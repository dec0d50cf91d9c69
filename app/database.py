"""Async database engine and session management.

This module provides the async SQLAlchemy 2.0 engine configuration,
session factory, and FastAPI dependency injection for database sessions.

Usage:
    from app.database import get_session

    async def my_route(db: AsyncSession = Depends(get_session)):
        result = await db.execute(select(Channel))
        ...
"""

import os
from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.config import get_database_echo, get_database_url


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    """Turn on FK enforcement; SQLite ignores ON DELETE RESTRICT otherwise."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def _install_sqlite_pragmas(engine: AsyncEngine) -> None:
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)


def _create_engine(database_url: str) -> AsyncEngine:
    if database_url.startswith("sqlite"):
        new_engine = create_async_engine(database_url, echo=get_database_echo())
    else:
        new_engine = create_async_engine(
            database_url,
            pool_size=10,
            max_overflow=5,
            pool_pre_ping=True,
            echo=get_database_echo(),
        )
    _install_sqlite_pragmas(new_engine)
    return new_engine


# Check if DATABASE_URL is available (may not be during import in tests)
_database_url = os.getenv("DATABASE_URL")

if _database_url:
    engine = _create_engine(get_database_url())
else:
    # Development/Testing: Defer engine creation
    engine = None  # type: ignore[assignment]


async_session_factory: async_sessionmaker[AsyncSession] | None = (
    async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,  # CRITICAL: prevents attribute expiration after commit
    )
    if engine
    else None
)


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database session injection.

    Yields an async database session with automatic commit on success
    and rollback on exception.

    Yields:
        AsyncSession: Database session for the request.

    Raises:
        RuntimeError: If database is not configured.
    """
    if async_session_factory is None:
        raise RuntimeError("Database not configured. Set DATABASE_URL environment variable.")

    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


def create_test_engine(
    database_url: str = "sqlite+aiosqlite:///:memory:",
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create an async engine for testing.

    Foreign keys are enforced on SQLite engines created here.

    Args:
        database_url: Test database URL (defaults to in-memory SQLite).

    Returns:
        Tuple of (engine, async_session_factory) for testing.
    """
    engine_kwargs: dict[str, Any] = {}
    if ":memory:" in database_url:
        # Single connection, otherwise every checkout sees an empty database
        engine_kwargs["poolclass"] = StaticPool

    test_engine = create_async_engine(
        database_url,
        echo=False,
        **engine_kwargs,
    )
    _install_sqlite_pragmas(test_engine)
    test_session_factory = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    return test_engine, test_session_factory
