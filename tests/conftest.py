"""Shared pytest fixtures for async database testing.

This module provides reusable fixtures for testing SQLAlchemy models,
the channel store and the HTTP routes using an in-memory SQLite database
with foreign keys enforced.
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from app.database import create_test_engine
from app.models import Base


@pytest_asyncio.fixture
async def async_engine():
    """Create an async SQLite engine for testing.

    Uses in-memory SQLite with aiosqlite and a single shared connection.
    Creates all tables before yielding, disposes after.

    Yields:
        AsyncEngine: Configured test database engine.
    """
    engine, _ = create_test_engine()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(async_engine) -> async_sessionmaker[AsyncSession]:
    """Session factory bound to the test engine (expire_on_commit=False)."""
    return async_sessionmaker(
        bind=async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture
async def async_session(session_factory):
    """Create an async session for testing.

    Args:
        session_factory: Test session factory fixture.

    Yields:
        AsyncSession: Database session for test operations.
    """
    async with session_factory() as session:
        yield session


# Import additional fixtures from fixtures/ package
from tests.fixtures.database import (  # noqa: F401, E402
    api_client,
    channel_store,
    mock_channel_store,
    seeded_channels,
)
