"""Channel store: durable CRUD access to the channels table.

ChannelStore is the abstraction the service depends on;
SQLAlchemyChannelStore implements it on top of one AsyncSession. The store
is a thin pass-through to the database and makes no business decisions.

Transaction Pattern:
    Writes are flushed, not committed. The session owner (the get_session
    dependency, or a script) commits once the request succeeds. When a flush
    fails on a constraint the session is rolled back before
    ConstraintViolationError is raised, so it stays usable.
"""

from collections.abc import Mapping, Sequence
from typing import Any, Protocol

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.exceptions import ConstraintViolationError, NotFoundError
from app.models import Channel

log = structlog.get_logger(__name__)

UPDATABLE_FIELDS = frozenset({"title", "username"})


class ChannelStore(Protocol):
    async def create(self, title: str, username: str) -> Channel: ...

    async def list_all(self) -> Sequence[Channel]: ...

    async def get_by_id(self, channel_id: int) -> Channel | None: ...

    async def get_by_title_and_username(self, title: str, username: str) -> Channel | None: ...

    async def get_by_id_with_publications(self, channel_id: int) -> Channel | None: ...

    async def update(self, channel_id: int, fields: Mapping[str, Any]) -> Channel: ...

    async def delete(self, channel_id: int) -> None: ...


def _constraint_name(exc: IntegrityError) -> str | None:
    # asyncpg exposes constraint_name on the driver error, wrapped by the adapter
    for candidate in (exc.orig, getattr(exc.orig, "__cause__", None)):
        name = getattr(candidate, "constraint_name", None)
        if name:
            return name
    return None


class SQLAlchemyChannelStore:
    """ChannelStore backed by an async SQLAlchemy session."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def _flush(self, operation: str, **context: Any) -> None:
        try:
            await self._session.flush()
        except IntegrityError as exc:
            await self._session.rollback()
            constraint = _constraint_name(exc)
            log.warning(
                "channel_store_constraint_violation",
                operation=operation,
                constraint=constraint,
                error=str(exc.orig),
                **context,
            )
            raise ConstraintViolationError(
                f"Database rejected channel {operation}", constraint=constraint
            ) from exc

    async def create(self, title: str, username: str) -> Channel:
        channel = Channel(title=title, username=username)
        self._session.add(channel)
        await self._flush("create", title=title, username=username)
        return channel

    async def list_all(self) -> Sequence[Channel]:
        result = await self._session.execute(select(Channel).order_by(Channel.id))
        return result.scalars().all()

    async def get_by_id(self, channel_id: int) -> Channel | None:
        return await self._session.get(Channel, channel_id)

    async def get_by_title_and_username(self, title: str, username: str) -> Channel | None:
        result = await self._session.execute(
            select(Channel).where(Channel.title == title, Channel.username == username)
        )
        return result.scalar_one_or_none()

    async def get_by_id_with_publications(self, channel_id: int) -> Channel | None:
        """Point lookup with the publications relationship eagerly loaded."""
        result = await self._session.execute(
            select(Channel)
            .options(selectinload(Channel.publications))
            .where(Channel.id == channel_id)
            # Refresh an already loaded identity so publications are current
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def update(self, channel_id: int, fields: Mapping[str, Any]) -> Channel:
        """Apply a partial update of title and/or username.

        Args:
            channel_id: Channel primary key.
            fields: Mapping with any of "title", "username". Other keys are rejected.

        Raises:
            ValueError: If fields contains a key that is not updatable.
            NotFoundError: If no channel has channel_id.
            ConstraintViolationError: If the new pair collides at flush time.
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            raise ValueError(f"Cannot update channel fields: {sorted(unknown)}")

        channel = await self._session.get(Channel, channel_id)
        if channel is None:
            raise NotFoundError(channel_id)

        for name, value in fields.items():
            setattr(channel, name, value)
        await self._flush("update", channel_id=channel_id)
        return channel

    async def delete(self, channel_id: int) -> None:
        channel = await self._session.get(Channel, channel_id)
        if channel is None:
            raise NotFoundError(channel_id)

        await self._session.delete(channel)
        await self._flush("delete", channel_id=channel_id)
