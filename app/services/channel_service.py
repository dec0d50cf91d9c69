"""Channel service: business preconditions around the channel store.

This module provides the ChannelService class, which enforces the two
rules of the channel registry before delegating writes to the store:

- Uniqueness: no two channels share a (title, username) pair. Checked on
  create and on update (excluding the channel being updated).
- Dependents: a channel referenced by publications cannot be deleted.

Race Handling:
    The read-then-write sequences are not atomic. When two requests race
    past the uniqueness check, the database constraint rejects the second
    write and the store raises ConstraintViolationError, which is mapped to
    the same ConflictError the pre-check would have produced. A publication
    created between the dependents check and the delete is caught by the
    RESTRICT foreign key and mapped to ForbiddenError.

Usage:
    >>> service = ChannelService(SQLAlchemyChannelStore(session))
    >>> channel = await service.create("Facebook", "team@acme.com")
"""

from collections.abc import Sequence

import structlog

from app.exceptions import (
    ConflictError,
    ConstraintViolationError,
    ForbiddenError,
    NotFoundError,
)
from app.models import Channel
from app.repositories.channel_repository import ChannelStore

log = structlog.get_logger(__name__)

CONFLICT_MESSAGE = "Media with this info already exists"
FORBIDDEN_MESSAGE = "cannot delete a channel with scheduled or published content"


class ChannelService:
    """Guarded CRUD operations over channels.

    Args:
        store: ChannelStore implementation, chosen by the caller.
    """

    def __init__(self, store: ChannelStore):
        self.store = store

    async def create(self, title: str, username: str) -> Channel:
        """Create a channel unless its (title, username) pair is taken.

        Raises:
            ConflictError: If a channel with the same pair already exists.
        """
        existing = await self.store.get_by_title_and_username(title, username)
        if existing is not None:
            log.warning(
                "channel_create_conflict",
                title=title,
                username=username,
                existing_channel_id=existing.id,
            )
            raise ConflictError(CONFLICT_MESSAGE)

        try:
            channel = await self.store.create(title, username)
        except ConstraintViolationError as exc:
            raise ConflictError(CONFLICT_MESSAGE) from exc

        log.info("channel_created", channel_id=channel.id, title=title, username=username)
        return channel

    async def list_all(self) -> Sequence[Channel]:
        return await self.store.list_all()

    async def get_by_id(self, channel_id: int) -> Channel:
        """Fetch one channel.

        Raises:
            NotFoundError: If no channel has channel_id.
        """
        channel = await self.store.get_by_id(channel_id)
        if channel is None:
            raise NotFoundError(channel_id)
        return channel

    async def update(
        self,
        channel_id: int,
        title: str | None = None,
        username: str | None = None,
    ) -> Channel:
        """Change a channel's title and/or username.

        Fields left as None keep their current value. The uniqueness check
        runs against the resulting pair and ignores the channel itself, so
        re-submitting the current values succeeds.

        Raises:
            NotFoundError: If no channel has channel_id.
            ConflictError: If a different channel already holds the new pair.
        """
        channel = await self.get_by_id(channel_id)

        fields: dict[str, str] = {}
        if title is not None:
            fields["title"] = title
        if username is not None:
            fields["username"] = username
        if not fields:
            return channel

        candidate_title = fields.get("title", channel.title)
        candidate_username = fields.get("username", channel.username)
        holder = await self.store.get_by_title_and_username(candidate_title, candidate_username)
        if holder is not None and holder.id != channel_id:
            log.warning(
                "channel_update_conflict",
                channel_id=channel_id,
                title=candidate_title,
                username=candidate_username,
                existing_channel_id=holder.id,
            )
            raise ConflictError(CONFLICT_MESSAGE)

        try:
            updated = await self.store.update(channel_id, fields)
        except ConstraintViolationError as exc:
            raise ConflictError(CONFLICT_MESSAGE) from exc

        log.info("channel_updated", channel_id=channel_id, fields=sorted(fields))
        return updated

    async def delete(self, channel_id: int) -> Channel:
        """Delete a channel that has no publications.

        Returns:
            The deleted channel, as it was before removal.

        Raises:
            NotFoundError: If no channel has channel_id.
            ForbiddenError: If one or more publications reference the channel.
        """
        channel = await self.store.get_by_id_with_publications(channel_id)
        if channel is None:
            raise NotFoundError(channel_id)

        if channel.publications:
            log.warning(
                "channel_delete_forbidden",
                channel_id=channel_id,
                publication_count=len(channel.publications),
            )
            raise ForbiddenError(FORBIDDEN_MESSAGE)

        try:
            await self.store.delete(channel_id)
        except ConstraintViolationError as exc:
            raise ForbiddenError(FORBIDDEN_MESSAGE) from exc

        log.info("channel_deleted", channel_id=channel_id)
        return channel
