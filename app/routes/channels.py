"""Channel management routes.

This module provides the FastAPI routes of the channel registry:
- POST /channels - Create a channel
- GET /channels - List channels
- GET /channels/{channel_id} - Fetch one channel
- PUT /channels/{channel_id} - Update title and/or username
- DELETE /channels/{channel_id} - Delete a channel without publications

Pattern:
- Request bodies are validated by pydantic schemas before the handler runs
- Handlers call ChannelService and return ORM objects serialized by
  ChannelResponse
- Domain errors propagate to the exception handlers in app.main
"""

from collections.abc import Sequence

import structlog
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_session
from app.models import Channel
from app.repositories.channel_repository import SQLAlchemyChannelStore
from app.schemas.channel import ChannelCreate, ChannelResponse, ChannelUpdate
from app.services.channel_service import ChannelService

log = structlog.get_logger(__name__)
router = APIRouter(prefix="/channels", tags=["channels"])


def get_channel_service(session: AsyncSession = Depends(get_session)) -> ChannelService:
    """FastAPI dependency building a ChannelService bound to the request session."""
    return ChannelService(SQLAlchemyChannelStore(session))


@router.post("", response_model=ChannelResponse, status_code=status.HTTP_201_CREATED)
async def create_channel(
    payload: ChannelCreate,
    service: ChannelService = Depends(get_channel_service),
) -> Channel:
    """Create a channel.

    Returns:
        201 Created: The stored channel
        400 Bad Request: Missing or empty title/username
        409 Conflict: A channel with this title and username exists
    """
    return await service.create(payload.title, payload.username)


@router.get("", response_model=list[ChannelResponse])
async def list_channels(
    service: ChannelService = Depends(get_channel_service),
) -> Sequence[Channel]:
    return await service.list_all()


@router.get("/{channel_id}", response_model=ChannelResponse)
async def get_channel(
    channel_id: int,
    service: ChannelService = Depends(get_channel_service),
) -> Channel:
    """Fetch one channel (404 if absent)."""
    return await service.get_by_id(channel_id)


@router.put("/{channel_id}", response_model=ChannelResponse)
async def update_channel(
    channel_id: int,
    payload: ChannelUpdate,
    service: ChannelService = Depends(get_channel_service),
) -> Channel:
    """Update a channel's title and/or username.

    Returns:
        200 OK: The updated channel
        400 Bad Request: A provided field is empty
        404 Not Found: No channel with this id
        409 Conflict: Another channel holds the new title and username
    """
    return await service.update(channel_id, title=payload.title, username=payload.username)


@router.delete("/{channel_id}", response_model=ChannelResponse)
async def delete_channel(
    channel_id: int,
    service: ChannelService = Depends(get_channel_service),
) -> Channel:
    """Delete a channel.

    Returns:
        200 OK: The deleted channel
        403 Forbidden: The channel has scheduled or published content
        404 Not Found: No channel with this id
    """
    return await service.delete(channel_id)
