"""Business logic services for the channel registry."""

from app.services.channel_service import ChannelService

__all__ = [
    "ChannelService",
]
