"""Persistence adapters for the channel registry."""

from app.repositories.channel_repository import ChannelStore, SQLAlchemyChannelStore

__all__ = [
    "ChannelStore",
    "SQLAlchemyChannelStore",
]
