"""Pydantic schemas for validation and serialization."""

from app.schemas.channel import ChannelCreate, ChannelResponse, ChannelUpdate

__all__ = [
    "ChannelCreate",
    "ChannelUpdate",
    "ChannelResponse",
]
