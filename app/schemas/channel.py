"""Pydantic schemas for Channel request validation and serialization.

This module defines Pydantic v2 schemas used at the HTTP boundary of the
channel registry. Validation happens here, before the service is called.

Schema Naming Convention:
    - ChannelCreate: For POST requests (creating new channels)
    - ChannelUpdate: For PUT requests (partial updates)
    - ChannelResponse: For API responses (serializing from database)

Leading and trailing whitespace is stripped, so "   " counts as empty.
"""

from pydantic import BaseModel, ConfigDict, Field


class ChannelCreate(BaseModel):
    """Schema for creating a new channel.

    Used in POST /channels. Both fields are required and non-empty.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Network or account title",
        examples=["Facebook"],
    )
    username: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Account username on that network",
        examples=["team@acme.com"],
    )


class ChannelUpdate(BaseModel):
    """Schema for updating an existing channel.

    Used in PUT /channels/{channel_id}. Both fields are optional; omitted
    fields keep their current value. Provided fields must be non-empty.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    title: str | None = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="New title",
        examples=["Meta"],
    )
    username: str | None = Field(
        default=None,
        min_length=1,
        max_length=255,
        description="New username",
    )


class ChannelResponse(BaseModel):
    """Schema for Channel API responses: {id, title, username}."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    username: str
