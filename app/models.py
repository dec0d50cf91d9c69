"""SQLAlchemy 2.0 ORM models.

This module contains all SQLAlchemy models for the channel registry.
All models use the Mapped[type] annotation pattern required by SQLAlchemy 2.0.

Tables:
    channels: Media channel accounts (title + username), the managed resource.
    posts: Content items that can be scheduled on channels.
    publications: Scheduling records linking a channel and a post at a date.

Only channels are managed by this service. Posts and publications are
mapped so the delete guard can see which channels have dependents.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""

    pass


class Channel(Base):
    """Social media account that publications are scheduled on.

    Called "media" in the wider publication domain. A channel is identified
    to users by its (title, username) pair, e.g. ("Facebook", "team@acme.com").

    Attributes:
        id: Integer primary key, generated by the database.
        title: Network or account display title.
        username: Account login on that network.
        publications: Scheduled or published content referencing this channel.

    Constraints:
        uq_channels_title_username: (title, username) is unique across all rows.
    """

    __tablename__ = "channels"
    __table_args__ = (
        UniqueConstraint("title", "username", name="uq_channels_title_username"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    username: Mapped[str] = mapped_column(String(255), nullable=False)

    # passive_deletes="all": the ORM never nulls out publication FKs on delete,
    # the RESTRICT constraint decides.
    publications: Mapped[list["Publication"]] = relationship(
        "Publication",
        back_populates="channel",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        return f"<Channel(id={self.id}, title={self.title!r}, username={self.username!r})>"


class Post(Base):
    """Content item (text with optional image) that can be published."""

    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    text: Mapped[str] = mapped_column(Text, nullable=False)
    image: Mapped[str | None] = mapped_column(String(500), nullable=True)

    publications: Mapped[list["Publication"]] = relationship(
        "Publication",
        back_populates="post",
        passive_deletes="all",
    )

    def __repr__(self) -> str:
        return f"<Post(id={self.id}, title={self.title!r})>"


class Publication(Base):
    """A post scheduled (or already published) on a channel at a given date.

    Foreign Keys:
        channel_id references channels.id with ondelete='RESTRICT'.
        post_id references posts.id with ondelete='RESTRICT'.
    """

    __tablename__ = "publications"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    channel_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("channels.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("posts.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    channel: Mapped["Channel"] = relationship("Channel", back_populates="publications")
    post: Mapped["Post"] = relationship("Post", back_populates="publications")

    def __repr__(self) -> str:
        return (
            f"<Publication(id={self.id}, channel_id={self.channel_id}, "
            f"post_id={self.post_id}, date={self.date.isoformat() if self.date else None})>"
        )
