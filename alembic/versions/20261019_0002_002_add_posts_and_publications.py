"""Add posts and publications tables.

Publications link a channel and a post at a date. Both foreign keys use
ON DELETE RESTRICT: a channel (or post) with publications cannot be removed.

Revision ID: 002_add_posts_and_publications
Revises: 001_initial_channels
Create Date: 2026-10-19

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "002_add_posts_and_publications"
down_revision: str | None = "001_initial_channels"
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create posts and publications tables with indexes."""
    op.create_table(
        "posts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("text", sa.Text(), nullable=False),
        sa.Column("image", sa.String(500), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "publications",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("channel_id", sa.Integer(), nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("date", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(
            ["channel_id"],
            ["channels.id"],
            name="fk_publications_channel_id",
            ondelete="RESTRICT",
        ),
        sa.ForeignKeyConstraint(
            ["post_id"],
            ["posts.id"],
            name="fk_publications_post_id",
            ondelete="RESTRICT",
        ),
    )

    op.create_index("ix_publications_channel_id", "publications", ["channel_id"])
    op.create_index("ix_publications_post_id", "publications", ["post_id"])


def downgrade() -> None:
    """Drop publications and posts tables."""
    op.drop_index("ix_publications_post_id", table_name="publications")
    op.drop_index("ix_publications_channel_id", table_name="publications")
    op.drop_table("publications")
    op.drop_table("posts")
