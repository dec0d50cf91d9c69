"""001 initial channels table

Revision ID: 001_initial_channels
Revises:
Create Date: 2026-10-19

Creates the channels table for social media accounts. The composite unique
constraint on (title, username) is what ultimately guarantees that no two
channels share the same account.
"""

from typing import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_initial_channels"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create channels table."""
    op.create_table(
        "channels",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("username", sa.String(255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("title", "username", name="uq_channels_title_username"),
    )


def downgrade() -> None:
    """Drop channels table."""
    op.drop_table("channels")
