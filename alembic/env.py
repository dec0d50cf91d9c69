"""Alembic migration environment for the channel registry schema.

Revisions:
    001_initial_channels: channels table with the (title, username) unique pair
    002_add_posts_and_publications: posts and publications, whose RESTRICT
        foreign keys keep a channel with scheduled content from being deleted

DATABASE_URL comes from the environment (or .env via app.config) and is
rewritten to the async driver. SQLite files are migrated in batch mode
since SQLite cannot ALTER constraints in place.

Usage:
    alembic upgrade head
    alembic downgrade 001_initial_channels
"""

import asyncio
from logging.config import fileConfig

from alembic import context
from sqlalchemy import pool
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import async_engine_from_config

from app.config import get_database_url
from app.models import Base

config = context.config

if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata


def _configure(**kwargs) -> None:
    context.configure(target_metadata=target_metadata, compare_type=True, **kwargs)


def run_migrations_offline() -> None:
    """Emit the migration SQL for DATABASE_URL's dialect without connecting."""
    _configure(
        url=get_database_url(),
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def _migrate(connection: Connection) -> None:
    _configure(
        connection=connection,
        render_as_batch=connection.dialect.name == "sqlite",
    )
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    """Apply migrations over a throwaway async engine."""
    section = config.get_section(config.config_ini_section, {})
    section["sqlalchemy.url"] = get_database_url()
    connectable = async_engine_from_config(
        section, prefix="sqlalchemy.", poolclass=pool.NullPool
    )

    try:
        async with connectable.connect() as connection:
            await connection.run_sync(_migrate)
    finally:
        await connectable.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
