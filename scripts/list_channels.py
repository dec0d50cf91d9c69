#!/usr/bin/env python3
"""List channels in the database with their publication counts."""

import asyncio
import sys
from pathlib import Path

# Add app directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv  # noqa: E402
from sqlalchemy import func, select  # noqa: E402

load_dotenv()

from app import database  # noqa: E402
from app.models import Channel, Publication  # noqa: E402
from app.utils.logging import configure_logging, get_logger  # noqa: E402

log = get_logger(__name__)


async def list_channels() -> None:
    """Print every channel and how many publications reference it."""
    if database.async_session_factory is None:
        print("ERROR: DATABASE_URL is not set")
        sys.exit(1)

    try:
        async with database.async_session_factory() as session:
            result = await session.execute(
                select(Channel, func.count(Publication.id))
                .outerjoin(Publication, Publication.channel_id == Channel.id)
                .group_by(Channel.id)
                .order_by(Channel.id)
            )
            rows = result.all()

        if not rows:
            print("No channels found in database")
            return

        print(f"Found {len(rows)} channel(s) in database:")
        print()
        for channel, publication_count in rows:
            deletable = "yes" if publication_count == 0 else "no"
            print(f"[{channel.id}] {channel.title} / {channel.username}")
            print(f"  Publications: {publication_count}  Deletable: {deletable}")
        log.info("channels_listed", count=len(rows))
    finally:
        if database.engine is not None:
            await database.engine.dispose()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(list_channels())
