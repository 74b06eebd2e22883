#!/usr/bin/env python3
"""Create the message board schema and optionally seed it.

Usage:
    python scripts/init_db.py [--database-url URL] [--seed] [--force-seed]

--seed only seeds an empty table; --force-seed always adds the seed
messages, so running it twice leaves two copies of each.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from message_board.core.config import get_settings  # noqa: E402
from message_board.core.database import Database  # noqa: E402
from message_board.models.message import Message  # noqa: E402
from message_board.utils.logging import get_logger, setup_logging  # noqa: E402

logger = get_logger(__name__)


async def bootstrap(
    database_url: str, seed: bool = False, force_seed: bool = False
) -> List[Message]:
    """Create tables, seed if requested, and return the stored messages."""
    database = Database(database_url)
    try:
        await database.init()
        async with database.message_store() as store:
            existing = await store.list_messages()
            if force_seed or (seed and not existing):
                await store.initialize_with_seed_data()
                logger.info("seeded_messages", database_url=database_url)
            elif seed:
                logger.info(
                    "seed_skipped", reason="table not empty", existing=len(existing)
                )
            return await store.list_messages()
    finally:
        await database.close()


def main(argv: Optional[List[str]] = None) -> int:
    settings = get_settings()
    parser = argparse.ArgumentParser(description="Initialize the message board database")
    parser.add_argument(
        "--database-url",
        default=settings.database_url,
        help=f"SQLAlchemy async URL (default: {settings.database_url})",
    )
    parser.add_argument(
        "--seed",
        action="store_true",
        default=settings.seed_on_init,
        help="Insert seed messages if the table is empty",
    )
    parser.add_argument(
        "--force-seed",
        action="store_true",
        help="Insert seed messages even if the table already has rows",
    )
    args = parser.parse_args(argv)

    setup_logging(settings.log_level, settings.log_to_file, settings.log_dir)

    messages = asyncio.run(
        bootstrap(args.database_url, seed=args.seed, force_seed=args.force_seed)
    )
    print(f"{len(messages)} message(s) in {args.database_url}")
    for message in messages:
        print(f"  [{message.id}] {message.text}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
