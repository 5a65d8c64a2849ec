"""
Create the registry tables and optionally load the seed dataset.

Usage:
    python scripts/init_db.py
    python scripts/init_db.py --seed
"""

import argparse
import asyncio
import logging
import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import get_settings  # noqa: E402
from app.database import AsyncSessionLocal, async_engine, init_db  # noqa: E402
from app.datagen import seed  # noqa: E402

logger = logging.getLogger("init_db")


async def run(with_seed: bool) -> None:
    await init_db()
    logger.info("Tables created in %s", get_settings().database_url)
    if with_seed:
        async with AsyncSessionLocal() as session:
            await seed(session)
            await session.commit()
        logger.info("Seed data loaded")
    await async_engine.dispose()


def main():
    parser = argparse.ArgumentParser(description="Initialize the horse registry database")
    parser.add_argument(
        "--seed",
        action="store_true",
        help="Replace all rows with the seed dataset",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run(args.seed))


if __name__ == "__main__":
    main()
