"""
Create the catalog tables on the configured database.

Usage:
    python scripts/create_tables.py [--drop]

Uses the sync engine (DATABASE_SYNC_URL). Safe to re-run: existing
tables are left alone unless --drop is given.
"""

import argparse
import logging
import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import LOG_LEVEL  # noqa: E402
from database import Base, sync_engine  # noqa: E402
from logging_config import setup_logging  # noqa: E402
import models  # noqa: E402,F401  registers the mapped tables

logger = logging.getLogger("create_tables")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create catalog tables")
    parser.add_argument(
        "--drop", action="store_true", help="Drop existing catalog tables first"
    )
    return parser.parse_args()


def main():
    setup_logging(LOG_LEVEL)
    args = parse_args()
    if args.drop:
        Base.metadata.drop_all(bind=sync_engine)
        logger.info("Dropped tables on %s", sync_engine.url.render_as_string())
    Base.metadata.create_all(bind=sync_engine)
    logger.info("Created tables: %s", ", ".join(sorted(Base.metadata.tables)))


if __name__ == "__main__":
    main()
