"""Create the Threadboard tables in the configured database."""
from __future__ import annotations

import argparse
import logging

from threadboard.core.logging_config import configure_logging
from threadboard.core.settings import settings
from threadboard.db.session import create_tables, drop_tables

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(description="Create (or recreate) the database tables")
    parser.add_argument(
        "--drop-tables",
        action="store_true",
        help="Drop every table before creating them again.",
    )
    args = parser.parse_args()

    configure_logging()
    if args.drop_tables:
        drop_tables()
        logger.info("Dropped all tables")
    create_tables()
    logger.info("Database initialized at %s", settings.database_url.split("@")[-1])


if __name__ == "__main__":
    main()
