"""
Create Database Tables Using SQLAlchemy

Creates the users, developers, availability and leads tables and seeds the
default developers, without starting the web server. Useful when preparing a
fresh MySQL database.
"""
import sys
from pathlib import Path

# Add parent directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent))

import sqlalchemy as sa

from config.settings import settings
from src.mentors.db.session import Database
from src.mentors.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def main():
    """Create all database tables and seed defaults."""
    setup_logging(settings)
    db = Database(settings)

    try:
        db.create_all_tables()
        inserted = db.seed_defaults()
        logger.info("developers_seed_checked", inserted=inserted)

        tables = sa.inspect(db.engine).get_table_names()
        logger.info("database_setup_complete", tables=sorted(tables))
    finally:
        db.dispose()


if __name__ == "__main__":
    main()
