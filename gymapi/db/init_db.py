"""
Database initialization.

Creates all tables straight from the SQLModel metadata. Handy for local
SQLite databases; PostgreSQL deployments should run the Alembic migrations.
"""

import logging

from sqlmodel import SQLModel

from gymapi.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create every table that does not exist yet."""

    # Import all models so SQLModel.metadata has them
    import gymapi.db.base  # noqa: F401

    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created: %s", ", ".join(sorted(SQLModel.metadata.tables)))


if __name__ == "__main__":
    init_db()
