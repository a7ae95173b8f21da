"""
Database initialization.

Creates all tables.
"""

import structlog
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from profilehub.db.session import engine as default_engine

logger = structlog.get_logger(__name__)


def init_db(engine: Engine = default_engine) -> None:
    """Create all SQLModel tables that do not exist yet."""
    # Import all models so SQLModel.metadata has them
    import profilehub.db.base  # noqa: F401

    SQLModel.metadata.create_all(engine)
    logger.info("Database tables created/verified", url=engine.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    init_db()
