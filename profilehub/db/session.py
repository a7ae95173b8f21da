"""
Database session management.

Provides the process-wide SQLModel engine and per-request sessions.
"""

from typing import Generator

from sqlalchemy.engine import Engine
from sqlmodel import Session, create_engine

from profilehub.core.config import settings


def build_engine(database_url: str) -> Engine:
    """Create an engine; SQLite gets the threading flag, servers get a pool."""
    if database_url.startswith("sqlite"):
        return create_engine(database_url, echo=settings.DEBUG, connect_args={"check_same_thread": False})
    return create_engine(
        database_url,
        echo=settings.DEBUG,  # Log SQL queries in debug mode
        pool_pre_ping=True,   # Verify connections before using
        pool_size=settings.DATABASE_POOL_SIZE,
        max_overflow=settings.DATABASE_MAX_OVERFLOW,
    )


engine = build_engine(settings.DATABASE_URL)


def get_db() -> Generator[Session, None, None]:
    """
    Dependency for FastAPI endpoints to get database session.

    Yields:
        SQLModel Session instance
    """
    with Session(engine) as session:
        yield session
