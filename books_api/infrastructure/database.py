"""
Database engine construction and schema bootstrap.

Uses SQLAlchemy Core. Works against SQLite for local runs and
tests, and against PostgreSQL in deployment.
"""

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine

logger = logging.getLogger(__name__)

BOOK_TABLE_DDL = """
CREATE TABLE IF NOT EXISTS book (
    id      TEXT PRIMARY KEY,
    name    TEXT,
    author  TEXT,
    price   TEXT,
    version INTEGER NOT NULL DEFAULT 1
)
"""


def create_db_engine(url: str) -> Engine:
    """Build a SQLAlchemy engine for the given URL.

    Args:
        url: Database URL, e.g. "sqlite:///./books.db".

    Returns:
        A configured Engine.
    """
    if url.startswith("sqlite"):
        # Request threads share the engine
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


def init_schema(engine: Engine) -> None:
    """Create the book table if it does not exist yet."""
    with engine.begin() as conn:
        conn.execute(text(BOOK_TABLE_DDL))
    logger.info("Database schema ready.")
