"""
Dependency injection for the books bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into the service via constructor injection.
These are the composition root for the books context.
"""

from functools import lru_cache

from sqlalchemy.engine import Engine

from books_api.application.books.book_service import BookService
from books_api.core.config import settings
from books_api.infrastructure.books.book_repository import SqlBookRepository
from books_api.infrastructure.database import create_db_engine, init_schema


@lru_cache(maxsize=1)
def get_db_engine() -> Engine:
    """Build the shared engine once and make sure the schema exists."""
    engine = create_db_engine(settings.database_url)
    init_schema(engine)
    return engine


def dispose_db_engine() -> None:
    """Close pooled connections if the engine was ever created."""
    if get_db_engine.cache_info().currsize:
        get_db_engine().dispose()
        get_db_engine.cache_clear()


def get_book_service() -> BookService:
    """Build BookService with its infrastructure dependencies."""
    return BookService(book_repo=SqlBookRepository(engine=get_db_engine()))
