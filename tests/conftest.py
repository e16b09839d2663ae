"""
Shared fixtures for the books test suite.

Repository and API tests run against a throwaway SQLite file.
Rate limiting is switched off so test volume never trips it.
"""

from collections.abc import Iterator
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine

from books_api.application.books.book_service import BookService
from books_api.infrastructure.books.book_repository import SqlBookRepository
from books_api.infrastructure.database import create_db_engine, init_schema
from books_api.interfaces.books.dependencies import get_book_service
from books_api.main import app
from books_api.shared.security.rate_limiting import limiter


@pytest.fixture(autouse=True)
def _disable_rate_limit() -> Iterator[None]:
    limiter.enabled = False
    yield
    limiter.enabled = True


@pytest.fixture
def engine(tmp_path) -> Iterator[Engine]:
    """Engine bound to a fresh SQLite file with the book table created."""
    db_engine = create_db_engine(f"sqlite:///{tmp_path / 'books.db'}")
    init_schema(db_engine)
    yield db_engine
    db_engine.dispose()


@pytest.fixture
def repository(engine: Engine) -> SqlBookRepository:
    return SqlBookRepository(engine)


@pytest.fixture
def client(repository: SqlBookRepository) -> Iterator[TestClient]:
    """Client wired to a real service over the temporary database."""
    app.dependency_overrides[get_book_service] = lambda: BookService(repository)
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def mock_service() -> MagicMock:
    return MagicMock(spec=BookService)


@pytest.fixture
def mocked_client(mock_service: MagicMock) -> Iterator[TestClient]:
    """Client whose service is a mock, for testing routing and error mapping."""
    app.dependency_overrides[get_book_service] = lambda: mock_service
    yield TestClient(app)
    app.dependency_overrides.clear()
