"""
Adapter: Book repository.

Implements BookRepository port.
Reads and writes rows of the book table through SQLAlchemy Core.
"""

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Optional
from uuid import uuid4

from sqlalchemy import text
from sqlalchemy.engine import Engine

from books_api.domain.books.entities import Book
from books_api.domain.books.errors import BookConflictError, BookNotFoundError
from books_api.domain.books.pricing import format_price
from books_api.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)

_SELECT_COLUMNS = "SELECT id, name, author, price, version FROM book"


def _row_to_book(row) -> Book:
    """Convert a result row into a Book entity."""
    return Book(
        id=row[0],
        name=row[1],
        author=row[2],
        price=Decimal(row[3]) if row[3] is not None else None,
        version=row[4],
    )


class SqlBookRepository(BookRepository):
    """Stores books in the relational book table.

    Implements the BookRepository port defined in the domain layer.
    Updates are guarded by the row's version column.
    """

    def __init__(self, engine: Engine) -> None:
        self._engine = engine

    def list_all(self) -> list[Book]:
        """Return every stored book."""
        with self._engine.connect() as conn:
            rows = conn.execute(text(_SELECT_COLUMNS)).fetchall()
        return [_row_to_book(row) for row in rows]

    def list_by_author(self, author: str) -> list[Book]:
        """Return books whose author column equals the given value."""
        query = text(f"{_SELECT_COLUMNS} WHERE author = :author")
        with self._engine.connect() as conn:
            rows = conn.execute(query, {"author": author}).fetchall()
        return [_row_to_book(row) for row in rows]

    def find_by_id(self, book_id: str) -> Optional[Book]:
        """Return a book by its ID, or None if not found."""
        query = text(f"{_SELECT_COLUMNS} WHERE id = :id")
        with self._engine.connect() as conn:
            row = conn.execute(query, {"id": book_id}).fetchone()
        return _row_to_book(row) if row is not None else None

    def save(self, book: Book) -> Book:
        """Insert a new book or update an existing one.

        Args:
            book: Entity to persist. Without an id a new uuid is assigned.

        Returns:
            The persisted book with its current version.

        Raises:
            BookNotFoundError: If the row was deleted before the update.
            BookConflictError: If the stored version no longer matches.
        """
        if book.id is None:
            return self._insert(book)
        return self._update(book)

    def delete_by_id(self, book_id: str) -> None:
        """Remove the row with this id. No-op when it does not exist."""
        query = text("DELETE FROM book WHERE id = :id")
        with self._engine.begin() as conn:
            deleted = conn.execute(query, {"id": book_id}).rowcount

        if deleted == 0:
            logger.debug("No book with id=%s to delete.", book_id)

    def _insert(self, book: Book) -> Book:
        created = replace(book, id=str(uuid4()), version=1)
        query = text(
            """
            INSERT INTO book (id, name, author, price, version)
            VALUES (:id, :name, :author, :price, :version)
            """
        )
        with self._engine.begin() as conn:
            conn.execute(
                query,
                {
                    "id": created.id,
                    "name": created.name,
                    "author": created.author,
                    "price": format_price(created.price),
                    "version": created.version,
                },
            )

        logger.debug("Inserted book id=%s.", created.id)
        return created

    def _update(self, book: Book) -> Book:
        query = text(
            """
            UPDATE book
            SET name = :name, author = :author, price = :price,
                version = version + 1
            WHERE id = :id AND version = :version
            """
        )
        with self._engine.begin() as conn:
            updated = conn.execute(
                query,
                {
                    "id": book.id,
                    "name": book.name,
                    "author": book.author,
                    "price": format_price(book.price),
                    "version": book.version,
                },
            ).rowcount
            exists = updated > 0 or conn.execute(
                text("SELECT 1 FROM book WHERE id = :id"), {"id": book.id}
            ).first() is not None

        if not exists:
            raise BookNotFoundError(book.id)
        if updated == 0:
            logger.warning(
                "Stale write for book id=%s at version=%d.", book.id, book.version
            )
            raise BookConflictError(book.id)

        logger.debug("Updated book id=%s.", book.id)
        return replace(book, version=book.version + 1)
