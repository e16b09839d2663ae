"""
Port interfaces (ABCs) for the books bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from books_api.domain.books.entities import Book


class BookRepository(ABC):
    """Port for persisting and retrieving book rows."""

    @abstractmethod
    def list_all(self) -> list[Book]:
        """Return every stored book. Order is implementation-defined."""
        raise NotImplementedError

    @abstractmethod
    def list_by_author(self, author: str) -> list[Book]:
        """Return books whose author matches exactly.

        Returns an empty list, not an error, when nothing matches.
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, book_id: str) -> Optional[Book]:
        """Return a book by its ID, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def save(self, book: Book) -> Book:
        """Insert a book without an id, or update the row matching its id.

        Args:
            book: Entity to persist. An unset id means insert.

        Returns:
            The persisted row, with a generated id on insert.

        Raises:
            BookNotFoundError: If the row to update no longer exists.
            BookConflictError: If the row changed since it was read.
        """
        raise NotImplementedError

    @abstractmethod
    def delete_by_id(self, book_id: str) -> None:
        """Remove the row if present. Missing ids are a silent no-op."""
        raise NotImplementedError
