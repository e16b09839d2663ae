"""
Service: Book catalogue operations.

Operations:
    find_all_books  -> list[BookResponse]
    find_by_author  -> list[BookResponse]
    create_book     -> BookResponse
    update_book     -> BookResponse
    delete_book     -> None
Side effects: Writes to the BookRepository on create/update/delete.
Failure cases: BookNotFoundError (update), BookConflictError (update).
"""

import logging
from dataclasses import replace

from books_api.application.books.dtos import BookRequest, BookResponse
from books_api.application.books.mapper import to_entity, to_response
from books_api.domain.books.errors import BookNotFoundError
from books_api.domain.books.ports import BookRepository

logger = logging.getLogger(__name__)


class BookService:
    """Orchestrates reads and writes of book records.

    Holds no state between calls; everything lives behind the
    BookRepository port.
    """

    def __init__(self, book_repo: BookRepository) -> None:
        self._book_repo = book_repo

    def find_all_books(self) -> list[BookResponse]:
        """Return every stored book."""
        books = self._book_repo.list_all()
        logger.info("Listing all books: count=%d", len(books))
        return [to_response(book) for book in books]

    def find_by_author(self, author: str) -> list[BookResponse]:
        """Return books whose author matches exactly.

        Args:
            author: Author name, passed to the repository unchanged.

        Returns:
            Matching books, possibly empty.
        """
        books = self._book_repo.list_by_author(author)
        logger.info("Listing books by author=%s: count=%d", author, len(books))
        return [to_response(book) for book in books]

    def create_book(self, request: BookRequest) -> BookResponse:
        """Persist a new book and return it with its generated id."""
        saved = self._book_repo.save(to_entity(request))
        logger.info("Created book id=%s", saved.id)
        return to_response(saved)

    def update_book(self, book_id: str, request: BookRequest) -> BookResponse:
        """Overwrite name, author and price of an existing book.

        The stored row is the base of the write, so its id and
        version token carry over to the save.

        Args:
            book_id: Identifier of the book to update.
            request: New field values.

        Returns:
            The updated book.

        Raises:
            BookNotFoundError: If no book has this id.
            BookConflictError: If the book changed after it was read.
        """
        existing = self._book_repo.find_by_id(book_id)
        if existing is None:
            raise BookNotFoundError(book_id)

        updated = replace(
            existing,
            name=request.name,
            author=request.author,
            price=request.price,
        )
        saved = self._book_repo.save(updated)
        logger.info("Updated book id=%s version=%d", saved.id, saved.version)
        return to_response(saved)

    def delete_book(self, book_id: str) -> None:
        """Delete a book. Deleting a missing id succeeds without effect."""
        self._book_repo.delete_by_id(book_id)
        logger.info("Deleted book id=%s", book_id)
