"""
Translation between book DTOs and the Book entity.

Pure functions with no state and no side effects.
"""

from books_api.application.books.dtos import BookRequest, BookResponse
from books_api.domain.books.entities import Book
from books_api.domain.books.pricing import format_price


def to_entity(request: BookRequest) -> Book:
    """Build an unsaved Book from a request. The id stays unset."""
    return Book(name=request.name, author=request.author, price=request.price)


def to_response(book: Book) -> BookResponse:
    """Project a persisted Book onto the response shape."""
    return BookResponse(
        id=book.id,
        name=book.name,
        author=book.author,
        price=format_price(book.price),
    )
