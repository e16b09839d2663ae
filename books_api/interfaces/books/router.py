"""
FastAPI router for the books bounded context.

All routes delegate to BookService. No business logic here.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Path, Response

from books_api.application.books.book_service import BookService
from books_api.application.books.dtos import BookRequest, BookResponse
from books_api.domain.books.pricing import parse_price
from books_api.interfaces.books.dependencies import get_book_service
from books_api.interfaces.books.schemas import (
    BookRequestSchema,
    BookResponseSchema,
    ErrorResponse,
)

router = APIRouter(prefix="/books", tags=["books"])


def _to_command(request: BookRequestSchema) -> BookRequest:
    return BookRequest(
        name=request.name,
        author=request.author,
        price=parse_price(request.price),
    )


def _to_schema(result: BookResponse) -> BookResponseSchema:
    return BookResponseSchema(
        id=result.id,
        name=result.name,
        author=result.author,
        price=result.price,
    )


@router.get(
    "",
    response_model=list[BookResponseSchema],
    summary="Get the list of all books",
    description="Returns a list of all the books in the database.",
)
def find_all_books(
    service: BookService = Depends(get_book_service),
) -> list[BookResponseSchema]:
    """List every book."""
    return [_to_schema(r) for r in service.find_all_books()]


@router.get(
    "/author/{author}",
    response_model=list[BookResponseSchema],
    summary="Get the list of books by author",
    description="Returns all the books in the database by this exact author.",
)
def find_by_author(
    author: str,
    service: BookService = Depends(get_book_service),
) -> list[BookResponseSchema]:
    """List books by author. Unknown authors yield an empty list."""
    return [_to_schema(r) for r in service.find_by_author(author)]


@router.post(
    "",
    response_model=BookResponseSchema,
    responses={422: {"model": ErrorResponse}},
    summary="Create a new book",
    description="Stores a new book and returns it with its generated id.",
)
def create_book(
    request: BookRequestSchema,
    service: BookService = Depends(get_book_service),
) -> BookResponseSchema:
    """Create a book."""
    return _to_schema(service.create_book(_to_command(request)))


@router.put(
    "/{book_id}",
    response_model=BookResponseSchema,
    responses={
        404: {"model": ErrorResponse, "description": "Book by that ID not found"},
        409: {"model": ErrorResponse, "description": "Book changed concurrently"},
        422: {"model": ErrorResponse},
    },
    summary="Update an existing book by its ID",
)
def update_book(
    request: BookRequestSchema,
    book_id: str = Path(..., description="ID of the book to be updated"),
    service: BookService = Depends(get_book_service),
) -> BookResponseSchema:
    """Overwrite name, author and price of a book."""
    return _to_schema(service.update_book(book_id, _to_command(request)))


@router.delete(
    "/{book_id}",
    response_class=Response,
    summary="Delete an existing book by its ID",
    description="Deleting an id that does not exist also succeeds.",
)
def delete_book(
    book_id: str = Path(..., description="ID of the book to be deleted"),
    service: BookService = Depends(get_book_service),
) -> Response:
    """Delete a book."""
    service.delete_book(book_id)
    return Response(status_code=200)
