"""
Domain-specific errors for the books bounded context.

All errors raised from the domain layer must be defined here.
Each carries a status code hint that the interface layer uses
when translating it into an HTTP response.
No framework imports allowed.
"""


class BookDomainError(Exception):
    """Base error for all books domain errors."""

    status_code: int = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class BookNotFoundError(BookDomainError):
    """Raised when an operation targets a book id that does not exist."""

    status_code = 404

    def __init__(self, book_id: str) -> None:
        super().__init__(f"No Book found by id: {book_id}")
        self.book_id = book_id


class InvalidPriceError(BookDomainError):
    """Raised when a price is not a non-negative fixed-point number."""

    status_code = 422

    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid price: {raw}")
        self.raw = raw


class BookConflictError(BookDomainError):
    """Raised when a book changed between being read and being written."""

    status_code = 409

    def __init__(self, book_id: str) -> None:
        super().__init__(f"Book {book_id} was modified concurrently")
        self.book_id = book_id
