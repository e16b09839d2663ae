"""
Data Transfer Objects for the books application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class BookRequest:
    """Input DTO for creating or updating a book.

    Every field is optional; absent fields are stored as null.

    Attributes:
        name: Title of the book.
        author: Author name.
        price: Parsed fixed-point price.
    """

    name: Optional[str] = None
    author: Optional[str] = None
    price: Optional[Decimal] = None


@dataclass(frozen=True)
class BookResponse:
    """Output DTO mirroring a persisted book field for field.

    Attributes:
        id: Unique identifier of the book.
        name: Title of the book.
        author: Author name.
        price: Canonical price text.
    """

    id: str
    name: Optional[str]
    author: Optional[str]
    price: Optional[str]
