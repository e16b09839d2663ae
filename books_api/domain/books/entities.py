"""
Domain entities for the books bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Book:
    """A persisted book row.

    Attributes:
        id: Server-generated unique identifier. None until first persisted.
        name: Title of the book.
        author: Author name, matched exactly by author lookups.
        price: Fixed-point price, or None when absent.
        version: Optimistic concurrency token, bumped on every update.
    """

    id: Optional[str] = None
    name: Optional[str] = None
    author: Optional[str] = None
    price: Optional[Decimal] = None
    version: int = 0
