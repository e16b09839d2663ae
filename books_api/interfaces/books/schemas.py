"""
Pydantic schemas for the books API request/response contract.

Request fields are all optional: an absent field is stored as null.
Prices travel as text. The accepted format is published in the
OpenAPI document; the check itself runs when the router converts the
request into an application DTO, so a bad price gets the
{"error": ...} body instead of a schema validation error.
No business logic belongs here.
"""

from typing import Optional

from pydantic import BaseModel, Field

from books_api.domain.books.pricing import PRICE_PATTERN_TEXT


class BookRequestSchema(BaseModel):
    """Request schema for creating or updating a book."""

    name: Optional[str] = Field(default=None, description="Title of the book")
    author: Optional[str] = Field(default=None, description="Author name")
    price: Optional[str] = Field(
        default=None,
        description="Non-negative fixed-point price, e.g. \"9.99\"",
        examples=["9.99"],
        json_schema_extra={"pattern": PRICE_PATTERN_TEXT},
    )


class BookResponseSchema(BaseModel):
    """Response schema for a stored book."""

    id: str
    name: Optional[str] = None
    author: Optional[str] = None
    price: Optional[str] = None


class ErrorResponse(BaseModel):
    """Standard error response body."""

    error: str
    detail: Optional[str] = None


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    version: str
