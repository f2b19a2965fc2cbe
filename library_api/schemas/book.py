"""
Book Pydantic Schemas

Request and response shapes for the catalog endpoints. Response wrappers
keep the key names clients already depend on (`books`, `Book Data`,
`bookAdded`).
"""

from datetime import datetime
from decimal import Decimal

from pydantic import Field, field_validator

from library_api.schemas.common import CamelModel, Money


class BookBase(CamelModel):
    """
    Base schema with shared book fields.

    Contains validation for:
    - Price (non-negative, 2 decimal places)
    - Quantity (non-negative)
    """

    title: str = Field(
        ...,
        min_length=1,
        max_length=500,
        description="Book title",
        examples=["1984", "Pride and Prejudice"],
    )

    author: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Author name",
        examples=["George Orwell"],
    )

    category: str = Field(
        ...,
        min_length=1,
        max_length=100,
        description="Catalog category",
        examples=["Fiction"],
    )

    price: Money = Field(
        ...,
        ge=0,  # free books allowed
        max_digits=10,
        decimal_places=2,
        description="Book price",
        examples=["12.99"],
    )

    quantity: int = Field(
        default=0,
        ge=0,
        description="Copies on hand",
        examples=[5],
    )

    @field_validator("title", "author", "category")
    @classmethod
    def text_must_not_be_empty(cls, v: str) -> str:
        """Reject whitespace-only text and strip the rest."""
        if not v.strip():
            raise ValueError("Value cannot be empty or whitespace")
        return v.strip()


class BookCreate(BookBase):
    """Schema for adding a book to the catalog."""
    pass


class BookUpdate(CamelModel):
    """
    Schema for updating an existing book.

    All fields are optional for PATCH-style updates.
    """

    title: str | None = Field(default=None, min_length=1, max_length=500)
    author: str | None = Field(default=None, min_length=1, max_length=255)
    category: str | None = Field(default=None, min_length=1, max_length=100)
    price: Decimal | None = Field(
        default=None,
        ge=0,
        max_digits=10,
        decimal_places=2,
    )
    quantity: int | None = Field(default=None, ge=0)


class BookResponse(BookBase):
    """Schema for book responses."""

    id: int = Field(..., description="Unique identifier")
    created_at: datetime = Field(..., description="When the book was added")
    updated_at: datetime = Field(..., description="When the book was last updated")


class BookListResponse(CamelModel):
    """`{"books": [...]}` wrapper for catalog listings."""

    books: list[BookResponse] = Field(..., description="Matching books")


class BookDetailResponse(CamelModel):
    """Single book lookup result."""

    book_data: BookResponse = Field(..., alias="Book Data")


class BookCreatedResponse(CamelModel):
    """Result of adding a book."""

    message: str = Field(..., examples=["Book added"])
    book_added: BookResponse = Field(..., description="The stored book")
