"""
Order Pydantic Schemas

- OrderCreate: `{"user": id, "books": [id, ...]}`
- OrderResponse: a stored order with raw references
- EnrichedOrderResponse: an order with `user` and `books` replaced by the
  resolved records (null where a record no longer exists)

References are accepted as integers or strings. A string that is not an
integer id is kept as-is so the order service can report it as "not found"
rather than rejecting the whole body as malformed. Integers are strict:
JSON booleans and floats are rejected (422) instead of being coerced to
an id.
"""

from datetime import datetime
from typing import Annotated

from pydantic import Field, StrictInt

from library_api.schemas.book import BookResponse
from library_api.schemas.common import CamelModel, Money
from library_api.schemas.user import UserResponse

Reference = Annotated[StrictInt | str, Field(examples=[1])]


class OrderCreate(CamelModel):
    """
    Schema for placing an order.

    Duplicated book references are allowed; each one is charged.

    Example request body:
    {
        "user": 1,
        "books": [3, 7, 7]
    }
    """

    user: Reference = Field(..., description="Id of the ordering user")
    books: list[Reference] = Field(
        ...,
        min_length=1,
        description="Ids of the ordered books, in order",
        examples=[[3, 7]],
    )


class OrderResponse(CamelModel):
    """A stored order."""

    id: int = Field(..., description="Unique identifier")
    user: int = Field(..., description="Id of the ordering user")
    books: list[int] = Field(..., description="Ids of the ordered books")
    total_amount: Money = Field(..., description="Sum of book prices at order time")
    created_at: datetime = Field(..., description="When the order was placed")


class OrderPlacedResponse(CamelModel):
    """Body returned by POST /order."""

    message: str = Field(..., examples=["Order placed successfully"])
    order: OrderResponse


class EnrichedOrderResponse(CamelModel):
    """
    An order joined with its user and books.

    `books` has one entry per stored reference, in the same order.
    """

    id: int = Field(..., description="Unique identifier")
    user: UserResponse | None = Field(
        default=None,
        description="Ordering user, null if the account no longer exists",
    )
    books: list[BookResponse | None] = Field(
        ...,
        description="Ordered books, null where a book no longer exists",
    )
    total_amount: Money = Field(..., description="Sum of book prices at order time")
    created_at: datetime = Field(..., description="When the order was placed")
