"""
Shared Schema Building Blocks

- CamelModel: base for every API schema; JSON keys are camelCase
  (`totalAmount`, `isAdmin`) while Python attributes stay snake_case.
- Money: Decimal in Python, plain JSON number on the wire.
- MessageResponse: the `{"message": ...}` body used by every error and
  by the simple success responses.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

# Decimal keeps arithmetic exact; clients receive a number, not a string
Money = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class CamelModel(BaseModel):
    """Base schema: camelCase aliases, snake_case attributes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    """Plain message body."""

    message: str = Field(
        ...,
        description="Human-readable outcome",
        examples=["Book Deleted", "User not found"],
    )
