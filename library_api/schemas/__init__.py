"""
Pydantic Schemas Package

This package contains Pydantic models for request/response validation.

WHY Separate Schemas from SQLAlchemy Models?
============================================
1. Security: Control exactly what data is exposed in API responses
2. Validation: Different rules for create vs update vs response
3. Decoupling: Database schema can evolve independently of API

Schema Naming Convention:
- XxxCreate: Fields required when creating a new record
- XxxUpdate: Fields allowed when updating (all optional)
- XxxResponse: Fields returned in API responses
"""

from library_api.schemas.book import (
    BookBase,
    BookCreate,
    BookCreatedResponse,
    BookDetailResponse,
    BookListResponse,
    BookResponse,
    BookUpdate,
)
from library_api.schemas.common import CamelModel, MessageResponse, Money
from library_api.schemas.order import (
    EnrichedOrderResponse,
    OrderCreate,
    OrderPlacedResponse,
    OrderResponse,
)
from library_api.schemas.user import (
    LoginRequest,
    LoginResponse,
    UserCreate,
    UserResponse,
)

__all__ = [
    # Shared
    "CamelModel",
    "MessageResponse",
    "Money",
    # Book schemas
    "BookBase",
    "BookCreate",
    "BookUpdate",
    "BookResponse",
    "BookListResponse",
    "BookDetailResponse",
    "BookCreatedResponse",
    # User schemas
    "UserCreate",
    "UserResponse",
    "LoginRequest",
    "LoginResponse",
    # Order schemas
    "OrderCreate",
    "OrderResponse",
    "OrderPlacedResponse",
    "EnrichedOrderResponse",
]
