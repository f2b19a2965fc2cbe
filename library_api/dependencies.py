"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.

Every collaborator of the order workflow is built here per request from
the request's database session. Routes never construct stores themselves,
and tests can swap any of them through `app.dependency_overrides`.
"""

from typing import Annotated

from fastapi import Depends, Query
from sqlalchemy.orm import Session

from library_api.database import get_db
from library_api.repositories import BookCatalog, OrderStore, UserDirectory
from library_api.services.orders import OrderService

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
#   def list_books(db: DbSession):
# instead of
#   def list_books(db: Session = Depends(get_db)):

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Stores and Services
# =============================================================================
def get_user_directory(db: DbSession) -> UserDirectory:
    return UserDirectory(db)


def get_book_catalog(db: DbSession) -> BookCatalog:
    return BookCatalog(db)


def get_order_service(db: DbSession) -> OrderService:
    """Build the order service around this request's session."""
    return OrderService(
        orders=OrderStore(db),
        users=UserDirectory(db),
        books=BookCatalog(db),
    )


Users = Annotated[UserDirectory, Depends(get_user_directory)]
Catalog = Annotated[BookCatalog, Depends(get_book_catalog)]
Orders = Annotated[OrderService, Depends(get_order_service)]


# =============================================================================
# Book Filters
# =============================================================================
class BookFilterParams:
    """
    Exact-match filters for the catalog listing.

    Both parameters are optional and combine with AND.

    Usage:
        GET /api/book?author=George%20Orwell
        GET /api/book?category=Fiction&author=George%20Orwell
    """

    def __init__(
        self,
        author: str | None = Query(
            default=None,
            min_length=1,
            max_length=255,
            description="Filter by author name (exact match)",
            examples=["George Orwell"],
        ),
        category: str | None = Query(
            default=None,
            min_length=1,
            max_length=100,
            description="Filter by category (exact match)",
            examples=["Fiction"],
        ),
    ) -> None:
        self.author = author
        self.category = category


BookFilters = Annotated[BookFilterParams, Depends()]
