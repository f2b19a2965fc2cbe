"""
Books Router

Catalog endpoints:
- GET    /books        - all books
- GET    /books/{id}   - one book
- GET    /book         - books filtered by author and/or category
- POST   /books        - add a book
- PATCH  /books/{id}   - partial update
- DELETE /books/{id}   - remove a book

Changing or deleting a book does not touch existing orders: their totals
were fixed when they were placed, and a deleted book shows up as null in
the enriched order listing.
"""

import logging

from fastapi import APIRouter, HTTPException, Request, Response, status

from library_api.config import get_settings
from library_api.dependencies import BookFilters, Catalog
from library_api.models import Book
from library_api.schemas import (
    BookCreate,
    BookCreatedResponse,
    BookDetailResponse,
    BookListResponse,
    BookResponse,
    BookUpdate,
    MessageResponse,
)
from library_api.services.rate_limiter import limiter

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(
    tags=["Books"],
    responses={
        500: {"model": MessageResponse, "description": "Internal server error"},
    },
)


def get_book_or_404(catalog: Catalog, book_id: int, detail: str = "Book not found") -> Book:
    """Get a book by ID or raise 404."""
    book = catalog.find_by_id(book_id)
    if book is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
        )
    return book


@router.get(
    "/books",
    response_model=BookListResponse,
    summary="Get all books",
)
@limiter.limit(settings.rate_limit_default)
def list_books(request: Request, catalog: Catalog) -> BookListResponse:
    """List the whole catalog, ordered by id."""
    books = catalog.find_all()
    return BookListResponse(books=[BookResponse.model_validate(b) for b in books])


@router.get(
    "/books/{book_id}",
    response_model=BookDetailResponse,
    summary="Get a book by ID",
    responses={404: {"model": MessageResponse, "description": "Book not found"}},
)
@limiter.limit(settings.rate_limit_default)
def get_book(request: Request, book_id: int, catalog: Catalog) -> BookDetailResponse:
    book = get_book_or_404(catalog, book_id, detail="Book Not Found")
    return BookDetailResponse(book_data=BookResponse.model_validate(book))


@router.get(
    "/book",
    response_model=BookListResponse,
    summary="Get books by author and/or category",
)
@limiter.limit(settings.rate_limit_default)
def filter_books(
    request: Request,
    catalog: Catalog,
    filters: BookFilters,
) -> BookListResponse:
    """
    Filter the catalog by exact author and/or category.

    Without any filter this behaves like GET /books.
    """
    books = catalog.find_all(author=filters.author, category=filters.category)
    return BookListResponse(books=[BookResponse.model_validate(b) for b in books])


@router.post(
    "/books",
    response_model=BookCreatedResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a new book",
)
@limiter.limit(settings.rate_limit_write)
def create_book(
    request: Request,
    book_data: BookCreate,
    catalog: Catalog,
) -> BookCreatedResponse:
    book = catalog.add(Book(**book_data.model_dump()))
    logger.info(f"Book added: {book.id} '{book.title}'")
    return BookCreatedResponse(
        message="Book added",
        book_added=BookResponse.model_validate(book),
    )


@router.patch(
    "/books/{book_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Update a book by ID",
    responses={404: {"model": MessageResponse, "description": "Book not found"}},
)
@limiter.limit(settings.rate_limit_write)
def update_book(
    request: Request,
    book_id: int,
    book_data: BookUpdate,
    catalog: Catalog,
) -> Response:
    """
    Update only the fields present in the body.

    Explicit nulls are ignored: every book column is required.
    """
    book = get_book_or_404(catalog, book_id)
    changes = book_data.model_dump(exclude_unset=True, exclude_none=True)
    catalog.update(book, changes)
    logger.info(f"Book updated: {book_id} {sorted(changes)}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete(
    "/books/{book_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_202_ACCEPTED,
    summary="Delete a book by ID",
    responses={404: {"model": MessageResponse, "description": "Book not found"}},
)
@limiter.limit(settings.rate_limit_write)
def delete_book(request: Request, book_id: int, catalog: Catalog) -> MessageResponse:
    book = get_book_or_404(catalog, book_id)
    catalog.delete(book)
    logger.info(f"Book deleted: {book_id}")
    return MessageResponse(message="Book Deleted")
