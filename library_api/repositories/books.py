"""
Book catalog repository.

Resolution methods (`find_by_id`, `find_by_ids`) serve the order workflow;
the rest back the catalog endpoints.
"""

from collections.abc import Iterable
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from library_api.database import is_valid_id
from library_api.models import Book


class BookCatalog:
    """Resolves book identifiers and manages catalog entries."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_by_id(self, book_id: int) -> Book | None:
        if not is_valid_id(book_id):
            return None
        return self.db.get(Book, book_id)

    def find_by_ids(self, book_ids: Iterable[int]) -> list[Book]:
        """
        Set-membership query over book ids.

        Ids that cannot exist are skipped. Each matching book is returned
        once, however many times its id appears in `book_ids`. Callers that
        need multiplicity must map the result back onto their own reference
        list.
        """
        ids = {book_id for book_id in book_ids if is_valid_id(book_id)}
        if not ids:
            return []
        stmt = select(Book).where(Book.id.in_(ids))
        return list(self.db.execute(stmt).scalars().all())

    def find_all(
        self,
        author: str | None = None,
        category: str | None = None,
    ) -> list[Book]:
        """
        List books, optionally filtered by exact author and/or category.

        Filters combine with AND. Results are ordered by id.
        """
        stmt = select(Book)
        if author:
            stmt = stmt.where(Book.author == author)
        if category:
            stmt = stmt.where(Book.category == category)
        stmt = stmt.order_by(Book.id)
        return list(self.db.execute(stmt).scalars().all())

    def add(self, book: Book) -> Book:
        self.db.add(book)
        self.db.commit()
        self.db.refresh(book)
        return book

    def update(self, book: Book, changes: dict[str, Any]) -> Book:
        """Apply a partial update. Existing orders keep their stored totals."""
        for field, value in changes.items():
            setattr(book, field, value)
        self.db.commit()
        self.db.refresh(book)
        return book

    def delete(self, book: Book) -> None:
        self.db.delete(book)
        self.db.commit()
