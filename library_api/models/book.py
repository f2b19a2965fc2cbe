"""
Book Model

The catalog entry that orders reference. Orders keep their own copy of a
book's id, so deleting a book never cascades into existing orders.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from library_api.database import Base


class Book(Base):
    """
    Book model representing books in the catalog.

    Table: books

    Fields:
    - title: Book title (required)
    - author: Author name, matched exactly by the catalog filter
    - category: Category name, matched exactly by the catalog filter
    - price: Non-negative price with 2 decimal precision
    - quantity: Copies on hand (informational; orders do not decrement it)

    Example:
        book = Book(
            title="1984",
            author="George Orwell",
            category="Fiction",
            price=Decimal("12.99"),
            quantity=3,
        )
    """

    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_books_price_non_negative"),
        CheckConstraint("quantity >= 0", name="ck_books_quantity_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(500),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Author name"
    )

    category: Mapped[str] = mapped_column(
        String(100),
        index=True,
        nullable=False,
        comment="Catalog category"
    )

    # Numeric(10, 2): Decimal keeps order totals exact
    price: Mapped[Decimal] = mapped_column(
        Numeric(10, 2),
        nullable=False,
        comment="Book price"
    )

    quantity: Mapped[int] = mapped_column(
        Integer,
        default=0,
        nullable=False,
        comment="Copies on hand"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', price={self.price})"
