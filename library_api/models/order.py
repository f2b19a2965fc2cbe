"""
Order Model

An order links one user to an ordered list of book references and stores
the total computed when it was placed.

WHY a full OrderItem class instead of an association Table?
===========================================================
A plain association table can only hold (order_id, book_id) pairs, which
loses both the requested order and repeated books. OrderItem carries a
`position` column, so [B1, B1, B2] is stored as three rows and read back
in the same sequence.

References are plain integers, not foreign keys. An order owns copies of
the identifiers; they are resolved against the catalog at read time and
may point at records that no longer exist.
"""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, Numeric, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from library_api.database import Base


class Order(Base):
    """
    Order model. Immutable once stored.

    Table: orders

    Invariant:
        total_amount == sum of the referenced books' prices at creation time.
        It is never recomputed, even if a book's price changes later.
    """

    __tablename__ = "orders"
    __table_args__ = (
        CheckConstraint("total_amount >= 0", name="ck_orders_total_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    user_id: Mapped[int] = mapped_column(
        Integer,
        index=True,
        nullable=False,
        comment="Id of the ordering user (not a foreign key)"
    )

    # 16 integer digits: book prices have at most 8, so even 10**7 copies
    # of the most expensive book fit
    total_amount: Mapped[Decimal] = mapped_column(
        Numeric(18, 2),
        nullable=False,
        comment="Sum of book prices when the order was placed"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    items: Mapped[list["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.position",
    )

    @property
    def book_ids(self) -> list[int]:
        """Book references in the order they were requested."""
        return [item.book_id for item in self.items]

    def __repr__(self) -> str:
        return (
            f"Order(id={self.id}, user_id={self.user_id}, "
            f"total_amount={self.total_amount})"
        )


class OrderItem(Base):
    """One book reference inside an order."""

    __tablename__ = "order_items"

    order_id: Mapped[int] = mapped_column(
        ForeignKey("orders.id", ondelete="CASCADE"),
        primary_key=True,
    )

    # 0-based index within the order's book list
    position: Mapped[int] = mapped_column(Integer, primary_key=True)

    book_id: Mapped[int] = mapped_column(
        Integer,
        index=True,
        nullable=False,
        comment="Id of the referenced book (not a foreign key)"
    )

    order: Mapped["Order"] = relationship("Order", back_populates="items")

    def __repr__(self) -> str:
        return (
            f"OrderItem(order_id={self.order_id}, position={self.position}, "
            f"book_id={self.book_id})"
        )
