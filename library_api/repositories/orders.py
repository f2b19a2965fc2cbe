"""
Order store.

Orders are written once and never updated. `find_all` returns them in
insertion order (ascending id) with their book references loaded.
"""

from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy import select
from sqlalchemy.orm import Session, selectinload

from library_api.models import Order, OrderItem


class OrderStore:
    """Persists orders and their ordered book references."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def create(
        self,
        user_id: int,
        book_ids: Sequence[int],
        total_amount: Decimal,
    ) -> Order:
        """
        Store a new order and return it with its generated id.

        The order and all of its items are written in a single commit.
        On failure the session is rolled back and the error propagates.
        """
        order = Order(
            user_id=user_id,
            total_amount=total_amount,
            items=[
                OrderItem(position=position, book_id=book_id)
                for position, book_id in enumerate(book_ids)
            ],
        )
        try:
            self.db.add(order)
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(order)
        return order

    def find_all(self) -> list[Order]:
        stmt = (
            select(Order)
            .options(selectinload(Order.items))
            .order_by(Order.id)
        )
        return list(self.db.execute(stmt).scalars().all())
