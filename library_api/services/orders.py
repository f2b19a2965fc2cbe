"""
Order Service

Places orders and builds the enriched order listing.

Placing an order
================
1. Resolve the user reference (UserNotFoundError if absent)
2. Resolve every book reference with one set-membership query, then check
   each requested reference against the result (BooksNotFoundError if any
   is missing). Repeated references are fine: each one resolves to the
   same book and is charged again.
3. total = sum of prices over the requested references, in order
4. Write the order through the OrderStore

Consistency
===========
Validation and the write are separate steps with no lock between them. If
a book's price changes after step 2, the order is stored with the price
read in step 2. Orders are point-in-time snapshots and totals are never
recomputed.

Errors
======
Every SQLAlchemyError raised by a store is re-raised as
StoreUnavailableError. There are no retries.
"""

import logging
from collections.abc import Sequence
from decimal import Decimal

from sqlalchemy.exc import SQLAlchemyError

from library_api.database import is_valid_id
from library_api.models import Book, Order, User
from library_api.repositories import BookCatalog, OrderStore, UserDirectory
from library_api.schemas.book import BookResponse
from library_api.schemas.order import EnrichedOrderResponse, OrderResponse
from library_api.schemas.user import UserResponse

logger = logging.getLogger(__name__)


# =============================================================================
# Errors
# =============================================================================
class OrderError(Exception):
    """Base class for order workflow failures."""


class UserNotFoundError(OrderError):
    """The user reference does not resolve to an account."""

    def __init__(self, user_ref: int | str) -> None:
        super().__init__("User not found")
        self.user_ref = user_ref


class BooksNotFoundError(OrderError):
    """At least one book reference does not resolve to a catalog entry."""

    def __init__(self, missing: list[int | str]) -> None:
        super().__init__("Books not found")
        self.missing = missing


class StoreUnavailableError(OrderError):
    """The storage layer failed while handling the request."""


# =============================================================================
# Helpers
# =============================================================================
def parse_reference(ref: int | str) -> int | None:
    """
    Convert a client-supplied reference to an integer id.

    Returns None for anything that cannot be an id, so callers treat it
    like a reference to a missing record.

    Example:
        >>> parse_reference("42")
        42
        >>> parse_reference("nonexistent") is None
        True
        >>> parse_reference(10**20) is None
        True
    """
    if isinstance(ref, bool):
        return None
    if isinstance(ref, int):
        value = ref
    else:
        try:
            value = int(ref.strip())
        except (AttributeError, ValueError):
            return None
    return value if is_valid_id(value) else None


def to_order_response(order: Order) -> OrderResponse:
    """Build the API view of a stored order."""
    return OrderResponse(
        id=order.id,
        user=order.user_id,
        books=order.book_ids,
        total_amount=order.total_amount,
        created_at=order.created_at,
    )


# =============================================================================
# Service
# =============================================================================
class OrderService:
    """
    Order placement and enriched listing.

    The service is built per request from stores that share one session;
    it keeps no state of its own.
    """

    def __init__(
        self,
        orders: OrderStore,
        users: UserDirectory,
        books: BookCatalog,
    ) -> None:
        self.orders = orders
        self.users = users
        self.books = books

    def place_order(
        self,
        user_ref: int | str,
        book_refs: Sequence[int | str],
    ) -> OrderResponse:
        """
        Validate the references, compute the total and store the order.

        Args:
            user_ref: Id of the ordering user
            book_refs: Non-empty list of book ids; duplicates allowed

        Returns:
            The stored order, including its generated id

        Raises:
            ValueError: If book_refs is empty
            UserNotFoundError: If the user does not exist
            BooksNotFoundError: If any book reference does not exist
            StoreUnavailableError: If the database fails
        """
        if not book_refs:
            raise ValueError("An order needs at least one book")

        try:
            user = self._resolve_user(user_ref)
            book_ids, prices = self._resolve_books(book_refs)

            total = sum(prices, Decimal("0"))
            order = self.orders.create(user.id, book_ids, total)
        except SQLAlchemyError as exc:
            logger.error(f"Order store unavailable while placing order: {exc}")
            raise StoreUnavailableError(str(exc)) from exc

        logger.info(
            f"Order {order.id} placed for user {user.id}: "
            f"{len(book_ids)} books, total {total}"
        )
        return to_order_response(order)

    def list_orders_enriched(self) -> list[EnrichedOrderResponse]:
        """
        Return every stored order joined with its user and books.

        Orders come back in insertion order. Users and books are loaded
        with one batched query each. A reference that no longer resolves
        becomes null in its slot; it never aborts the listing.

        Raises:
            StoreUnavailableError: If the database fails
        """
        try:
            orders = self.orders.find_all()
            users = {
                user.id: user
                for user in self.users.find_by_ids(o.user_id for o in orders)
            }
            books = {
                book.id: book
                for book in self.books.find_by_ids(
                    book_id for o in orders for book_id in o.book_ids
                )
            }
        except SQLAlchemyError as exc:
            logger.error(f"Order store unavailable while listing orders: {exc}")
            raise StoreUnavailableError(str(exc)) from exc

        return [self._enrich(order, users, books) for order in orders]

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------
    def _resolve_user(self, user_ref: int | str) -> User:
        user_id = parse_reference(user_ref)
        user = self.users.find_by_id(user_id) if user_id is not None else None
        if user is None:
            logger.info(f"Order rejected: user {user_ref!r} not found")
            raise UserNotFoundError(user_ref)
        return user

    def _resolve_books(
        self,
        book_refs: Sequence[int | str],
    ) -> tuple[list[int], list[Decimal]]:
        """Map each requested reference to its book; return ids and prices in order."""
        book_ids = [parse_reference(ref) for ref in book_refs]
        found = {
            book.id: book
            for book in self.books.find_by_ids(i for i in book_ids if i is not None)
        }

        missing = [
            ref for ref, book_id in zip(book_refs, book_ids) if book_id not in found
        ]
        if missing:
            logger.info(f"Order rejected: books {missing!r} not found")
            raise BooksNotFoundError(missing)

        return book_ids, [found[book_id].price for book_id in book_ids]

    @staticmethod
    def _enrich(
        order: Order,
        users: dict[int, User],
        books: dict[int, Book],
    ) -> EnrichedOrderResponse:
        user = users.get(order.user_id)
        return EnrichedOrderResponse(
            id=order.id,
            user=UserResponse.model_validate(user) if user else None,
            books=[
                BookResponse.model_validate(books[book_id]) if book_id in books else None
                for book_id in order.book_ids
            ],
            total_amount=order.total_amount,
            created_at=order.created_at,
        )
