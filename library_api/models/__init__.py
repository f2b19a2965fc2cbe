"""
SQLAlchemy Models Package

Model Relationships:
- Order -> OrderItem: One-to-Many (ordered book references)
- Order -> User, OrderItem -> Book: plain id references, resolved at read time

Import all models here so they are available as
`from library_api.models import Book, Order, User` and so Alembic
discovers every table.
"""

from library_api.models.user import User
from library_api.models.book import Book
from library_api.models.order import Order, OrderItem

__all__ = [
    "User",
    "Book",
    "Order",
    "OrderItem",
]
