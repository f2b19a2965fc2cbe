"""
Repositories Package

Thin query objects around a SQLAlchemy session. Each one is constructed
per request with the session from `get_db`, so nothing here touches a
global connection.

- users.py: UserDirectory (resolve users by id or email, register)
- books.py: BookCatalog (resolve books, catalog CRUD and filtering)
- orders.py: OrderStore (create orders, full scan)
"""

from library_api.repositories.books import BookCatalog
from library_api.repositories.orders import OrderStore
from library_api.repositories.users import UserDirectory

__all__ = [
    "BookCatalog",
    "OrderStore",
    "UserDirectory",
]
