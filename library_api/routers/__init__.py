"""
API Routers Package

Router Structure:
- users.py: /api/register, /api/login
- books.py: /api/books/*, /api/book
- orders.py: /api/order, /api/orders

Each router is imported and registered in main.py under the /api prefix.
"""

from library_api.routers.books import router as books_router
from library_api.routers.orders import router as orders_router
from library_api.routers.users import router as users_router

__all__ = [
    "books_router",
    "orders_router",
    "users_router",
]
