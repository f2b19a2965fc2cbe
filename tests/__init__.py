"""
Test Suite for Library API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_order_service.py: OrderService against a real session
- test_orders.py: /api/order and /api/orders endpoints
- test_books.py: catalog endpoints
- test_users.py: registration and login
- test_app.py: root, health and error formatting

Running Tests:
    pytest
    pytest tests/test_orders.py
    pytest -v
"""
