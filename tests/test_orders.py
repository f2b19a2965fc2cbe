"""
Tests for Order Endpoints

Tests cover:
- POST /api/order: success, unknown user, unknown books, malformed body
- GET /api/orders: enriched listing
- Storage failures reported as 500
"""

import pytest
from fastapi import status
from sqlalchemy.exc import OperationalError

from library_api.dependencies import get_order_service
from library_api.main import app
from library_api.repositories import BookCatalog, OrderStore, UserDirectory
from library_api.services.orders import OrderService


class UnreachableOrderStore(OrderStore):
    def create(self, user_id, book_ids, total_amount):
        raise OperationalError("INSERT INTO orders", {}, Exception("database is down"))

    def find_all(self):
        raise OperationalError("SELECT orders", {}, Exception("database is down"))


@pytest.fixture
def unreachable_store(client, db_session):
    """Route the order endpoints to a store that always fails."""

    def override_get_order_service():
        return OrderService(
            orders=UnreachableOrderStore(db_session),
            users=UserDirectory(db_session),
            books=BookCatalog(db_session),
        )

    app.dependency_overrides[get_order_service] = override_get_order_service
    yield
    app.dependency_overrides.pop(get_order_service, None)


class TestPlaceOrder:
    """Tests for POST /api/order"""

    def test_place_order_success(self, client, sample_user, priced_books):
        """Test placing an order with valid references."""
        book_ids = [book.id for book in priced_books]

        response = client.post(
            "/api/order",
            json={"user": sample_user.id, "books": book_ids},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["message"] == "Order placed successfully"
        assert data["order"]["user"] == sample_user.id
        assert data["order"]["books"] == book_ids
        assert data["order"]["totalAmount"] == 110.0
        assert "id" in data["order"]
        assert "createdAt" in data["order"]

    def test_place_order_with_string_ids(self, client, sample_user, priced_books):
        response = client.post(
            "/api/order",
            json={"user": str(sample_user.id), "books": [str(priced_books[1].id)]},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["order"]["totalAmount"] == 60.0

    def test_place_order_duplicate_books(self, client, sample_user, priced_books):
        book_1 = priced_books[0]

        response = client.post(
            "/api/order",
            json={"user": sample_user.id, "books": [book_1.id, book_1.id]},
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["order"]["totalAmount"] == 100.0

    def test_place_order_user_not_found(self, client, priced_books):
        response = client.post(
            "/api/order",
            json={"user": 99999, "books": [priced_books[0].id]},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"message": "User not found"}

    def test_user_checked_before_books(self, client):
        """Unknown user wins over unknown books."""
        response = client.post(
            "/api/order",
            json={"user": 99999, "books": ["nonexistent"]},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["message"] == "User not found"

    def test_place_order_book_not_found(self, client, sample_user, priced_books):
        response = client.post(
            "/api/order",
            json={"user": sample_user.id, "books": [priced_books[0].id, "nonexistent"]},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"message": "Books not found"}

    @pytest.mark.parametrize("user_ref", [10**20, "99999999999999999999"])
    def test_place_order_user_id_out_of_range(self, client, priced_books, user_ref):
        response = client.post(
            "/api/order",
            json={"user": user_ref, "books": [priced_books[0].id]},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"message": "User not found"}

    def test_place_order_book_id_out_of_range(self, client, sample_user, priced_books):
        response = client.post(
            "/api/order",
            json={"user": sample_user.id, "books": [priced_books[0].id, 10**20]},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"message": "Books not found"}

    @pytest.mark.parametrize(
        "body",
        [
            {"user": True, "books": [1]},
            {"user": 1, "books": [True]},
            {"user": 1, "books": [1.5]},
        ],
    )
    def test_place_order_rejects_non_integer_numbers(
        self, client, sample_user, priced_books, body
    ):
        """Booleans and floats are never coerced into ids."""
        response = client.post("/api/order", json=body)

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY
        assert client.get("/api/orders").json() == []

    def test_rejected_order_is_not_stored(self, client, sample_user, priced_books):
        client.post("/api/order", json={"user": sample_user.id, "books": [99999]})
        client.post("/api/order", json={"user": 99999, "books": [priced_books[0].id]})

        response = client.get("/api/orders")

        assert response.json() == []

    def test_place_order_empty_books(self, client, sample_user):
        response = client.post(
            "/api/order",
            json={"user": sample_user.id, "books": []},
        )

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_place_order_missing_fields(self, client):
        response = client.post("/api/order", json={"books": [1]})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_place_order_store_unavailable(
        self, client, unreachable_store, sample_user, priced_books
    ):
        response = client.post(
            "/api/order",
            json={"user": sample_user.id, "books": [priced_books[0].id]},
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "database is down" in response.json()["message"]


class TestListOrders:
    """Tests for GET /api/orders"""

    def test_list_orders_empty(self, client):
        response = client.get("/api/orders")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_orders_enriched(self, client, sample_order, sample_user):
        response = client.get("/api/orders")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1

        order = data[0]
        assert order["id"] == sample_order.id
        assert order["totalAmount"] == 110.0
        assert order["user"]["id"] == sample_user.id
        assert order["user"]["name"] == "John Doe"
        assert "hashedPassword" not in order["user"]
        assert "password" not in order["user"]
        assert [book["title"] for book in order["books"]] == ["Book 1", "Book 2"]
        assert [book["price"] for book in order["books"]] == [50.0, 60.0]

    def test_list_orders_after_placing(self, client, sample_user, second_user, priced_books):
        book_1, book_2 = priced_books
        client.post("/api/order", json={"user": sample_user.id, "books": [book_1.id]})
        client.post(
            "/api/order",
            json={"user": second_user.id, "books": [book_2.id, book_1.id]},
        )

        data = client.get("/api/orders").json()

        assert len(data) == 2
        assert data[0]["user"]["email"] == "johndoe@example.com"
        assert data[1]["user"]["email"] == "janeroe@example.com"
        assert [book["id"] for book in data[1]["books"]] == [book_2.id, book_1.id]
        assert data[1]["totalAmount"] == 110.0

    def test_deleted_book_is_null(self, client, sample_order, priced_books):
        client.delete(f"/api/books/{priced_books[1].id}")

        order = client.get("/api/orders").json()[0]

        assert order["books"][0]["title"] == "Book 1"
        assert order["books"][1] is None
        assert order["totalAmount"] == 110.0

    def test_list_orders_store_unavailable(self, client, unreachable_store):
        response = client.get("/api/orders")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "database is down" in response.json()["message"]
