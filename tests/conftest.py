"""
pytest Fixtures for Library API Tests

For database tests, we use:
- session scope for the engine (expensive to create)
- function scope for sessions (each test runs in a transaction that is
  rolled back afterwards)

The app's get_db dependency is overridden so every request made through
the test client shares the test session.
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["DATABASE_URL"] = "sqlite:///./test_library.db"

from collections.abc import Generator
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from library_api.database import Base, get_db
from library_api.main import app
from library_api.models import Book, User
from library_api.repositories import BookCatalog, OrderStore, UserDirectory
from library_api.schemas import OrderResponse
from library_api.services.orders import OrderService
from library_api.services.security import hash_password

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory: fast, isolated, no external database needed.
# StaticPool keeps the single connection alive for the whole session;
# without it the in-memory database would disappear between connections.


@pytest.fixture(scope="session")
def engine():
    """Create a SQLite in-memory database engine with all tables."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is wrapped in a transaction that's rolled back,
    ensuring test isolation without needing to recreate tables.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """Create a test client that uses the test database session."""

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def order_service(db_session: Session) -> OrderService:
    """Order service wired to the test session."""
    return OrderService(
        orders=OrderStore(db_session),
        users=UserDirectory(db_session),
        books=BookCatalog(db_session),
    )


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================


@pytest.fixture
def sample_user(db_session: Session) -> User:
    """Create a sample user for testing."""
    user = User(
        name="John Doe",
        email="johndoe@example.com",
        hashed_password=hash_password("SecurePass123"),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def second_user(db_session: Session) -> User:
    """Create a second user for multi-order scenarios."""
    user = User(
        name="Jane Roe",
        email="janeroe@example.com",
        hashed_password=hash_password("SecurePass456"),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Create a sample book for testing."""
    book = Book(
        title="1984",
        author="George Orwell",
        category="Fiction",
        price=Decimal("12.99"),
        quantity=5,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def priced_books(db_session: Session) -> list[Book]:
    """Two books priced 50 and 60."""
    books = [
        Book(
            title="Book 1",
            author="Author 1",
            category="Fiction",
            price=Decimal("50.00"),
            quantity=2,
        ),
        Book(
            title="Book 2",
            author="Author 2",
            category="Science",
            price=Decimal("60.00"),
            quantity=1,
        ),
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)
    return books


@pytest.fixture
def catalog_books(db_session: Session) -> list[Book]:
    """A small catalog for filter tests."""
    books = [
        Book(title="1984", author="George Orwell", category="Fiction",
             price=Decimal("12.99"), quantity=5),
        Book(title="Animal Farm", author="George Orwell", category="Satire",
             price=Decimal("9.99"), quantity=3),
        Book(title="Emma", author="Jane Austen", category="Fiction",
             price=Decimal("8.99"), quantity=4),
    ]
    db_session.add_all(books)
    db_session.commit()
    for book in books:
        db_session.refresh(book)
    return books


@pytest.fixture
def sample_order(
    order_service: OrderService,
    sample_user: User,
    priced_books: list[Book],
) -> OrderResponse:
    """An order for both priced books (total 110)."""
    return order_service.place_order(
        sample_user.id,
        [book.id for book in priced_books],
    )
