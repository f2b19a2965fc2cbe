#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample data for development.

USAGE:
    # From the project root with the virtualenv active
    python scripts/seed_data.py

This script:
1. Connects to the database using app settings
2. Clears existing data
3. Creates sample users and books
4. Places one sample order through the order service
"""

import sys
from decimal import Decimal
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from library_api.database import SessionLocal, create_tables
from library_api.models import Book, Order, OrderItem, User
from library_api.repositories import BookCatalog, OrderStore, UserDirectory
from library_api.services.orders import OrderService
from library_api.services.security import hash_password


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(OrderItem))
    db.execute(delete(Order))
    db.execute(delete(Book))
    db.execute(delete(User))
    db.commit()
    print("Data cleared.")


def create_users(db: Session) -> list[User]:
    """Create sample users."""
    print("Creating users...")
    users_data = [
        {
            "name": "Library Admin",
            "email": "admin@example.com",
            "password": "AdminPass123",
            "is_admin": True,
        },
        {
            "name": "John Doe",
            "email": "johndoe@example.com",
            "password": "SecurePass123",
            "is_admin": False,
        },
    ]

    users = []
    for data in users_data:
        user = User(
            name=data["name"],
            email=data["email"],
            hashed_password=hash_password(data["password"]),
            is_admin=data["is_admin"],
        )
        db.add(user)
        users.append(user)

    db.commit()
    for user in users:
        db.refresh(user)

    print(f"Created {len(users)} users.")
    return users


def create_books(db: Session) -> list[Book]:
    """Create sample books."""
    print("Creating books...")
    books_data = [
        {"title": "1984", "author": "George Orwell", "category": "Fiction",
         "price": Decimal("12.99"), "quantity": 5},
        {"title": "Animal Farm", "author": "George Orwell", "category": "Fiction",
         "price": Decimal("9.99"), "quantity": 3},
        {"title": "Pride and Prejudice", "author": "Jane Austen", "category": "Romance",
         "price": Decimal("8.99"), "quantity": 4},
        {"title": "Murder on the Orient Express", "author": "Agatha Christie",
         "category": "Mystery", "price": Decimal("14.99"), "quantity": 2},
        {"title": "Foundation", "author": "Isaac Asimov", "category": "Science Fiction",
         "price": Decimal("15.99"), "quantity": 6},
        {"title": "A Brief History of Time", "author": "Stephen Hawking",
         "category": "Science", "price": Decimal("18.50"), "quantity": 1},
    ]

    books = [Book(**data) for data in books_data]
    db.add_all(books)
    db.commit()
    for book in books:
        db.refresh(book)

    print(f"Created {len(books)} books.")
    return books


def seed_database(clear_existing: bool = True) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()

    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        users = create_users(db)
        books = create_books(db)

        service = OrderService(
            orders=OrderStore(db),
            users=UserDirectory(db),
            books=BookCatalog(db),
        )
        order = service.place_order(users[1].id, [books[0].id, books[1].id])

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print("\nSummary:")
        print(f"  - Users: {len(users)}")
        print(f"  - Books: {len(books)}")
        print(f"  - Sample order: #{order.id}, total {order.total_amount}")
        print("\nAPI documentation at http://localhost:8080/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    seed_database()
