"""
User Model

Represents a registered library account. Users are resolved by id when an
order is placed and when orders are listed.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, func
from sqlalchemy.orm import Mapped, mapped_column

from library_api.database import Base


class User(Base):
    """
    User model representing registered users in the system.

    Table: users

    Indexes:
    - Primary key on id (automatic)
    - email: Unique index for login lookups

    Example:
        user = User(
            name="John Doe",
            email="john@example.com",
            hashed_password=hash_password("secret123"),
        )
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="User's display name"
    )

    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="User's email address (used for login)"
    )

    hashed_password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    is_admin: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False,
        comment="Whether the user administers the catalog"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="When the user registered"
    )

    def __repr__(self) -> str:
        return f"User(id={self.id}, email='{self.email}')"
