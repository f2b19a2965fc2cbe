"""
User Pydantic Schemas

Schemas:
- UserCreate: Registration data (name, email, password, isAdmin)
- LoginRequest / LoginResponse: Email/password login returning a JWT
- UserResponse: Public user data (never exposes the password hash)

Pydantic v2 Features Used:
- Field(): constraints and OpenAPI metadata
- field_validator: validate and normalize field values
- EmailStr: email validation (email-validator package)
"""

import re
from datetime import datetime

from pydantic import EmailStr, Field, field_validator

from library_api.schemas.common import CamelModel


class UserCreate(CamelModel):
    """
    Schema for user registration.

    Example request body:
    {
        "name": "John Doe",
        "email": "john@example.com",
        "password": "SecurePass123",
        "isAdmin": false
    }
    """

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Display name",
        examples=["John Doe"],
    )

    email: EmailStr = Field(
        ...,
        description="User's email address",
        examples=["john@example.com"],
    )

    password: str = Field(
        ...,
        min_length=8,
        max_length=72,  # bcrypt only hashes the first 72 bytes
        description="Password (min 8 chars, must include uppercase, lowercase and number)",
        examples=["SecurePass123"],
    )

    is_admin: bool = Field(
        default=False,
        description="Grant catalog administration rights",
    )

    @field_validator("name")
    @classmethod
    def name_must_not_be_empty(cls, v: str) -> str:
        """Validate and normalize name."""
        if not v.strip():
            raise ValueError("Name cannot be empty or whitespace")
        return v.strip()

    @field_validator("password")
    @classmethod
    def password_must_be_strong(cls, v: str) -> str:
        """
        Validate password strength.

        Requirements:
        - At least 8 characters (enforced by min_length)
        - At least 1 uppercase letter
        - At least 1 lowercase letter
        - At least 1 number
        """
        if not re.search(r"[A-Z]", v):
            raise ValueError("Password must contain at least one uppercase letter")
        if not re.search(r"[a-z]", v):
            raise ValueError("Password must contain at least one lowercase letter")
        if not re.search(r"\d", v):
            raise ValueError("Password must contain at least one number")
        return v


class LoginRequest(CamelModel):
    """Schema for email/password login."""

    email: EmailStr = Field(..., description="Registered email address")
    password: str = Field(..., min_length=1, description="Account password")


class LoginResponse(CamelModel):
    """Successful login: a bearer token for the user."""

    message: str = Field(..., examples=["User LoggedIn"])
    token: str = Field(..., description="JWT access token")


class UserResponse(CamelModel):
    """
    Schema for user data returned by the API.

    SECURITY: Never includes the password hash.
    """

    id: int = Field(..., description="Unique user identifier", examples=[1])
    name: str = Field(..., description="Display name")
    email: EmailStr = Field(..., description="User's email address")
    is_admin: bool = Field(..., description="Catalog administrator flag")
    created_at: datetime = Field(..., description="When the user registered")
