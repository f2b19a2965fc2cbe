"""
Users Router

Account endpoints:
- POST /register - create an account (password hashed with bcrypt)
- POST /login    - exchange email/password for a JWT

Security:
=========
- Plain text passwords are never logged or stored
- Tokens carry the user id in `sub` and expire after
  settings.access_token_expire_minutes
"""

import logging

from fastapi import APIRouter, HTTPException, Request, status
from sqlalchemy.exc import IntegrityError

from library_api.config import get_settings
from library_api.dependencies import Users
from library_api.models import User
from library_api.schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    UserCreate,
)
from library_api.services.rate_limiter import limiter
from library_api.services.security import (
    create_access_token,
    hash_password,
    verify_password,
)

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter(
    tags=["User"],
    responses={
        500: {"model": MessageResponse, "description": "Internal server error"},
    },
)


@router.post(
    "/register",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    responses={409: {"model": MessageResponse, "description": "Email already registered"}},
)
@limiter.limit("5/minute")
def register(
    request: Request,
    user_data: UserCreate,
    users: Users,
) -> MessageResponse:
    """
    Register a new user with email and password.

    1. Validates email and password format (handled by Pydantic)
    2. Rejects an email that is already registered
    3. Hashes the password and stores the account
    """
    if users.find_by_email(user_data.email) is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )

    user = User(
        name=user_data.name,
        email=user_data.email,
        hashed_password=hash_password(user_data.password),
        is_admin=user_data.is_admin,
    )

    try:
        users.add(user)
    except IntegrityError:
        # Lost a race with a concurrent registration of the same email
        users.db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )

    logger.info(f"New user registered: {user.email}")

    return MessageResponse(message=f"{user.name} successfully registered")


@router.post(
    "/login",
    response_model=LoginResponse,
    status_code=status.HTTP_201_CREATED,
    summary="User login",
    responses={401: {"model": MessageResponse, "description": "Authentication failed"}},
)
@limiter.limit("10/minute")
def login(
    request: Request,
    credentials: LoginRequest,
    users: Users,
) -> LoginResponse:
    """Authenticate with email and password and receive an access token."""
    user = users.find_by_email(credentials.email)
    if user is None:
        logger.warning(f"Login failed: user not found for {credentials.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User Not Found",
        )

    if not verify_password(credentials.password, user.hashed_password):
        logger.warning(f"Login failed: incorrect password for {credentials.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Wrong Password",
        )

    token = create_access_token({"sub": str(user.id)})
    logger.info(f"User logged in: {user.email}")

    return LoginResponse(message="User LoggedIn", token=token)
