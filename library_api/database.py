"""
Database Configuration Module

This module sets up SQLAlchemy 2.0 for the Library API.

We use SYNCHRONOUS SQLAlchemy: request handlers are plain `def` functions
that FastAPI runs in its thread pool, so a blocking session per request is
enough for this service.

Session Management Pattern
==========================
"Session per request":
1. Request arrives → create a new session
2. Repositories and services receive that session explicitly
3. Commit on success, rollback on failure
4. Close session when request ends

The session is the only storage handle business code ever sees. Nothing
below the routers reaches for a module-level connection.
"""

from collections.abc import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from library_api.config import get_settings

settings = get_settings()

# Largest primary key value a signed 64-bit integer column can hold
MAX_ID = 2**63 - 1


# =============================================================================
# Database Engine
# =============================================================================
# - pool_size / max_overflow: connection pool sizing (server databases only)
# - pool_pre_ping: test connection health before using it
# - echo: log SQL statements in debug mode

def _engine_options(database_url: str) -> dict:
    """Build engine keyword arguments for the configured backend."""
    if database_url.startswith("sqlite"):
        # SQLite connections are bound to the creating thread by default,
        # but FastAPI runs sync endpoints in a thread pool.
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_size": settings.db_pool_size,
        "max_overflow": settings.db_max_overflow,
        "pool_pre_ping": True,
    }


engine = create_engine(
    settings.database_url,
    echo=settings.debug,
    **_engine_options(settings.database_url),
)


# =============================================================================
# Session Factory
# =============================================================================
SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
)


# =============================================================================
# Base Model Class
# =============================================================================
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy models.

    Alembic uses Base.metadata to discover tables for migrations.
    """
    pass


# =============================================================================
# Dependency Injection
# =============================================================================
def get_db() -> Generator[Session, None, None]:
    """
    Database session dependency for FastAPI.

    Code before yield creates the session, code after yield closes it even
    if the route raised.

    Usage in Routes:
        @router.get("/books")
        def list_books(db: DbSession):
            return BookCatalog(db).list()

    Yields:
        SQLAlchemy Session instance
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


# =============================================================================
# Utility Functions
# =============================================================================
def create_tables() -> None:
    """
    Create all database tables.

    Useful for development and tests. In production, use Alembic migrations.
    """
    # Importing the models package registers every table on Base.metadata
    import library_api.models  # noqa: F401

    Base.metadata.create_all(bind=engine)


def is_valid_id(value: int) -> bool:
    """
    Check that a value can be bound to an integer key column.

    Ids are positive and fit in a signed 64-bit integer. Anything larger
    makes the driver fail (OverflowError on SQLite, DataError on
    PostgreSQL), so lookups treat it as a missing record instead.
    """
    return 0 < value <= MAX_ID
