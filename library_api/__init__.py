"""
Library API Application Package

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine, session factory and declarative base
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- repositories/: User directory, book catalog and order store
- routers/: API route handlers
- services/: Business logic (orders, security, rate limiting)
"""

__version__ = "1.0.0"
