"""
Library Catalog API Application Package

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy engine and per-request sessions
- main.py: FastAPI application factory, error mapping
- dependencies.py: Dependency injection (services, bearer token check)
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- repositories/: SQLAlchemy stores behind the service interfaces
- routers/: API route handlers
- services/: Identity, authorization and book logic
"""

__version__ = "0.1.0"
