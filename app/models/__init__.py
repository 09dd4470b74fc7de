"""
SQLAlchemy Models Package

Importing this package registers every table with Base.metadata, which
Alembic and create_tables() rely on.
"""

from app.models.book import Book
from app.models.user import User

__all__ = ["Book", "User"]
