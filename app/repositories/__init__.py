"""
Repositories Package

SQLAlchemy implementations of the store interfaces declared in
app.services.records:
- users.py: SqlCredentialStore (identities)
- books.py: SqlBookStore (book records)

Stores own transactions: each write commits on success and rolls back on
failure. Connection problems are reported as StorageUnavailableError so the
services never see a driver exception.
"""

from app.repositories.books import SqlBookStore
from app.repositories.users import SqlCredentialStore

__all__ = ["SqlBookStore", "SqlCredentialStore"]
