"""
Domain Records and Store Interfaces

Immutable values passed between the services and the stores, and the
Protocols the services expect a store to satisfy. The SQLAlchemy
implementations live in app.repositories.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Protocol


@dataclass(frozen=True)
class Identity:
    """A registered user. password_hash never leaves the service layer."""

    id: int
    name: str
    email: str
    password_hash: str

    def public_view(self) -> dict[str, str]:
        return {"name": self.name, "email": self.email}


@dataclass(frozen=True)
class Book:
    """A book record as read from the store; price is in major units."""

    id: int
    title: str
    author: str
    price: Decimal
    year_published: int
    created_at: datetime
    updated_at: datetime

    @property
    def formatted_price(self) -> str:
        return f"${self.price:.2f}"


@dataclass(frozen=True)
class NewBook:
    """A validated book that has not been assigned an id yet."""

    title: str
    author: str
    price: Decimal
    year_published: int
    created_at: datetime
    updated_at: datetime


class CredentialStore(Protocol):
    """Durable identity storage. Must enforce email uniqueness atomically."""

    def create(self, name: str, email: str, password_hash: str) -> Identity:
        """Insert an identity; raise DuplicateIdentityError on email conflict."""
        ...

    def get_by_email(self, email: str) -> Identity | None: ...


class BookStore(Protocol):
    """Durable book storage keyed by store-assigned ids."""

    def parse_id(self, raw_id: str) -> int:
        """Return the id in store form; raise ValueError if malformed."""
        ...

    def list(self) -> list[Book]: ...

    def add(self, book: NewBook) -> Book: ...

    def get(self, book_id: int) -> Book | None: ...

    def update(
        self,
        book_id: int,
        changes: Mapping[str, Any],
        updated_at: datetime,
    ) -> Book | None:
        """
        Write only the given fields plus updated_at, in one statement.

        Returns the record as stored afterwards; None if it is gone.
        """
        ...

    def delete(self, book_id: int) -> Book | None:
        """Remove a record and return its last value; None if absent."""
        ...
