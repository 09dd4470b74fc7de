"""
Book Service

Validated CRUD transitions on book records.

Every operation that takes an id resolves it in the same order:
1. id format (InvalidIdentifierError), then
2. existence (NotFoundError), then
3. the requested change.

Records are immutable values. create and update validate first, so a
rejected update never leaves a half-applied change, and an update writes
only the fields it was given.
"""

import logging
from collections.abc import Mapping
from datetime import UTC, datetime, timedelta
from typing import Any

from app.services import InvalidIdentifierError, NotFoundError
from app.services.records import Book, BookStore, NewBook
from app.services.validation import clean_book_fields

logger = logging.getLogger(__name__)

_TICK = timedelta(microseconds=1)


class BookService:
    def __init__(self, store: BookStore) -> None:
        self.store = store

    def list(self) -> list[Book]:
        """Return every book; an empty list is a valid result, not an error."""
        return self.store.list()

    def create(self, fields: Mapping[str, Any]) -> Book:
        """
        Validate and persist a new book.

        Raises:
            ValidationError: any field missing or out of bounds
        """
        cleaned = clean_book_fields(fields)
        now = datetime.now(UTC)

        book = self.store.add(NewBook(**cleaned, created_at=now, updated_at=now))
        logger.info(f"Created book {book.id}: '{book.title}'")

        return book

    def _resolve(self, raw_id: Any) -> int:
        try:
            return self.store.parse_id(str(raw_id))
        except ValueError:
            raise InvalidIdentifierError(f"Invalid book id: {raw_id!r}")

    def _get_existing(self, raw_id: Any) -> Book:
        book = self.store.get(self._resolve(raw_id))
        if book is None:
            raise NotFoundError()
        return book

    def get_by_id(self, raw_id: Any) -> Book:
        """
        Raises:
            InvalidIdentifierError: malformed id
            NotFoundError: well-formed id with no record
        """
        return self._get_existing(raw_id)

    def update(self, raw_id: Any, partial_fields: Mapping[str, Any]) -> Book:
        """
        Apply the fields present in partial_fields and bump updated_at.

        Fields not present are left untouched. updated_at always moves
        forward, even if the clock has not advanced since the last write.
        """
        existing = self._get_existing(raw_id)
        changes = clean_book_fields(partial_fields, partial=True)

        now = datetime.now(UTC)
        if now <= existing.updated_at:
            now = existing.updated_at + _TICK

        stored = self.store.update(existing.id, changes, now)
        if stored is None:
            # deleted between the lookup and the write
            raise NotFoundError()

        logger.info(f"Updated book {stored.id}: {sorted(changes)}")
        return stored

    def delete_by_id(self, raw_id: Any) -> Book:
        """Delete a book and return its last value."""
        book_id = self._resolve(raw_id)
        deleted = self.store.delete(book_id)
        if deleted is None:
            raise NotFoundError()

        logger.info(f"Deleted book {deleted.id}")
        return deleted
