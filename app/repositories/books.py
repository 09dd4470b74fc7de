"""
Book store backed by the books table.

This is the store boundary for prices: records carry major units
(Decimal), rows carry minor units (int). to_minor_units is applied on every
write and to_major_units on every read.
"""

import re
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from sqlalchemy import select
from sqlalchemy import update as sql_update
from sqlalchemy.orm import Session

from app.models import Book as BookRow
from app.repositories.base import as_utc, storage_errors
from app.services.records import Book, NewBook
from app.services.validation import to_major_units, to_minor_units

# Positive decimal integers that fit in a signed 64-bit column
_ID_PATTERN = re.compile(r"[0-9]{1,18}")


def _to_record(row: BookRow) -> Book:
    return Book(
        id=row.id,
        title=row.title,
        author=row.author,
        price=to_major_units(row.price_cents),
        year_published=row.year_published,
        created_at=as_utc(row.created_at),
        updated_at=as_utc(row.updated_at),
    )


class SqlBookStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def parse_id(self, raw_id: str) -> int:
        if not _ID_PATTERN.fullmatch(raw_id):
            raise ValueError(f"not a book id: {raw_id!r}")
        book_id = int(raw_id)
        if book_id < 1:
            raise ValueError(f"not a book id: {raw_id!r}")
        return book_id

    def list(self) -> list[Book]:
        stmt = select(BookRow).order_by(BookRow.id)
        with storage_errors(self.db):
            rows = self.db.execute(stmt).scalars().all()
        return [_to_record(row) for row in rows]

    def add(self, book: NewBook) -> Book:
        row = BookRow(
            title=book.title,
            author=book.author,
            price_cents=to_minor_units(book.price),
            year_published=book.year_published,
            created_at=book.created_at,
            updated_at=book.updated_at,
        )
        with storage_errors(self.db):
            self.db.add(row)
            self.db.commit()
            self.db.refresh(row)
        return _to_record(row)

    def get(self, book_id: int) -> Book | None:
        with storage_errors(self.db):
            row = self.db.get(BookRow, book_id)
        return _to_record(row) if row else None

    def update(
        self,
        book_id: int,
        changes: Mapping[str, Any],
        updated_at: datetime,
    ) -> Book | None:
        values = {name: value for name, value in changes.items() if name != "price"}
        if "price" in changes:
            values["price_cents"] = to_minor_units(changes["price"])

        # created_at is immutable and never written here
        stmt = (
            sql_update(BookRow)
            .where(BookRow.id == book_id)
            .values(**values, updated_at=updated_at)
        )
        with storage_errors(self.db):
            result = self.db.execute(stmt)
            if result.rowcount == 0:
                self.db.rollback()
                return None

            self.db.commit()
            row = self.db.get(BookRow, book_id)
        return _to_record(row) if row else None

    def delete(self, book_id: int) -> Book | None:
        with storage_errors(self.db):
            row = self.db.get(BookRow, book_id)
            if row is None:
                return None

            last_value = _to_record(row)
            self.db.delete(row)
            self.db.commit()
        return last_value

    def price_in_minor_units(self, book_id: int) -> int | None:
        """Raw stored price, for audits and tests of the storage format."""
        with storage_errors(self.db):
            row = self.db.get(BookRow, book_id)
        return row.price_cents if row else None
