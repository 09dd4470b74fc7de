"""
Book Model

The book table of the catalog.

Prices are stored as integer minor units (cents) in `price_cents`. The
conversion to and from major units happens in app.repositories.books, at
the store boundary, and nowhere else.
"""

from datetime import datetime

from sqlalchemy import BigInteger, CheckConstraint, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base


class Book(Base):
    """
    Book model representing books in the library.

    Table: books

    Fields:
    - title: Book title, 1-255 characters
    - author: Author name, 1-150 characters
    - price_cents: Non-negative price in minor units
    - year_published: Four-digit year, not in the future
    - created_at: Set once on insert
    - updated_at: Set on every mutation

    Timestamps are written explicitly by the service, not by database
    defaults, so updated_at can be guaranteed to increase.
    """

    __tablename__ = "books"
    __table_args__ = (
        CheckConstraint("price_cents >= 0", name="ck_books_price_non_negative"),
    )

    id: Mapped[int] = mapped_column(primary_key=True)

    title: Mapped[str] = mapped_column(
        String(255),
        index=True,
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(150),
        nullable=False,
        comment="Author name"
    )

    # Integer cents, never a float: 19.99 is stored as 1999
    price_cents: Mapped[int] = mapped_column(
        BigInteger,
        nullable=False,
        comment="Price in minor units (cents)"
    )

    year_published: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        comment="Year of publication"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}', author='{self.author}')"
