"""
Book Pydantic Schemas

Request and response shapes for the /api book routes.

Field names on the wire are camelCase (yearPublished, createdAt), matching
what existing clients send and read. Request bodies also accept the
snake_case names.

The request schemas only check JSON types. Content rules (lengths, price
sign, year range) belong to BookService, so a direct service call and an
HTTP call are validated the same way.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.services.records import Book


class BookPayload(BaseModel):
    """
    Book fields sent by the client.

    Used for both POST (every field required by the service) and PUT (only
    the fields present are applied). Unknown fields are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "title": "1984",
                "author": "George Orwell",
                "price": 12.99,
                "yearPublished": 1949,
            }
        },
    )

    title: str | None = Field(
        default=None,
        description="Book title (1-255 characters)",
    )

    author: str | None = Field(
        default=None,
        description="Author name (1-150 characters)",
    )

    # Numbers are checked by the service so that "abc" and -1 fail the same way
    price: Any = Field(
        default=None,
        description="Price in major units, e.g. 19.99",
    )

    year_published: Any = Field(
        default=None,
        description="Publication year, 1000 to the current year",
    )

    def fields(self) -> dict[str, Any]:
        """Only the fields the client actually sent, keyed by service name."""
        return self.model_dump(exclude_unset=True)


class BookResponse(BaseModel):
    """A book as returned to clients; price is in major units."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int = Field(..., description="Unique book identifier")
    title: str
    author: str
    price: float = Field(..., description="Price in major units, two decimal places")
    year_published: int
    created_at: datetime
    updated_at: datetime
    formatted_price: str = Field(..., description="Display price, e.g. $19.99")

    @classmethod
    def from_record(cls, book: Book) -> "BookResponse":
        return cls(
            id=book.id,
            title=book.title,
            author=book.author,
            price=float(book.price),
            year_published=book.year_published,
            created_at=book.created_at,
            updated_at=book.updated_at,
            formatted_price=book.formatted_price,
        )
