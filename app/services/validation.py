"""
Field Validation and Price Conversion

Shared helpers for the book service and the book store.

Prices cross two representations:
- major units (Decimal, e.g. 19.99) seen by callers
- minor units (int, e.g. 1999) persisted by the store

to_minor_units / to_major_units are the only place that conversion happens.
"""

from collections.abc import Mapping
from datetime import UTC, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

from app.services import ValidationError

TITLE_MAX_LENGTH = 255
AUTHOR_MAX_LENGTH = 150
MIN_YEAR_PUBLISHED = 1000

BOOK_FIELDS = ("title", "author", "price", "year_published")

_CENT = Decimal("0.01")

# Largest price whose minor units fit a signed 64-bit column
MAX_PRICE = Decimal(2**63 - 1) / 100


def to_minor_units(price: Decimal | int | float | str) -> int:
    """
    Convert a major-unit price to integer minor units (cents).

    Half cents round up, so 10.005 is stored as 1001.
    """
    cents = Decimal(str(price)) * 100
    return int(cents.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_major_units(minor: int) -> Decimal:
    """Convert integer minor units back to a two-place Decimal."""
    return (Decimal(minor) / 100).quantize(_CENT)


def _to_decimal(value: Any) -> Decimal | None:
    # bool is an int subclass; True is not a price
    if isinstance(value, bool) or value is None:
        return None
    try:
        number = Decimal(str(value).strip())
    except (InvalidOperation, ValueError):
        return None
    return number if number.is_finite() else None


def _clean_text(name: str, value: Any, max_length: int, errors: list[str]) -> str | None:
    if not isinstance(value, str) or not value.strip():
        errors.append(f"{name} is required")
        return None
    value = value.strip()
    if len(value) > max_length:
        errors.append(f"{name} cannot exceed {max_length} characters")
        return None
    return value


def _clean_price(value: Any, errors: list[str]) -> Decimal | None:
    price = _to_decimal(value)
    if price is None:
        errors.append("price must be a number")
        return None
    if price < 0:
        errors.append("price must be greater than or equal to 0")
        return None
    if price <= MAX_PRICE:
        price = price.quantize(_CENT, rounding=ROUND_HALF_UP)
    if price > MAX_PRICE:
        errors.append("price is too large")
        return None
    return price


def _clean_year(value: Any, errors: list[str]) -> int | None:
    year = _to_decimal(value)
    if year is None or year != year.to_integral_value():
        errors.append("year_published must be an integer")
        return None
    current_year = datetime.now(UTC).year
    if not MIN_YEAR_PUBLISHED <= year <= current_year:
        errors.append(
            f"year_published must be between {MIN_YEAR_PUBLISHED} and {current_year}"
        )
        return None
    return int(year)


def clean_book_fields(fields: Mapping[str, Any], partial: bool = False) -> dict[str, Any]:
    """
    Validate book fields and return their normalized values.

    Args:
        fields: Raw field values keyed by title/author/price/year_published.
            Other keys are ignored.
        partial: If True, only the fields present are checked (updates).
            If False, every field is required (creation).

    Returns:
        Dict of cleaned values, containing only the validated keys

    Raises:
        ValidationError: listing every violated constraint; nothing is
            returned for a partially valid input
    """
    errors: list[str] = []
    cleaned: dict[str, Any] = {}

    for name in BOOK_FIELDS:
        if name not in fields:
            if not partial:
                errors.append(f"{name} is required")
            continue

        value = fields[name]
        if name == "title":
            cleaned[name] = _clean_text("title", value, TITLE_MAX_LENGTH, errors)
        elif name == "author":
            cleaned[name] = _clean_text("author", value, AUTHOR_MAX_LENGTH, errors)
        elif name == "price":
            cleaned[name] = _clean_price(value, errors)
        else:
            cleaned[name] = _clean_year(value, errors)

    if errors:
        raise ValidationError(errors=errors)

    return cleaned


def require_text(name: str, value: Any) -> str:
    """Return the trimmed value, or raise ValidationError if blank."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{name} is required")
    return value.strip()


def normalize_email(email: str) -> str:
    """Emails are compared case-insensitively; store and look up lowercase."""
    return email.strip().lower()
