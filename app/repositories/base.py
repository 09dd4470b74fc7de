"""Helpers shared by the SQLAlchemy stores."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

from sqlalchemy.exc import DBAPIError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from sqlalchemy.orm import Session

from app.services import StorageUnavailableError

logger = logging.getLogger(__name__)


@contextmanager
def storage_errors(session: Session) -> Iterator[None]:
    """Roll back and re-raise connection-level failures as StorageUnavailableError."""
    try:
        yield
    except (OperationalError, PoolTimeoutError) as exc:
        session.rollback()
        logger.error(f"Database unavailable: {exc}")
        raise StorageUnavailableError() from exc
    except DBAPIError as exc:
        if exc.connection_invalidated:
            session.rollback()
            logger.error(f"Database connection lost: {exc}")
            raise StorageUnavailableError() from exc
        raise


def as_utc(value: datetime) -> datetime:
    """SQLite drops tzinfo on read; every stored timestamp is UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value.astimezone(UTC)
