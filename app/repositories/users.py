"""Credential store backed by the users table."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import User
from app.repositories.base import storage_errors
from app.services import DuplicateIdentityError
from app.services.records import Identity

logger = logging.getLogger(__name__)


def _to_identity(user: User) -> Identity:
    return Identity(
        id=user.id,
        name=user.name,
        email=user.email,
        password_hash=user.hashed_password,
    )


class SqlCredentialStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def create(self, name: str, email: str, password_hash: str) -> Identity:
        """
        Insert a new user.

        The unique index on users.email settles concurrent signups: exactly
        one insert commits, the others fail here with IntegrityError.

        Raises:
            DuplicateIdentityError: the email is already registered
        """
        user = User(name=name, email=email, hashed_password=password_hash)

        with storage_errors(self.db):
            self.db.add(user)
            try:
                self.db.commit()
            except IntegrityError:
                self.db.rollback()
                logger.info(f"Signup rejected, email already registered: {email}")
                raise DuplicateIdentityError()
            self.db.refresh(user)

        return _to_identity(user)

    def get_by_email(self, email: str) -> Identity | None:
        stmt = select(User).where(User.email == email)
        with storage_errors(self.db):
            user = self.db.execute(stmt).scalar_one_or_none()
        return _to_identity(user) if user else None
