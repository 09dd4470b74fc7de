"""
Identity Service

Signup, signin and signout for catalog users.

The service owns no state: identities live in the CredentialStore and
tokens are stateless JWTs, so signout is only an instruction to the client
to drop its token.
"""

import logging
from dataclasses import dataclass
from typing import Any

from passlib.exc import PasswordValueError

from app.services import InvalidCredentialsError, UnknownEmailError, ValidationError
from app.services.records import CredentialStore, Identity
from app.services.security import TokenService, hash_password, verify_password
from app.services.validation import normalize_email, require_text

logger = logging.getLogger(__name__)

SIGNOUT_MESSAGE = "Successfully signed out"


@dataclass(frozen=True)
class AuthResult:
    """A freshly minted token plus the public view of its identity."""

    identity: Identity
    token: str

    def to_response(self) -> dict[str, Any]:
        return {"token": self.token, **self.identity.public_view()}


class IdentityService:
    def __init__(self, store: CredentialStore, tokens: TokenService) -> None:
        self.store = store
        self.tokens = tokens

    def _issue(self, identity: Identity) -> AuthResult:
        token = self.tokens.issue(identity.id, identity.public_view())
        return AuthResult(identity=identity, token=token)

    def signup(self, name: Any, email: Any, raw_password: Any) -> AuthResult:
        """
        Register a new identity and sign it in.

        Raises:
            ValidationError: blank name, email or password, or a password
                bcrypt refuses to hash
            DuplicateIdentityError: a case-equivalent email already exists
        """
        name = require_text("name", name)
        email = normalize_email(require_text("email", email))
        if not isinstance(raw_password, str) or not raw_password:
            raise ValidationError("password is required")

        try:
            password_hash = hash_password(raw_password)
        except PasswordValueError as exc:
            # NUL bytes or more than 4096 characters
            raise ValidationError(f"password is not acceptable: {exc}")

        identity = self.store.create(name, email, password_hash)
        logger.info(f"New user registered: {identity.email}")

        return self._issue(identity)

    def signin(self, email: Any, raw_password: Any) -> AuthResult:
        """
        Authenticate with email and password.

        Raises:
            UnknownEmailError: no identity with this email (a NotFoundError)
            InvalidCredentialsError: the password does not match
        """
        identity = None
        if isinstance(email, str) and email.strip():
            identity = self.store.get_by_email(normalize_email(email))

        if identity is None:
            logger.warning(f"Signin failed: email not found ({email})")
            raise UnknownEmailError()

        if not isinstance(raw_password, str) or not verify_password(
            raw_password, identity.password_hash
        ):
            logger.warning(f"Signin failed: invalid password for {identity.email}")
            raise InvalidCredentialsError("Invalid password")

        logger.info(f"User signed in: {identity.email}")
        return self._issue(identity)

    def signout(self) -> dict[str, Any]:
        return {"message": SIGNOUT_MESSAGE, "clearToken": True}
