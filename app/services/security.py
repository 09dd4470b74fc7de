"""
Security Service

Handles password hashing and bearer token operations.

Security Features:
==================
1. Password hashing with bcrypt (passlib)
2. Constant-time password verification
3. JWT signing and validation with an explicit TokenConfig

The TokenService never looks up the signing secret on its own. It receives
a TokenConfig when constructed (see Settings.token_config), so tests and
tools can build one with any key they like.

Usage:
    from app.services.security import TokenConfig, TokenService, hash_password

    hashed = hash_password("securePassword123")
    tokens = TokenService(TokenConfig(secret_key="...", expire_minutes=60))
    token = tokens.issue(42, {"name": "John", "email": "john@example.com"})
    claims = tokens.decode(token)
"""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

from jose import JWTError, jwt
from passlib.context import CryptContext
from passlib.exc import PasswordValueError

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------------
# Password Hashing Configuration
# -------------------------------------------------------------------------
# CryptContext handles password hashing with bcrypt
# - deprecated: "auto" means old hashes are automatically upgraded
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """
    Hash a plain text password using bcrypt.

    Example:
        >>> hashed = hash_password("securePassword123")
        >>> hashed.startswith("$2b$")
        True
    """
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.

    Uses constant-time comparison to prevent timing attacks. A password
    bcrypt cannot hash at all (NUL bytes, over 4096 characters) can never
    match, so it is reported as a mismatch.

    Returns:
        True if password matches, False otherwise
    """
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except PasswordValueError:
        return False


# -------------------------------------------------------------------------
# Bearer Tokens
# -------------------------------------------------------------------------
DEFAULT_ALGORITHM = "HS256"
DEFAULT_EXPIRE_MINUTES = 60


@dataclass(frozen=True)
class TokenConfig:
    """Signing parameters for bearer tokens."""

    secret_key: str
    algorithm: str = DEFAULT_ALGORITHM
    expire_minutes: int = DEFAULT_EXPIRE_MINUTES


class TokenService:
    """
    Mints and validates signed bearer tokens.

    Tokens are stateless: nothing is stored server-side, and a token is
    valid until its `exp` claim passes.
    """

    def __init__(self, config: TokenConfig) -> None:
        self.config = config

    def issue(
        self,
        subject: int | str,
        claims: dict[str, Any] | None = None,
        expires_delta: timedelta | None = None,
    ) -> str:
        """
        Create a signed token for an identity.

        Args:
            subject: Identity id, stored as the `sub` claim
            claims: Extra claims to embed (name, email)
            expires_delta: Optional custom validity window

        Returns:
            Encoded JWT token string
        """
        issued_at = datetime.now(UTC)
        if expires_delta is None:
            expires_delta = timedelta(minutes=self.config.expire_minutes)

        to_encode = dict(claims or {})
        to_encode.update({
            "sub": str(subject),
            "iat": issued_at,
            "exp": issued_at + expires_delta,
        })

        return jwt.encode(
            to_encode,
            self.config.secret_key,
            algorithm=self.config.algorithm,
        )

    def decode(self, token: str) -> dict[str, Any] | None:
        """
        Decode and validate a token.

        Checks the signature and the `exp` claim.

        Returns:
            Decoded payload if valid, None if invalid, corrupt or expired
        """
        try:
            return jwt.decode(
                token,
                self.config.secret_key,
                algorithms=[self.config.algorithm],
            )
        except JWTError as e:
            logger.warning(f"JWT decode error: {e}")
            return None
