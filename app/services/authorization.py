"""
Bearer Token Authorization

Decides whether a write request may proceed, based only on its
Authorization header. Checks run in a fixed order and stop at the first
failure:

1. Extract: the header must be present and non-empty
2. Parse:   it must be exactly "Bearer <token>"
3. Verify:  the token signature, payload and expiry must be valid
4. Admit:   the decoded identity is returned to the caller

The FastAPI dependency in app.dependencies stores the result on
request.state so route handlers can read who made the call.
"""

import logging
from dataclasses import dataclass, field
from typing import Any

from app.services import InvalidTokenError, MalformedHeaderError, NoAuthHeaderError
from app.services.security import TokenService

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"

_REGISTERED_CLAIMS = {"sub", "iat", "exp"}


@dataclass(frozen=True)
class Principal:
    """The authenticated caller of a request."""

    subject: str
    claims: dict[str, Any] = field(default_factory=dict)

    @property
    def name(self) -> str | None:
        return self.claims.get("name")

    @property
    def email(self) -> str | None:
        return self.claims.get("email")


def parse_authorization_header(header: str | None) -> str:
    """
    Extract the token from an Authorization header value.

    Raises:
        NoAuthHeaderError: header missing or empty
        MalformedHeaderError: anything other than "Bearer <token>"
    """
    if not header:
        raise NoAuthHeaderError()

    parts = header.split(" ")
    if len(parts) != 2 or parts[0] != BEARER_SCHEME or not parts[1]:
        raise MalformedHeaderError()

    return parts[1]


def authorize(header: str | None, tokens: TokenService) -> Principal:
    """
    Run the full admission check on an Authorization header.

    Returns:
        Principal for the token's subject

    Raises:
        NoAuthHeaderError, MalformedHeaderError, InvalidTokenError
    """
    token = parse_authorization_header(header)

    payload = tokens.decode(token)
    if payload is None:
        raise InvalidTokenError()

    subject = payload.get("sub")
    if not subject:
        logger.warning("Token rejected: missing subject claim")
        raise InvalidTokenError()

    claims = {k: v for k, v in payload.items() if k not in _REGISTERED_CLAIMS}
    return Principal(subject=str(subject), claims=claims)
