"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI's Depends() function manages their lifecycle.

What lives here:
- Database sessions (per-request)
- Service construction (stores bound to the request's session)
- Bearer token authorization for write routes

Tests swap any of these with app.dependency_overrides.
"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from app.config import get_settings
from app.database import get_db
from app.repositories import SqlBookStore, SqlCredentialStore
from app.services.authorization import Principal, authorize
from app.services.books import BookService
from app.services.identity import IdentityService
from app.services.security import TokenService

# =============================================================================
# Type Aliases with Annotated
# =============================================================================
DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Services
# =============================================================================
@lru_cache
def get_token_service() -> TokenService:
    """
    Process-wide token service, built once from the settings.

    The signing key is passed in explicitly through TokenConfig.
    """
    return TokenService(get_settings().token_config)


Tokens = Annotated[TokenService, Depends(get_token_service)]


def get_identity_service(db: DbSession, tokens: Tokens) -> IdentityService:
    return IdentityService(SqlCredentialStore(db), tokens)


def get_book_service(db: DbSession) -> BookService:
    return BookService(SqlBookStore(db))


Identities = Annotated[IdentityService, Depends(get_identity_service)]
Books = Annotated[BookService, Depends(get_book_service)]


# =============================================================================
# Bearer Token Authorization
# =============================================================================
def require_identity(
    request: Request,
    tokens: Tokens,
    authorization: str | None = Header(default=None),
) -> Principal:
    """
    Admit the request only if it carries a valid bearer token.

    The decoded identity is attached to request.state.principal so handlers
    and logging can see who made the call. Failures raise the
    AuthorizationError subclasses, which app.main maps to 401 responses
    with a distinct message each.

    Reads are deliberately NOT guarded: only create, update and delete
    depend on this.
    """
    principal = authorize(authorization, tokens)
    request.state.principal = principal
    return principal


CurrentPrincipal = Annotated[Principal, Depends(require_identity)]
