"""
Pydantic Schemas Package

Request/response validation for the HTTP layer, kept separate from the
service records so the API shape can evolve independently of the core.
"""

from app.schemas.book import BookPayload, BookResponse
from app.schemas.user import (
    AuthResponse,
    ErrorResponse,
    MessageResponse,
    SigninRequest,
    SignoutResponse,
    SignupRequest,
)

__all__ = [
    # Book schemas
    "BookPayload",
    "BookResponse",
    # Identity schemas
    "AuthResponse",
    "ErrorResponse",
    "MessageResponse",
    "SigninRequest",
    "SignoutResponse",
    "SignupRequest",
]
