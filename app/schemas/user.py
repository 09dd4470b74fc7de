"""
Identity Pydantic Schemas

Schemas:
- SignupRequest / SigninRequest: credentials sent by the client
- AuthResponse: token plus public identity (never the password hash)
- SignoutResponse: instruction to discard the token
- MessageResponse / ErrorResponse: error bodies
"""

from pydantic import BaseModel, Field


class SignupRequest(BaseModel):
    """
    Registration data.

    Blank values are rejected by IdentityService, not here, so they produce
    the same error as any other validation failure.
    """

    name: str | None = Field(default=None, examples=["John Doe"])
    email: str | None = Field(default=None, examples=["john@example.com"])
    password: str | None = Field(default=None, examples=["securePassword123"])


class SigninRequest(BaseModel):
    email: str | None = Field(default=None, examples=["john@example.com"])
    password: str | None = Field(default=None, examples=["securePassword123"])


class AuthResponse(BaseModel):
    """
    Returned by signup and signin.

    SECURITY: Never includes the password or its hash.
    """

    token: str = Field(..., description="Bearer token for the Authorization header")
    name: str
    email: str


class SignoutResponse(BaseModel):
    message: str = Field(..., examples=["Successfully signed out"])
    clearToken: bool = Field(..., description="Client must discard its token")


class MessageResponse(BaseModel):
    """Body of authorization failures."""

    message: str = Field(..., examples=["Invalid Token"])


class ErrorResponse(BaseModel):
    """Body of signin and server errors."""

    error: str = Field(..., examples=["Invalid password"])
