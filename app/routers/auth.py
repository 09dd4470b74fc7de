"""
Authentication Router

Handles identity endpoints:
- Signup (name/email/password -> token)
- Signin (email/password -> token)
- Signout (stateless; tells the client to discard its token)

Security:
=========
- Passwords are hashed with bcrypt before storage
- Plain text passwords and tokens are never logged
- Tokens are signed JWTs with a fixed validity window
- There is no server-side session, so there is nothing to revoke on signout

Error responses come from the handlers in app.main:
- validation or duplicate email -> 500
- unknown email / wrong password -> 401 {"error": ...}
"""

from fastapi import APIRouter

from app.dependencies import Identities
from app.schemas import (
    AuthResponse,
    ErrorResponse,
    SigninRequest,
    SignoutResponse,
    SignupRequest,
)

router = APIRouter(
    tags=["Authentication"],
    responses={
        401: {"model": ErrorResponse, "description": "Email not found / Invalid password"},
        500: {"model": ErrorResponse, "description": "Validation failed or email already registered"},
    },
)


@router.post(
    "/signup",
    response_model=AuthResponse,
    summary="Register a new user",
    description="Create an account and receive a bearer token.",
)
def signup(payload: SignupRequest, identities: Identities) -> AuthResponse:
    result = identities.signup(payload.name, payload.email, payload.password)
    return AuthResponse(**result.to_response())


@router.post(
    "/signin",
    response_model=AuthResponse,
    summary="Sign in with email and password",
    description="""
    Authenticate and receive a fresh bearer token.

    **Usage:**
    Include the token in the Authorization header of write requests:
    ```
    Authorization: Bearer <token>
    ```
    """,
)
def signin(payload: SigninRequest, identities: Identities) -> AuthResponse:
    result = identities.signin(payload.email, payload.password)
    return AuthResponse(**result.to_response())


@router.get(
    "/signout",
    response_model=SignoutResponse,
    summary="Sign out",
    description="Always succeeds. The client must discard its token.",
)
def signout(identities: Identities) -> SignoutResponse:
    return SignoutResponse(**identities.signout())
