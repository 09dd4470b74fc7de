"""
Services Package

Business logic for the catalog, independent of HTTP:
- identity.py: signup / signin / signout
- authorization.py: bearer-token admission for write routes
- books.py: validated CRUD transitions on book records
- security.py: password hashing and token signing/verification
- validation.py: field rules and price unit conversion

Every failure a service can report is one of the exceptions below. The
routers never build HTTP errors for these themselves; the handlers
registered in app.main translate each kind to its status code and body.
"""


class ServiceError(Exception):
    """Base service exception."""

    message: str = "Service error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Malformed or out-of-range input (-> HTTP 500, by contract)."""

    message = "Validation failed"

    def __init__(self, message: str | None = None, errors: list[str] | None = None) -> None:
        self.errors = errors or []
        if message is None and self.errors:
            message = "; ".join(self.errors)
        super().__init__(message)


class DuplicateIdentityError(ServiceError):
    """An identity with a case-equivalent email already exists (-> HTTP 500)."""

    message = "Email already registered"


class NotFoundError(ServiceError):
    """Well-formed reference to a record that does not exist (-> HTTP 404)."""

    message = "Document not found"


class InvalidIdentifierError(ServiceError):
    """Record id fails the store's id-format rules (-> HTTP 500, never 404)."""

    message = "Invalid identifier"


class UnknownEmailError(NotFoundError):
    """Signin with an email no identity has (-> HTTP 401, not 404)."""

    message = "Email not found"


class InvalidCredentialsError(ServiceError):
    """Known email, wrong password (-> HTTP 401)."""

    message = "Invalid password"


class StorageUnavailableError(ServiceError):
    """The store could not be reached or timed out (-> HTTP 503, retryable)."""

    message = "Storage unavailable"


class AuthorizationError(ServiceError):
    """Base for bearer-token rejections (-> HTTP 401)."""

    message = "Unauthorized"


class NoAuthHeaderError(AuthorizationError):
    message = "No Authorization Header"


class MalformedHeaderError(AuthorizationError):
    message = "Invalid Token Format"


class InvalidTokenError(AuthorizationError):
    message = "Invalid Token"


__all__ = [
    "ServiceError",
    "ValidationError",
    "DuplicateIdentityError",
    "NotFoundError",
    "InvalidIdentifierError",
    "UnknownEmailError",
    "InvalidCredentialsError",
    "StorageUnavailableError",
    "AuthorizationError",
    "NoAuthHeaderError",
    "MalformedHeaderError",
    "InvalidTokenError",
]
