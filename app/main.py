"""
FastAPI Application Entry Point

This module creates and configures the FastAPI application.

Key Concepts:
=============

1. Application Factory Pattern
   - create_app() function returns configured app
   - Easier to test (can create multiple instances)

2. Lifespan Events
   - startup/shutdown logging

3. Middleware Stack
   - CORS: any origin by default, configurable

4. Exception Handlers
   - Translate service errors to their HTTP status and body
   - Log errors for debugging, hide details outside debug mode

Status policy:
==============
Validation failures, duplicate emails and malformed ids are answered with
a generic 500, not 400/409. Existing clients depend on these codes, so they
are kept as they are.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from app import __version__
from app.config import get_settings
from app.routers import auth_router, books_router
from app.services import (
    AuthorizationError,
    DuplicateIdentityError,
    InvalidCredentialsError,
    InvalidIdentifierError,
    NotFoundError,
    StorageUnavailableError,
    UnknownEmailError,
    ValidationError,
)

# =============================================================================
# Logging Configuration
# =============================================================================
settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# =============================================================================
# Lifespan Events
# =============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan context manager.

    Code before yield: Runs on startup
    Code after yield: Runs on shutdown

    Tables are managed by Alembic (or scripts/init_db.py in development),
    not created here.
    """
    logger.info(f"Starting {settings.app_name}...")
    logger.info(f"Debug mode: {settings.debug}")
    logger.info(f"API prefix: {settings.api_prefix}")

    yield

    logger.info(f"Shutting down {settings.app_name}...")


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map every service error to its response.

    Starlette picks the handler of the most specific class, so
    UnknownEmailError (a NotFoundError) gets 401 while other NotFoundErrors
    get 404.
    """

    @app.exception_handler(AuthorizationError)
    async def authorization_error_handler(
        request: Request,
        exc: AuthorizationError,
    ) -> JSONResponse:
        logger.info(f"Rejected {request.method} {request.url.path}: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"message": exc.message},
            headers={"WWW-Authenticate": "Bearer"},
        )

    @app.exception_handler(UnknownEmailError)
    @app.exception_handler(InvalidCredentialsError)
    async def credentials_error_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={"error": exc.message},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError) -> PlainTextResponse:
        return PlainTextResponse(NotFoundError.message, status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(ValidationError)
    @app.exception_handler(DuplicateIdentityError)
    @app.exception_handler(InvalidIdentifierError)
    async def server_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.warning(f"{request.method} {request.url.path} failed: {exc.message}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": exc.message},
        )

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(
        request: Request,
        exc: RequestValidationError,
    ) -> JSONResponse:
        """Wrongly typed bodies fail the same way as any other invalid input."""
        logger.warning(f"{request.method} {request.url.path} rejected body: {exc.errors()}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": ValidationError.message},
        )

    @app.exception_handler(StorageUnavailableError)
    async def storage_unavailable_handler(
        request: Request,
        exc: StorageUnavailableError,
    ) -> JSONResponse:
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"error": exc.message},
            headers={"Retry-After": "5"},
        )

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_exception_handler(
        request: Request,
        exc: SQLAlchemyError,
    ) -> JSONResponse:
        """Logs the actual error while hiding details from users."""
        logger.error(f"Database error: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "A database error occurred. Please try again later."},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """
        Catch-all exception handler.

        In production, hide internal errors from users.
        In debug mode, show more details.
        """
        logger.error(f"Unhandled error: {exc}", exc_info=True)

        if settings.debug:
            return JSONResponse(status_code=500, content={"error": str(exc)})

        return JSONResponse(status_code=500, content={"error": "An internal error occurred."})


# =============================================================================
# Application Factory
# =============================================================================
def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance
    """
    app = FastAPI(
        title=settings.app_name,
        description="""
## Library Catalog API

Register, sign in, and manage a catalog of books.

### Authentication
Reads are public. Creating, updating and deleting books requires
`Authorization: Bearer <token>`, using the token from signup or signin.
        """,
        version=__version__,
        lifespan=lifespan,
    )

    # -------------------------------------------------------------------------
    # CORS Middleware
    # -------------------------------------------------------------------------
    # Browsers only send the Authorization header cross-origin if it is
    # allowed here. allow_credentials stays off: tokens travel in a header,
    # not a cookie, and "*" origins cannot be combined with credentials.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins_list,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # -------------------------------------------------------------------------
    # Register Routers
    # -------------------------------------------------------------------------
    # The auth router must come first so GET /api/signout is not captured
    # by GET /api/{book_id}.
    app.include_router(auth_router, prefix=settings.api_prefix)
    app.include_router(books_router, prefix=settings.api_prefix)

    @app.get(
        "/health",
        tags=["Health"],
        summary="Health check",
    )
    async def health_check() -> dict:
        """Used by load balancers and monitoring to check the instance is up."""
        return {
            "status": "healthy",
            "app": settings.app_name,
            "version": __version__,
            "api_version": settings.api_version,
        }

    return app


# =============================================================================
# Application Instance
# =============================================================================
# This is what uvicorn imports: uvicorn app.main:app
app = create_app()


# This allows running the app directly with: python -m app.main
if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
