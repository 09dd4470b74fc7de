"""
pytest Fixtures for Library Catalog Tests

Shared fixtures used across all test files.

FIXTURE LAYERS:
- engine / db_session: a fresh SQLite in-memory database per test
- book_store / credential_store: the SQLAlchemy stores bound to that session
- book_service / identity_service / token_service: the core services
- client: HTTP test client whose get_db dependency uses db_session
- sample_user / auth_headers / sample_book: ready-made data
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["DATABASE_URL"] = "sqlite:///:memory:"

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.dependencies import get_token_service
from app.main import app
from app.repositories import SqlBookStore, SqlCredentialStore
from app.services.books import BookService
from app.services.identity import AuthResult, IdentityService
from app.services.records import Book
from app.services.security import TokenService

SAMPLE_USER = {
    "name": "John Doe",
    "email": "john@example.com",
    "password": "securePassword123",
}

SAMPLE_BOOK = {
    "title": "Test Book",
    "author": "Test Author",
    "price": 29.99,
    "year_published": 2023,
}


# =============================================================================
# DATABASE FIXTURES
# =============================================================================
@pytest.fixture
def engine():
    """
    A SQLite in-memory database, created empty for each test.

    StaticPool keeps the single connection alive; without it the in-memory
    database would disappear between connections. Tables are recreated per
    test so that commits and rollbacks inside the stores behave exactly as
    they would against a real database.
    """
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db_session(engine) -> Generator[Session, None, None]:
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )
    session = TestSessionLocal()

    yield session

    session.close()


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Test client backed by the test database.

    We override the get_db dependency so every request uses db_session.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


# =============================================================================
# SERVICE FIXTURES
# =============================================================================
@pytest.fixture
def token_service() -> TokenService:
    """The same token service the app uses (signed with the test SECRET_KEY)."""
    return get_token_service()


@pytest.fixture
def credential_store(db_session: Session) -> SqlCredentialStore:
    return SqlCredentialStore(db_session)


@pytest.fixture
def book_store(db_session: Session) -> SqlBookStore:
    return SqlBookStore(db_session)


@pytest.fixture
def identity_service(
    credential_store: SqlCredentialStore,
    token_service: TokenService,
) -> IdentityService:
    return IdentityService(credential_store, token_service)


@pytest.fixture
def book_service(book_store: SqlBookStore) -> BookService:
    return BookService(book_store)


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_user(identity_service: IdentityService) -> AuthResult:
    """A registered user and the token issued at signup."""
    return identity_service.signup(
        SAMPLE_USER["name"],
        SAMPLE_USER["email"],
        SAMPLE_USER["password"],
    )


@pytest.fixture
def auth_headers(sample_user: AuthResult) -> dict[str, str]:
    return {"Authorization": f"Bearer {sample_user.token}"}


@pytest.fixture
def sample_book(book_service: BookService) -> Book:
    return book_service.create(SAMPLE_BOOK)
