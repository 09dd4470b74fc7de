"""
Tests for Book Endpoints

This module tests all CRUD operations under /api.

TEST NAMING CONVENTION:
- test_<action>_<scenario>
"""

from datetime import datetime

from fastapi import status

from app.dependencies import get_book_service
from app.main import app
from app.services import StorageUnavailableError
from tests.conftest import SAMPLE_BOOK

NEW_BOOK = {
    "title": "New Book",
    "author": "New Author",
    "price": 19.99,
    "yearPublished": 2024,
}


class TestListBooks:
    """Tests for GET /api"""

    def test_list_books_empty(self, client):
        """An empty catalog is reported as 404 at the HTTP layer."""
        response = client.get("/api")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.text == "Document not found"

    def test_list_books_with_data(self, client, sample_book):
        response = client.get("/api")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert isinstance(data, list)
        assert len(data) == 1
        assert data[0]["title"] == "Test Book"


class TestGetBook:
    """Tests for GET /api/{book_id}"""

    def test_get_book_success(self, client, sample_book):
        response = client.get(f"/api/{sample_book.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == sample_book.id
        assert data["title"] == "Test Book"
        assert data["author"] == "Test Author"
        assert data["price"] == 29.99
        assert data["yearPublished"] == 2023
        assert data["formattedPrice"] == "$29.99"
        assert "createdAt" in data
        assert "updatedAt" in data

    def test_get_book_invalid_id(self, client):
        """Malformed ids are a server error, never a 404."""
        response = client.get("/api/invalid-id")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR

    def test_get_book_not_found(self, client):
        response = client.get("/api/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.text == "Document not found"


class TestCreateBook:
    """Tests for POST /api"""

    def test_create_book(self, client, auth_headers):
        response = client.post("/api", json=NEW_BOOK, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["title"] == "New Book"
        assert data["author"] == "New Author"
        assert data["price"] == 19.99
        assert data["yearPublished"] == 2024
        assert data["id"] is not None

    def test_create_book_price_is_stored_in_cents(self, client, auth_headers, book_store):
        book_id = client.post("/api", json=NEW_BOOK, headers=auth_headers).json()["id"]

        assert book_store.price_in_minor_units(book_id) == 1999
        assert client.get(f"/api/{book_id}").json()["price"] == 19.99

    def test_create_book_accepts_snake_case(self, client, auth_headers):
        body = {**NEW_BOOK}
        body["year_published"] = body.pop("yearPublished")

        response = client.post("/api", json=body, headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["yearPublished"] == 2024

    def test_create_book_invalid_data(self, client, auth_headers):
        response = client.post(
            "/api",
            json={"title": "", "price": -10},
            headers=auth_headers,
        )

        # Deliberately 500, not 400/422
        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR

    def test_create_book_price_too_large(self, client, auth_headers):
        response = client.post(
            "/api",
            json={**NEW_BOOK, "price": 1e17},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "price is too large"}

    def test_create_book_year_out_of_range(self, client, auth_headers):
        response = client.post(
            "/api",
            json={**NEW_BOOK, "yearPublished": 999},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR

    def test_create_book_without_token(self, client):
        response = client.post("/api", json=NEW_BOOK)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["message"] == "No Authorization Header"


class TestUpdateBook:
    """Tests for PUT /api/{book_id}"""

    def test_update_requires_token(self, client, sample_book):
        response = client.put(f"/api/{sample_book.id}", json={"title": "Updated Title"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_update_book(self, client, sample_book, auth_headers):
        response = client.put(
            f"/api/{sample_book.id}",
            json={"title": "Updated Title"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["title"] == "Updated Title"
        assert data["author"] == SAMPLE_BOOK["author"]
        assert data["price"] == SAMPLE_BOOK["price"]
        assert data["yearPublished"] == SAMPLE_BOOK["year_published"]
        created = datetime.fromisoformat(data["createdAt"].replace("Z", "+00:00"))
        updated = datetime.fromisoformat(data["updatedAt"].replace("Z", "+00:00"))
        assert updated > created

    def test_update_book_invalid_field(self, client, sample_book, auth_headers):
        response = client.put(
            f"/api/{sample_book.id}",
            json={"price": -1},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert client.get(f"/api/{sample_book.id}").json()["price"] == SAMPLE_BOOK["price"]

    def test_update_book_not_found(self, client, auth_headers):
        response = client.put(
            "/api/424242",
            json={"title": "Updated Title"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_book_invalid_id(self, client, auth_headers):
        response = client.put(
            "/api/invalid-id",
            json={"title": "Updated Title"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR


class TestDeleteBook:
    """Tests for DELETE /api/{book_id}"""

    def test_delete_requires_token(self, client, sample_book):
        response = client.delete(f"/api/{sample_book.id}")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_delete_book(self, client, sample_book, auth_headers):
        response = client.delete(f"/api/{sample_book.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["title"] == sample_book.title

        # Verify book is deleted
        get_response = client.get(f"/api/{sample_book.id}")
        assert get_response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_book_not_found(self, client, auth_headers):
        response = client.delete("/api/424242", headers=auth_headers)

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestStorageUnavailable:
    def test_storage_outage_is_503(self, client):
        class DownService:
            def list(self):
                raise StorageUnavailableError()

        app.dependency_overrides[get_book_service] = lambda: DownService()

        response = client.get("/api")

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json() == {"error": "Storage unavailable"}


class TestCORS:
    def test_any_origin_allowed(self, client):
        response = client.get("/api", headers={"Origin": "http://example.com"})

        assert response.headers["access-control-allow-origin"] == "*"

    def test_preflight_allows_authorization_header(self, client):
        response = client.options(
            "/api",
            headers={
                "Origin": "http://localhost:3000",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type, Authorization",
            },
        )

        assert response.status_code == status.HTTP_200_OK
        assert "access-control-allow-methods" in response.headers
        assert "authorization" in response.headers["access-control-allow-headers"].lower()


class TestOpenAPI:
    def test_error_bodies_are_documented(self, client):
        schema = client.get("/openapi.json").json()

        assert "ErrorResponse" in schema["components"]["schemas"]
        documented = schema["paths"]["/api/{book_id}"]["get"]["responses"]["500"]
        assert documented["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/ErrorResponse"
        }


class TestHealth:
    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "healthy"
