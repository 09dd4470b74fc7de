"""
Books Router

CRUD endpoints for the catalog, mounted directly under the API prefix:

    GET    /api         list books (404 "Document not found" when empty)
    POST   /api         create a book          (bearer token)
    GET    /api/{id}    get a book
    PUT    /api/{id}    partially update       (bearer token)
    DELETE /api/{id}    delete, echoing it     (bearer token)

Reads are public and writes require a token. That split is intentional.

The id is taken as a string so that BookService can tell a malformed id
(500) apart from a missing book (404).
"""

import logging

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse

from app.dependencies import Books, CurrentPrincipal
from app.schemas import BookPayload, BookResponse, ErrorResponse, MessageResponse
from app.services import NotFoundError

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Books"],
    responses={
        404: {"description": "Document not found"},
        500: {"model": ErrorResponse, "description": "Validation failed or malformed id"},
        503: {"model": ErrorResponse, "description": "Storage unavailable"},
    },
)

WRITE_RESPONSES = {401: {"model": MessageResponse, "description": "Authorization failed"}}


@router.get(
    "",
    response_model=list[BookResponse],
    summary="List all books",
)
def list_books(books: Books):
    """
    List every book.

    An empty catalog is answered with 404 "Document not found". That is a
    transport decision made here; BookService.list() itself returns [].
    """
    records = books.list()
    if not records:
        return PlainTextResponse(NotFoundError.message, status_code=status.HTTP_404_NOT_FOUND)
    return [BookResponse.from_record(book) for book in records]


@router.post(
    "",
    response_model=BookResponse,
    summary="Create a new book",
    responses=WRITE_RESPONSES,
)
def create_book(payload: BookPayload, books: Books, principal: CurrentPrincipal) -> BookResponse:
    book = books.create(payload.fields())
    logger.info(f"Book {book.id} created by user {principal.subject}")
    return BookResponse.from_record(book)


@router.get(
    "/{book_id}",
    response_model=BookResponse,
    summary="Get a book by ID",
)
def get_book(book_id: str, books: Books) -> BookResponse:
    return BookResponse.from_record(books.get_by_id(book_id))


@router.put(
    "/{book_id}",
    response_model=BookResponse,
    summary="Update a book",
    description="Only the fields present in the body are changed.",
    responses=WRITE_RESPONSES,
)
def update_book(
    book_id: str,
    payload: BookPayload,
    books: Books,
    principal: CurrentPrincipal,
) -> BookResponse:
    book = books.update(book_id, payload.fields())
    logger.info(f"Book {book.id} updated by user {principal.subject}")
    return BookResponse.from_record(book)


@router.delete(
    "/{book_id}",
    response_model=BookResponse,
    summary="Delete a book",
    description="Permanently delete a book and return its last value.",
    responses=WRITE_RESPONSES,
)
def delete_book(book_id: str, books: Books, principal: CurrentPrincipal) -> BookResponse:
    book = books.delete_by_id(book_id)
    logger.info(f"Book {book.id} deleted by user {principal.subject}")
    return BookResponse.from_record(book)
