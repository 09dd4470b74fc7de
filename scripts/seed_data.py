#!/usr/bin/env python3
"""
Database Seed Script

Populates the catalog with sample books and a demo user for development.

USAGE:
    python scripts/seed_data.py            # add sample data
    python scripts/seed_data.py --clear    # wipe books and users first

Books are created through BookService, so they pass the same validation
and price conversion as books created over the API.
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from sqlalchemy import delete
from sqlalchemy.orm import Session

from app.database import SessionLocal, create_tables
from app.dependencies import get_token_service
from app.models import Book, User
from app.repositories import SqlBookStore, SqlCredentialStore
from app.services import DuplicateIdentityError
from app.services.books import BookService
from app.services.identity import IdentityService

DEMO_USER = {
    "name": "Demo Librarian",
    "email": "librarian@example.com",
    "password": "librarian-demo-password",
}

SAMPLE_BOOKS = [
    {"title": "1984", "author": "George Orwell", "price": 12.99, "year_published": 1949},
    {"title": "Animal Farm", "author": "George Orwell", "price": 9.99, "year_published": 1945},
    {"title": "Pride and Prejudice", "author": "Jane Austen", "price": 8.50, "year_published": 1813},
    {"title": "The Old Man and the Sea", "author": "Ernest Hemingway", "price": 10.25, "year_published": 1952},
    {"title": "Murder on the Orient Express", "author": "Agatha Christie", "price": 11.00, "year_published": 1934},
    {"title": "Foundation", "author": "Isaac Asimov", "price": 14.99, "year_published": 1951},
    {"title": "The Hobbit", "author": "J.R.R. Tolkien", "price": 15.75, "year_published": 1937},
]


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Book))
    db.execute(delete(User))
    db.commit()
    print("Data cleared.")


def create_demo_user(db: Session) -> None:
    identities = IdentityService(SqlCredentialStore(db), get_token_service())
    try:
        identities.signup(DEMO_USER["name"], DEMO_USER["email"], DEMO_USER["password"])
        print(f"Created demo user {DEMO_USER['email']} / {DEMO_USER['password']}")
    except DuplicateIdentityError:
        print(f"Demo user {DEMO_USER['email']} already exists.")


def create_books(db: Session) -> int:
    print("Creating books...")
    books = BookService(SqlBookStore(db))
    for fields in SAMPLE_BOOKS:
        book = books.create(fields)
        print(f"  - {book.title} ({book.formatted_price})")
    return len(SAMPLE_BOOKS)


def seed_database(clear_existing: bool = False) -> None:
    """
    Main function to seed the database.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    create_tables()
    db = SessionLocal()

    try:
        if clear_existing:
            clear_data(db)

        create_demo_user(db)
        count = create_books(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print(f"  - Books: {count}")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the catalog with sample data")
    parser.add_argument("--clear", action="store_true", help="delete existing books and users first")
    args = parser.parse_args()
    seed_database(clear_existing=args.clear)
