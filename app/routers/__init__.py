"""
API Routers Package

Router Structure:
- auth.py: /api/signup, /api/signin, /api/signout
- books.py: /api and /api/{book_id}

Each router is imported and registered in main.py under settings.api_prefix.
"""

from app.routers.auth import router as auth_router
from app.routers.books import router as books_router

__all__ = [
    "auth_router",
    "books_router",
]
