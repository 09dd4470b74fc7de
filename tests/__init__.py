"""
Test Suite for the Library Catalog API

Test Organization:
- conftest.py: Shared fixtures (test database, services, client, sample data)
- test_security.py: password hashing and token signing
- test_authorization.py: bearer token admission checks
- test_identity_service.py: signup / signin / signout logic
- test_book_service.py: book CRUD rules and price conversion
- test_repositories.py: store boundary behaviour
- test_auth.py: /api/signup, /api/signin, /api/signout and 401 responses
- test_books.py: /api book endpoints
- test_config.py: settings validation

Running Tests:
    pytest
    pytest tests/test_books.py -v
"""
