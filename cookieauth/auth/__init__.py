"""Authentication module for cookieauth.

This module provides authentication and authorization functionality:
- Schema validation for auth operations
- JWT token generation and validation
- Password hashing and verification
- Credential store abstraction with an in-memory implementation
- The auth gate for protected endpoints

Auth endpoints (see cookieauth.api.auth):
- POST /auth/signup - Register a user
- POST /auth/signin - Authenticate and set the session cookie
- GET /auth/signout - Clear the session cookie
- GET /auth/profile - Protected profile check
"""

from . import schemas, token

__all__ = ["schemas", "token"]
