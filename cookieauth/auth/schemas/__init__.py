"""Authentication Pydantic schemas for API validation."""

from .auth import (
    AuthResponse,
    Role,
    StoredUser,
    TokenPayload,
    UserBase,
    UserCreate,
    UserLogin,
    UserResponse,
)

__all__ = [
    "AuthResponse",
    "Role",
    "StoredUser",
    "TokenPayload",
    "UserBase",
    "UserCreate",
    "UserLogin",
    "UserResponse",
]
