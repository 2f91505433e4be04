"""Pydantic schemas for authentication.

Covers the user record (stored and public forms), the request bodies of the
sign-up/sign-in endpoints, and the decoded JWT payload.
"""

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...roles import Role

USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")

# bcrypt ignores (newer releases reject) input beyond 72 bytes
MAX_PASSWORD_BYTES = 72


def _normalize_email(value: str) -> str:
    value = value.strip().lower()
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Email must look like name@example.com")
    return value


# ============================================================================
# User Schemas
# ============================================================================


class UserBase(BaseModel):
    """Fields shared by every user representation."""

    username: str = Field(..., min_length=1, max_length=64)
    email: str = Field(..., min_length=3, max_length=254)


class UserCreate(UserBase):
    """Request body for POST /auth/signup."""

    password: str = Field(..., min_length=1)

    @field_validator("username")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Allow only letters, digits, underscores and hyphens."""
        if not USERNAME_PATTERN.match(v):
            raise ValueError("Username may only contain letters, numbers, underscores, and hyphens")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        return _normalize_email(v)

    @field_validator("password")
    @classmethod
    def validate_password(cls, v: str) -> str:
        if len(v.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return v


class UserLogin(BaseModel):
    """Request body for POST /auth/signin."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        # Only normalized here; a malformed email simply fails to match a user
        return v.strip().lower()


class UserResponse(UserBase):
    """Public user record. Never includes the password hash."""

    id: str
    role: Role
    created_at: str

    model_config = ConfigDict(use_enum_values=True)


class StoredUser(UserResponse):
    """User record as kept by the credential store."""

    password_hash: str

    def to_response(self) -> UserResponse:
        """Drop the password hash."""
        return UserResponse.model_validate(self.model_dump(exclude={"password_hash"}))


# ============================================================================
# Token Schemas
# ============================================================================


class TokenPayload(BaseModel):
    """Decoded JWT claims."""

    sub: str
    iat: int
    exp: int


class AuthResponse(BaseModel):
    """Response body for sign-up and sign-in."""

    message: str
    user: UserResponse
