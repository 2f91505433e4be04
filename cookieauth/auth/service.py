"""Authentication service: password hashing, registration and sign-in.

All functions take the credential store as their first argument so the
logic stays independent of how users are stored.
"""

import logging
from functools import lru_cache

import bcrypt

from ..config import settings
from ..exceptions import Conflict, InvalidCredentials
from ..utils import isodatetime, uid
from .schemas import Role, StoredUser, UserCreate, UserResponse
from .store import UserStore

logger = logging.getLogger(__name__)


@lru_cache(maxsize=None)
def _dummy_hash(work_factor: int) -> str:
    """Hash checked when the email is unknown, built at the same cost as real hashes."""
    return bcrypt.hashpw(b"not-a-real-password", bcrypt.gensalt(rounds=work_factor)).decode("utf-8")


# ============================================================================
# Password Hashing
# ============================================================================


def hash_password(password: str) -> str:
    """Hash a password with bcrypt using the configured work factor."""
    salt = bcrypt.gensalt(rounds=settings.bcrypt_work_factor)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Constant-time comparison against a bcrypt hash."""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except (ValueError, TypeError):
        return False


# ============================================================================
# Users
# ============================================================================


def register_user(store: UserStore, data: UserCreate) -> UserResponse:
    """
    Register a new user.

    Args:
        store: Credential store
        data: Validated sign-up data

    Returns:
        The created user (without password hash)

    Raises:
        Conflict: If a user with the same email already exists
    """
    if store.get_by_email(data.email) is not None:
        logger.warning("Sign-up rejected: email already registered")
        raise Conflict()

    user = StoredUser(
        id=uid.generate_user_id(),
        username=data.username,
        email=data.email,
        password_hash=hash_password(data.password),
        role=Role(settings.default_role),
        created_at=isodatetime.now(),
    )

    # Another request may have registered the same email while we were hashing
    if not store.insert_if_absent(user):
        logger.warning("Sign-up rejected: email registered concurrently")
        raise Conflict()

    logger.info(f"Registered user {user.username} ({user.id})")
    return user.to_response()


def authenticate(store: UserStore, email: str, password: str) -> UserResponse:
    """
    Verify an email/password pair.

    Raises:
        InvalidCredentials: If the email is unknown or the password is wrong
    """
    user = store.get_by_email(email)
    if user is None:
        verify_password(password, _dummy_hash(settings.bcrypt_work_factor))
        raise InvalidCredentials()

    if not verify_password(password, user.password_hash):
        raise InvalidCredentials()

    return user.to_response()


def get_user_by_id(store: UserStore, user_id: str) -> UserResponse | None:
    """Look up a user by id, returning the public record."""
    user = store.get_by_id(user_id)
    return user.to_response() if user else None
