"""Credential store for user records.

The authentication service only talks to the ``UserStore`` interface, so the
backing storage can be swapped (in-memory for development and tests, a
database elsewhere) without touching the auth logic.

A database-backed store must make ``insert_if_absent`` atomic, typically with
a unique constraint on ``email``.
"""

import logging
import threading
from abc import ABC, abstractmethod
from typing import Iterable

from flask import current_app

from .schemas import StoredUser

logger = logging.getLogger(__name__)


class UserStore(ABC):
    """Lookup and insert operations required by the auth service."""

    @abstractmethod
    def get_by_email(self, email: str) -> StoredUser | None:
        """Return the user registered with ``email``, or None."""

    @abstractmethod
    def get_by_id(self, user_id: str) -> StoredUser | None:
        """Return the user with ``user_id``, or None."""

    @abstractmethod
    def insert_if_absent(self, user: StoredUser) -> bool:
        """
        Insert ``user`` unless its email is already taken.

        Returns:
            True if the user was inserted, False if the email already exists.
        """

    @abstractmethod
    def count(self) -> int:
        """Number of stored users."""


class InMemoryUserStore(UserStore):
    """
    Thread-safe in-memory store.

    Users are indexed by id and by email. A single lock guards both indexes,
    so the email check and the insert in ``insert_if_absent`` happen as one
    step even under a threaded server.
    """

    def __init__(self, users: Iterable[StoredUser] = ()):
        self._lock = threading.Lock()
        self._by_id: dict[str, StoredUser] = {}
        self._by_email: dict[str, StoredUser] = {}
        for user in users:
            if not self.insert_if_absent(user):
                raise ValueError(f"Duplicate email in seed users: {user.email}")

    def get_by_email(self, email: str) -> StoredUser | None:
        with self._lock:
            return self._by_email.get(email.strip().lower())

    def get_by_id(self, user_id: str) -> StoredUser | None:
        with self._lock:
            return self._by_id.get(user_id)

    def insert_if_absent(self, user: StoredUser) -> bool:
        email = user.email.strip().lower()
        with self._lock:
            if email in self._by_email or user.id in self._by_id:
                return False
            self._by_id[user.id] = user
            self._by_email[email] = user
        logger.debug(f"Stored user {user.id}")
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._by_id)


# ============================================================================
# Application Access
# ============================================================================

STORE_EXTENSION_KEY = "cookieauth.store"


def get_store() -> UserStore:
    """Return the store attached to the current Flask application."""
    return current_app.extensions[STORE_EXTENSION_KEY]
