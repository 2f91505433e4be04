"""Tests for the in-memory credential store."""

import threading

import pytest

from cookieauth.auth.schemas import StoredUser
from cookieauth.auth.store import InMemoryUserStore, UserStore


def _user(user_id="u1", email="alice@x.com") -> StoredUser:
    return StoredUser(
        id=user_id,
        username="alice",
        email=email,
        password_hash="$2b$04$" + "x" * 53,
        role="standard",
        created_at="2026-01-01T00:00:00Z",
    )


class TestInMemoryUserStore:
    """Tests for InMemoryUserStore."""

    def test_implements_user_store(self):
        assert isinstance(InMemoryUserStore(), UserStore)

    def test_insert_and_lookup(self):
        store = InMemoryUserStore()
        user = _user()

        assert store.insert_if_absent(user) is True
        assert store.get_by_email("alice@x.com") == user
        assert store.get_by_id("u1") == user
        assert store.count() == 1

    def test_lookup_by_email_is_case_insensitive(self):
        store = InMemoryUserStore([_user()])
        assert store.get_by_email("  Alice@X.com ") is not None

    def test_missing_lookups_return_none(self):
        store = InMemoryUserStore()
        assert store.get_by_email("nobody@x.com") is None
        assert store.get_by_id("nobody") is None

    def test_insert_duplicate_email_returns_false(self):
        store = InMemoryUserStore([_user()])

        assert store.insert_if_absent(_user(user_id="u2")) is False
        assert store.get_by_id("u2") is None
        assert store.count() == 1

    def test_insert_duplicate_id_returns_false(self):
        store = InMemoryUserStore([_user()])

        assert store.insert_if_absent(_user(email="other@x.com")) is False
        assert store.count() == 1

    def test_seed_users_with_duplicate_emails_rejected(self):
        with pytest.raises(ValueError):
            InMemoryUserStore([_user(), _user(user_id="u2")])

    def test_concurrent_inserts_keep_email_unique(self):
        """Only one of many concurrent inserts for the same email succeeds."""
        store = InMemoryUserStore()
        results = []
        barrier = threading.Barrier(16)

        def insert(i):
            barrier.wait()
            results.append(store.insert_if_absent(_user(user_id=f"u{i}")))

        threads = [threading.Thread(target=insert, args=(i,)) for i in range(16)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert results.count(True) == 1
        assert store.count() == 1
