"""Shared test fixtures for cookieauth."""

import pytest

from cookieauth.auth import service
from cookieauth.auth.schemas import UserCreate
from cookieauth.auth.store import InMemoryUserStore
from cookieauth.config import settings
from cookieauth.main import create_app

TEST_SECRET = "test-secret-key-for-cookieauth"


@pytest.fixture(autouse=True)
def configured_settings():
    """Give every test a signing secret and a cheap bcrypt work factor.

    Restores the original values afterwards so tests can change settings freely.
    """
    original = settings.model_dump()
    settings.jwt_secret = TEST_SECRET
    settings.bcrypt_work_factor = 4
    try:
        yield settings
    finally:
        for key, value in original.items():
            setattr(settings, key, value)


@pytest.fixture
def store():
    """Fresh in-memory credential store."""
    return InMemoryUserStore()


@pytest.fixture
def app(store):
    """Application wired to the test store."""
    app = create_app(store=store)
    app.config["TESTING"] = True
    return app


@pytest.fixture
def client(app):
    """Create test client for API testing."""
    with app.test_client() as client:
        yield client


@pytest.fixture
def test_user(store):
    """Register a user directly through the service.

    Returns a tuple of (user, password) where user is the UserResponse schema
    and password is the plain text password.
    """
    password = "TestPass123"
    data = UserCreate(username="testuser", email="testuser@example.com", password=password)
    user = service.register_user(store, data)
    return user, password


@pytest.fixture
def signed_in_client(client, test_user):
    """Test client holding a session cookie for test_user.

    Returns a tuple of (client, user).
    """
    user, password = test_user
    response = client.post(
        "/auth/signin",
        json={"email": user.email, "password": password}
    )
    assert response.status_code == 200
    return client, user
