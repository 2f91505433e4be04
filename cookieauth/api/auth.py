"""Authentication endpoints for cookieauth.

- POST /auth/signup  - Register a user
- POST /auth/signin  - Verify credentials and set the session cookie
- GET  /auth/signout - Clear the session cookie
- GET  /auth/profile - Protected; confirms the session is valid

All endpoints return JSON. Failures are raised as cookieauth exceptions and
rendered by the error handlers registered in main.py.
"""

import logging

from flask import Blueprint, g, jsonify

from ..auth import service, token
from ..auth.decorators import auth_required
from ..auth.schemas import AuthResponse, UserCreate, UserLogin
from ..auth.store import get_store
from ..config import settings
from ..exceptions import InvalidCredentials
from .validation import validate_request

logger = logging.getLogger(__name__)


# Create blueprint
auth_bp = Blueprint("auth", __name__, url_prefix="/auth")


def _set_session_cookie(response, token_str: str):
    response.set_cookie(
        settings.cookie_name,
        token_str,
        max_age=settings.token_expiry_seconds,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )


def _clear_session_cookie(response):
    response.delete_cookie(
        settings.cookie_name,
        httponly=True,
        secure=settings.cookie_secure,
        samesite=settings.cookie_samesite,
    )


# ============================================================================
# Registration
# ============================================================================


@auth_bp.post("/signup")
@validate_request
def signup(data: UserCreate):
    """
    Register a new user.

    Example request:
    ```json
    {"username": "alice", "email": "alice@x.com", "password": "pw123"}
    ```

    Example response (201):
    ```json
    {
        "message": "User created successfully",
        "user": {
            "id": "550e8400-e29b-41d4-a716-446655440000",
            "username": "alice",
            "email": "alice@x.com",
            "role": "standard",
            "created_at": "2026-01-01T10:30:00Z"
        }
    }
    ```

    Error Responses:
        400: Conflict if the email is already registered, or ValidationError
    """
    user = service.register_user(get_store(), data)
    body = AuthResponse(message="User created successfully", user=user)
    return jsonify(body.model_dump()), 201


# ============================================================================
# Session Endpoints
# ============================================================================


@auth_bp.post("/signin")
@validate_request
def signin(data: UserLogin):
    """
    Verify credentials and start a session.

    On success the token is set as an HttpOnly cookie that lives as long
    as the token itself; it is not returned in the body.

    Error Responses:
        400: InvalidCredentials ("Invalid email or password"), same for
             unknown email and wrong password
    """
    try:
        user = service.authenticate(get_store(), data.email, data.password)
    except InvalidCredentials:
        logger.warning("Failed sign-in attempt")
        raise

    access_token = token.generate_access_token(user.id)
    logger.info(f"Successful sign-in: {user.username} ({user.id})")

    body = AuthResponse(message="Signed in successfully", user=user)
    response = jsonify(body.model_dump())
    _set_session_cookie(response, access_token)
    return response, 200


@auth_bp.get("/signout")
def signout():
    """
    End the session by clearing the cookie.

    Always succeeds, whether or not a valid token was presented. Tokens are
    not tracked server-side, so a copy of the token kept elsewhere stays
    valid until it expires.
    """
    response = jsonify({"message": "Signed out successfully"})
    _clear_session_cookie(response)
    return response, 200


# ============================================================================
# Protected Endpoints
# ============================================================================


@auth_bp.get("/profile")
@auth_required
def profile():
    """
    Confirm the caller holds a valid session.

    Example response:
    ```json
    {
        "message": "Authorized",
        "user_id": "550e8400-e29b-41d4-a716-446655440000",
        "user": {"id": "...", "username": "alice", ...}
    }
    ```

    ``user`` is null when the token's subject is not in the store.

    Error Responses:
        401: Unauthenticated ("Unauthorized") or InvalidToken ("Invalid token")
    """
    user = service.get_user_by_id(get_store(), g.user_id)
    return jsonify({
        "message": "Authorized",
        "user_id": g.user_id,
        "user": user.model_dump() if user else None,
    }), 200
