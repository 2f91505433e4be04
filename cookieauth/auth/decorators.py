"""Authentication gate for protected endpoints.

This module provides:
- extract_token() - Read the session token from the request
- authorize() - Decide whether a token grants access
- @auth_required - Enforce authorize() on a view

The gate is stateless: every request is verified independently and nothing
is remembered between requests.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from functools import wraps

import jwt
from flask import g, request

from ..config import settings
from ..exceptions import InvalidToken, Unauthenticated
from . import token

logger = logging.getLogger(__name__)


class Outcome(str, Enum):
    CONTINUE = "continue"
    REJECT = "reject"


class RejectReason(str, Enum):
    UNAUTHENTICATED = "unauthenticated"
    INVALID_TOKEN = "invalid_token"


@dataclass(frozen=True)
class GateDecision:
    """Result of checking a request's session token."""

    outcome: Outcome
    reason: RejectReason | None = None
    subject: str | None = None

    @property
    def allowed(self) -> bool:
        return self.outcome is Outcome.CONTINUE


# ============================================================================
# Token Extraction
# ============================================================================


def extract_token() -> str | None:
    """
    Read the session token from the current request.

    The session cookie is the primary carrier. When it is absent, an
    ``Authorization: Bearer <token>`` header is accepted instead.

    Returns:
        The raw token string, or None if no token was presented
    """
    cookie_token = request.cookies.get(settings.cookie_name)
    if cookie_token:
        return cookie_token

    auth_header = request.headers.get("Authorization", "")
    if auth_header.startswith("Bearer "):
        return auth_header[7:].strip() or None

    return None


# ============================================================================
# Decision
# ============================================================================


def authorize(token_str: str | None) -> GateDecision:
    """
    Decide whether ``token_str`` grants access.

    - No token: REJECT / UNAUTHENTICATED
    - Bad signature, malformed or expired token: REJECT / INVALID_TOKEN
    - Valid token: CONTINUE with the verified subject
    """
    if not token_str:
        return GateDecision(Outcome.REJECT, reason=RejectReason.UNAUTHENTICATED)

    try:
        payload = token.validate_access_token(token_str)
    except jwt.ExpiredSignatureError:
        logger.warning("Session token expired")
        return GateDecision(Outcome.REJECT, reason=RejectReason.INVALID_TOKEN)
    except jwt.InvalidTokenError as e:
        logger.warning(f"Invalid session token: {e}")
        return GateDecision(Outcome.REJECT, reason=RejectReason.INVALID_TOKEN)

    return GateDecision(Outcome.CONTINUE, subject=payload.sub)


# ============================================================================
# Auth Required Decorator
# ============================================================================


def auth_required(f):
    """
    Decorator to require a valid session for endpoint access.

    Stores the verified user id in ``flask.g.user_id``.

    Raises:
        Unauthenticated: If no token was presented (401 "Unauthorized")
        InvalidToken: If the token failed verification (401 "Invalid token")

    Example:
    ```python
    @auth_bp.get("/profile")
    @auth_required
    def profile():
        user_id = g.user_id
        ...
    ```
    """
    @wraps(f)
    def wrapper(*args, **kwargs):
        decision = authorize(extract_token())

        if not decision.allowed:
            if decision.reason is RejectReason.UNAUTHENTICATED:
                logger.warning(f"Unauthenticated request to {request.path}")
                raise Unauthenticated()
            raise InvalidToken()

        g.user_id = decision.subject
        return f(*args, **kwargs)

    return wrapper
