"""JWT token service.

Issues and verifies the HS256 session tokens carried in the session cookie.
Claims:
- sub: user id
- iat: issued-at (Unix seconds)
- exp: expiry (iat + settings.token_expiry_seconds)

Tokens are not tracked server-side; a token stays valid until it expires.
"""

from datetime import timedelta

import jwt

from ..config import Settings, settings
from ..exceptions import ConfigurationError
from ..utils import isodatetime
from .schemas import TokenPayload


def require_secret(config: Settings | None = None) -> str:
    """
    Return the configured signing secret.

    Raises:
        ConfigurationError: If the secret is missing or blank
    """
    config = config or settings
    secret = config.jwt_secret
    if not secret or not secret.strip():
        raise ConfigurationError(
            "JWT secret is not configured",
            {"setting": "JWT_SECRET"}
        )
    return secret


def generate_access_token(subject_id: str) -> str:
    """
    Generate a signed session token for a user.

    Args:
        subject_id: Stable user identifier, stored in the ``sub`` claim

    Returns:
        Encoded JWT string

    Raises:
        ConfigurationError: If no signing secret is configured
    """
    secret = require_secret()
    issued_at = isodatetime.now_unix()
    payload = {
        "sub": subject_id,
        "iat": issued_at,
        "exp": issued_at + settings.token_expiry_seconds,
    }
    return jwt.encode(payload, secret, algorithm=settings.jwt_algorithm)


def validate_access_token(token: str) -> TokenPayload:
    """
    Verify a session token and return its claims.

    Args:
        token: Encoded JWT string

    Returns:
        TokenPayload with sub, iat and exp

    Raises:
        jwt.ExpiredSignatureError: If the token has expired
        jwt.InvalidTokenError: If the signature, format or claims are invalid
        ConfigurationError: If no signing secret is configured
    """
    secret = require_secret()
    payload = jwt.decode(
        token,
        secret,
        algorithms=[settings.jwt_algorithm],
        options={"require": ["sub", "iat", "exp"]},
    )
    return TokenPayload(sub=payload["sub"], iat=payload["iat"], exp=payload["exp"])


def decode_token_no_validation(token: str) -> dict:
    """
    Decode token claims without checking signature or expiry.

    Only for introspection (e.g. logging the expiry of a rejected token);
    never use the result for an authorization decision.
    """
    return jwt.decode(token, options={"verify_signature": False, "verify_exp": False})


def get_token_expiry_remaining(token: str) -> timedelta | None:
    """
    Time left before the token expires.

    Returns:
        Remaining time, or None if the token is expired or cannot be decoded
    """
    try:
        payload = decode_token_no_validation(token)
        remaining = int(payload["exp"]) - isodatetime.now_unix()
    except (jwt.InvalidTokenError, KeyError, TypeError, ValueError):
        return None
    if remaining <= 0:
        return None
    return timedelta(seconds=remaining)


def is_token_expired(token: str) -> bool:
    """Check the exp claim without verifying the signature. Undecodable tokens count as expired."""
    return get_token_expiry_remaining(token) is None
