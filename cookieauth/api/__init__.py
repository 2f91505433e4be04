"""HTTP API for cookieauth."""

from .auth import auth_bp

__all__ = ["auth_bp"]
