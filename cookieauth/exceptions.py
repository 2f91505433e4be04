"""Custom exceptions for cookieauth.

Every exception carries a short user-facing ``message`` and an optional
``details`` dict. The error handlers in ``main.py`` turn them into
``{"error": {"type", "message", "details"}}`` JSON responses.
"""


class CookieAuthError(Exception):
    """Base exception for all cookieauth errors."""

    status_code = 500

    def __init__(self, message: str, details: dict | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(CookieAuthError):
    """Request data failed validation."""

    status_code = 400


class Conflict(CookieAuthError):
    """A user with the same email is already registered."""

    status_code = 400

    def __init__(self, message: str = "User already exists", details: dict | None = None):
        super().__init__(message, details)


class InvalidCredentials(CookieAuthError):
    """Unknown email or wrong password.

    Both cases share this exception and message so callers cannot tell
    which part of the credentials was wrong.
    """

    status_code = 400

    def __init__(self, message: str = "Invalid email or password", details: dict | None = None):
        super().__init__(message, details)


class AuthenticationError(CookieAuthError):
    """A protected resource was requested without a usable session."""

    status_code = 401


class Unauthenticated(AuthenticationError):
    """No session token was presented."""

    def __init__(self, message: str = "Unauthorized", details: dict | None = None):
        super().__init__(message, details)


class InvalidToken(AuthenticationError):
    """A session token was presented but failed verification."""

    def __init__(self, message: str = "Invalid token", details: dict | None = None):
        super().__init__(message, details)


class ConfigurationError(CookieAuthError):
    """The service is misconfigured (e.g. no signing secret). Fatal at startup."""
