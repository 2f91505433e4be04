"""Flask application entry point."""

import logging
import sys

from flask import Flask, jsonify
from flask_cors import CORS

from .auth import token
from .auth.store import STORE_EXTENSION_KEY, InMemoryUserStore, UserStore
from .config import settings
from .exceptions import AuthenticationError, ConfigurationError, CookieAuthError

# Configure logging
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def _error_body(error: CookieAuthError, include_details: bool = True) -> dict:
    response = {
        "error": {
            "type": error.__class__.__name__,
            "message": error.message
        }
    }
    if include_details and error.details:
        response["error"]["details"] = error.details
    return response


# Error handlers
def handle_authentication_error(error: AuthenticationError):
    """Handle Unauthenticated and InvalidToken (401)."""
    return jsonify(_error_body(error)), 401


def handle_cookie_auth_error(error: CookieAuthError):
    """Handle every other cookieauth exception using its status code."""
    if error.status_code >= 500:
        # Details of server-side failures are logged, never returned
        logger.error(f"{error.__class__.__name__}: {error.message} {error.details}")
        return jsonify(_error_body(error, include_details=False)), error.status_code
    return jsonify(_error_body(error)), error.status_code


def handle_internal_error(error):
    """Handle internal server errors without exposing details."""
    original = getattr(error, "original_exception", None) or error
    logger.error("Internal error", exc_info=original)
    return jsonify({
        "error": {
            "type": "InternalServerError",
            "message": "An internal error occurred"
        }
    }), 500


def register_error_handlers(app: Flask) -> None:
    """Attach the JSON error handlers to ``app``."""
    app.errorhandler(AuthenticationError)(handle_authentication_error)
    app.errorhandler(CookieAuthError)(handle_cookie_auth_error)
    app.errorhandler(500)(handle_internal_error)


def create_app(store: UserStore | None = None) -> Flask:
    """
    Build the Flask application.

    Args:
        store: Credential store to use. Defaults to a fresh InMemoryUserStore.

    Raises:
        ConfigurationError: If no JWT secret is configured. A service that
            cannot sign tokens refuses to start.
    """
    token.require_secret(settings)

    app = Flask(__name__)

    # CORS configuration; credentials are required for the session cookie
    CORS(app, origins=settings.cors_origins, supports_credentials=True)

    app.extensions[STORE_EXTENSION_KEY] = store if store is not None else InMemoryUserStore()

    register_error_handlers(app)

    # Health check endpoint
    @app.route("/health")
    def health():
        """Health check endpoint."""
        return jsonify({"status": "ok"})

    from .api import auth_bp

    app.register_blueprint(auth_bp)

    logger.info("Application created")
    return app


def run() -> None:
    """Console entry point: serve the app on settings.host:settings.port."""
    try:
        app = create_app()
    except ConfigurationError as e:
        logger.error(f"Startup failed: {e.message}")
        sys.exit(1)

    app.run(host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
