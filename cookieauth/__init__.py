"""cookieauth: cookie-carried JWT session authentication for Flask."""

__version__ = "0.1.0"
