"""Utility functions for cookieauth.

Import convention: use module-level imports for clarity.

    from cookieauth.utils import isodatetime, uid
    timestamp = isodatetime.now()
    user_id = uid.generate_user_id()
"""

from . import isodatetime, uid

__all__ = ["isodatetime", "uid"]
