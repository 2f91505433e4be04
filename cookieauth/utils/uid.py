"""Identifier generation.

User ids are random UUID v4 strings; nothing else in the package imports uuid.
"""

from uuid import uuid4


def generate_user_id() -> str:
    """New random user id (UUID v4, canonical string form)."""
    return str(uuid4())
