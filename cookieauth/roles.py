"""User roles."""

from enum import Enum


class Role(str, Enum):
    """User role."""

    STANDARD = "standard"
    ELEVATED = "elevated"
