"""UTC clock helpers.

Record timestamps are ISO 8601 strings with a ``Z`` suffix; token claims are
integer Unix seconds. Both come from here so they agree on UTC.
"""

from datetime import datetime, UTC


def to_timestamp(dt: datetime) -> str:
    """Format a datetime as an ISO 8601 UTC string. Naive values are taken as UTC."""
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC).isoformat().replace("+00:00", "Z")


def now() -> str:
    """Current time as an ISO 8601 UTC string."""
    return to_timestamp(datetime.now(UTC))


def now_unix() -> int:
    """Current time as integer seconds since the epoch."""
    return int(datetime.now(UTC).timestamp())
