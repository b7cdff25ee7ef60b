"""Timestamp utilities."""

from datetime import datetime, timezone


def now_iso() -> str:
    """
    Current UTC time as an ISO 8601 string with millisecond precision.

    Matches the shape browsers produce for Date.toISOString(), so documents
    created here and in the web builder carry interchangeable timestamps.

    Example:
        now_iso()
        # "2025-11-13T18:45:40.572Z"
    """
    stamp = datetime.now(timezone.utc).isoformat(timespec="milliseconds")
    return stamp.replace("+00:00", "Z")


def now() -> str:
    """Compact local timestamp for directory names (e.g., "20251113_184540")."""
    return datetime.now().strftime("%Y%m%d_%H%M%S")
