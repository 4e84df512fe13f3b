"""
UTC timestamps.

Stored records carry ISO 8601 strings (createdAt/updatedAt, event log
entries); session directories use a compact sortable stamp.
"""

from datetime import datetime, timezone

DISPLAY_FORMAT = "%Y-%m-%d %H:%M:%S"

# (unit suffix, seconds per unit), largest first
_RELATIVE_UNITS = [("d", 86400), ("h", 3600), ("m", 60), ("s", 1)]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def now() -> str:
    """Sortable stamp for directory names, e.g. "20251114_123456"."""
    return _utcnow().strftime("%Y%m%d_%H%M%S")


def now_exact() -> str:
    """ISO 8601 with microseconds and +00:00 offset."""
    return _utcnow().isoformat()


def today() -> str:
    return _utcnow().date().isoformat()


def format_timestamp(iso_timestamp: str, relative: bool = False) -> str:
    """
    Render an ISO 8601 timestamp for terminal output.

    Absolute form is "2025-11-13 18:45:40"; relative form uses the largest
    whole unit ("45s ago", "3h ago", "2d from now"). Strings that do not parse
    are returned unchanged.
    """
    try:
        moment = datetime.fromisoformat(iso_timestamp)
    except (TypeError, ValueError):
        return iso_timestamp

    if not relative:
        return moment.strftime(DISPLAY_FORMAT)

    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    delta = (_utcnow() - moment).total_seconds()
    suffix = "ago" if delta >= 0 else "from now"

    seconds = int(abs(delta))
    for unit, size in _RELATIVE_UNITS:
        if seconds >= size or unit == "s":
            return f"{seconds // size}{unit} {suffix}"
