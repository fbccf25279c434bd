"""Policies deciding when an organization counts as inactive."""

from datetime import datetime, timedelta
import re

from src.domain.constants import DEFAULT_RETENTION_DAYS


_RFC3339_PATTERN = re.compile(
    r"^([0-9]{4}-[0-9]{2}-[0-9]{2})[Tt ]"
    r"([0-9]{2}:[0-9]{2}:[0-9]{2})"
    r"(?:\.([0-9]+))?"
    r"([Zz]|[+-][0-9]{2}:[0-9]{2})$"
)


def parse_activity_timestamp(value: object) -> datetime | None:
    """Parse an RFC 3339 timestamp into an aware datetime.

    Only the RFC 3339 ``date-time`` form is accepted; other ISO 8601 variants
    (week dates, basic format, reduced precision) are rejected. Fractions are
    truncated to microseconds.

    Args:
        value: Raw timestamp as returned by the remote service.

    Returns:
        datetime | None: Parsed timestamp, or None when the value is missing,
        malformed, or carries no UTC offset.
    """
    if not isinstance(value, str):
        return None
    match = _RFC3339_PATTERN.match(value.strip())
    if match is None:
        return None
    date_part, time_part, fraction, offset = match.groups()
    if offset in ("Z", "z"):
        offset = "+00:00"
    micros = f".{fraction[:6].ljust(6, '0')}" if fraction else ""
    try:
        return datetime.fromisoformat(f"{date_part}T{time_part}{micros}{offset}")
    except ValueError:
        return None


def compute_cutoff(
    now: datetime,
    retention_days: int = DEFAULT_RETENTION_DAYS,
) -> datetime:
    """Return the instant before which activity is considered stale.

    Args:
        now: Reference clock reading; must be timezone-aware.
        retention_days: Size of the retention window in days.

    Returns:
        datetime: ``now`` minus the retention window.

    Raises:
        ValueError: If ``now`` is naive or the window is negative.
    """
    if now.tzinfo is None or now.utcoffset() is None:
        raise ValueError("reference time must be timezone-aware")
    if retention_days < 0:
        raise ValueError("retention_days must not be negative")
    return now - timedelta(days=retention_days)


def is_inactive(last_activity_at: object, cutoff: datetime) -> bool:
    """Return True when the timestamp parses and is strictly before cutoff."""
    parsed = parse_activity_timestamp(last_activity_at)
    if parsed is None:
        return False
    return parsed < cutoff


__all__ = ["parse_activity_timestamp", "compute_cutoff", "is_inactive"]
