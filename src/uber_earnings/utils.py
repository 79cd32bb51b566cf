"""Date helpers shared by the feed and export modules."""

from __future__ import annotations

from datetime import date, datetime, timezone, tzinfo

ISO_DATE_FORMAT = "%Y-%m-%d"


def parse_date(s: str) -> date:
    """Parse a date string in YYYY-MM-DD format.

    Args:
        s: Date string in ISO format (YYYY-MM-DD).

    Returns:
        Parsed date object.

    Raises:
        ValueError: If the date string is not in YYYY-MM-DD format.

    Examples:
        >>> parse_date("2024-01-15")
        datetime.date(2024, 1, 15)

    """
    return datetime.strptime(s, ISO_DATE_FORMAT).date()


def format_iso_date(d: date) -> str:
    """Format a date as YYYY-MM-DD (the wire format for request dates)."""
    return d.strftime(ISO_DATE_FORMAT)


def from_epoch_seconds(seconds: int) -> datetime:
    """Convert epoch seconds to an aware UTC datetime.

    Raises:
        ValueError: If the value is outside the representable range.
    """
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as e:
        raise ValueError(f"out-of-range number of seconds: {seconds}") from e


def to_local(instant: datetime, tz: tzinfo | None = None) -> datetime:
    """Convert an aware datetime to ``tz``, or to the system time zone if None."""
    return instant.astimezone(tz)
