"""
Week bucketing for the leaderboard.

All dates are evaluated in UTC so the bucket never depends on the
server's local time zone.
"""

from datetime import date, datetime, timedelta, timezone

WEEK_START_FORMAT = "%d/%m/%Y"


def parse_iso_datetime(value: str) -> datetime:
    """
    Parse an ISO-8601 date or date-time into an aware UTC datetime.

    Accepts Strava's ``2025-03-12T06:30:00Z`` as well as plain dates
    (``2025-03-12``). Naive values are taken as UTC.

    Raises:
        ValueError: If the string is not ISO-8601
    """
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def monday_of(day: date) -> date:
    """Monday of the week containing ``day`` (Sunday belongs to the previous Monday)."""
    return day - timedelta(days=day.weekday())


def week_start(date_str: str) -> str:
    """
    Week-commencing label for an activity date.

    Args:
        date_str: ISO-8601 date or date-time

    Returns:
        Monday of that week as 'DD/MM/YYYY'

    Example:
        >>> week_start("2025-03-16T10:00:00Z")  # Sunday
        '10/03/2025'
    """
    day = parse_iso_datetime(date_str).date()
    return monday_of(day).strftime(WEEK_START_FORMAT)
