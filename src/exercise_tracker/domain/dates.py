"""Conversions between calendar dates, datetimes and epoch milliseconds.

Stored timestamps are epoch milliseconds and always render as a calendar
date. Inputs without an explicit UTC offset are read as UTC, and rendered
dates are the UTC calendar day.
"""

from datetime import UTC, datetime, timedelta

from exercise_tracker.domain.errors import ValidationError

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_MILLISECOND = timedelta(milliseconds=1)


def to_millis(moment: datetime) -> int:
    """Return epoch milliseconds for an aware or naive (UTC) datetime."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)
    return (moment - EPOCH) // _MILLISECOND


def now_millis() -> int:
    """Return the current server time in epoch milliseconds."""
    return to_millis(datetime.now(tz=UTC))


def parse_date(value: str, field: str = "date") -> int:
    """Parse an ISO-8601 date or datetime string into epoch milliseconds."""
    try:
        millis = to_millis(datetime.fromisoformat(value.strip()))
        format_date(millis)
    except (ValueError, OverflowError) as exc:
        raise ValidationError.for_field(field, f"invalid date: {value!r}") from exc
    return millis


def format_date(millis: int) -> str:
    """Render epoch milliseconds as a ``YYYY-MM-DD`` UTC calendar date."""
    return (EPOCH + millis * _MILLISECOND).date().isoformat()
