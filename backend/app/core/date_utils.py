from datetime import date, datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.core.config import settings


def to_local_datetime(dt: datetime, tz_name: str | None = None) -> datetime:
    """Convert a datetime (assume UTC if naive) to local or the given tz.

    - If `tz_name` is 'local' or None: use system local timezone.
    - If `tz_name` is an IANA tz name (e.g., 'Australia/Sydney'): use that.
      Unknown names fall back to system local.
    """
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    if tz_name and tz_name != "local":
        try:
            return dt.astimezone(ZoneInfo(tz_name))
        except (ZoneInfoNotFoundError, ValueError):
            return dt.astimezone()
    return dt.astimezone()


def parse_date(value, tz_name: str | None = None) -> date | None:
    """Coerce a stored or user-supplied date into datetime.date.

    Accepts:
      - date objects
      - naive datetimes (their own calendar day)
      - 'YYYY-MM-DD'
      - full ISO timestamps such as '2024-02-29T13:00:00.000Z'

    Offset-aware timestamps are what a JS client's toISOString() writes for
    a picked local day, so they are moved into `tz_name` (default: the
    configured timezone) before taking the day.

    Returns None for None or empty strings. Raises ValueError for
    anything else.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return _day_of(value, tz_name)
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError(f"Unsupported date value: {value!r}")

    s = value.strip()
    if s == "":
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        pass
    # fromisoformat before 3.11 does not accept the trailing 'Z'
    if s.endswith("Z"):
        s = s[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(s)
    except ValueError:
        raise ValueError(f"Date must be ISO-8601, got {value!r}") from None
    return _day_of(parsed, tz_name)


def _day_of(dt: datetime, tz_name: str | None) -> date:
    if dt.tzinfo is None:
        return dt.date()
    return to_local_datetime(dt, tz_name or settings.timezone).date()


def to_iso_date(d: date | None) -> str | None:
    """Format a date as 'YYYY-MM-DD'. Returns None if d is None."""
    if d is None:
        return None
    return d.isoformat()


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
