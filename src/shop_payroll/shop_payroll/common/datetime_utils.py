from __future__ import annotations

from datetime import date, datetime, time
from typing import Callable, Optional

from ..core.constants import HHMM_FORMAT, ISO_DATE_FORMAT, SECONDS_PER_HOUR
from ..core.exceptions import ValidationError

Clock = Callable[[], datetime]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()


def parse_datetime(value: str, field_name: str = "datetime") -> datetime:
    """Parse YYYY-MM-DD (midnight) or an ISO datetime.

    An explicit UTC offset is dropped, not converted: the wall-clock value
    as sent is kept, so its calendar day never depends on the server zone.
    """
    v = str(value).strip() if value is not None else ""
    if not v:
        raise ValidationError(f"{field_name} is required")

    try:
        return datetime.combine(parse_iso_date(v), time.min)
    except ValueError:
        pass

    if v.endswith(("Z", "z")):
        v = v[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(v)
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD or an ISO datetime")

    return parsed.replace(tzinfo=None)


def parse_range(start_s: str, end_s: str) -> tuple[datetime, datetime]:
    """Parse an inclusive [start, end] query range.

    Both bounds are compared as given; a bare date means midnight of that
    day, so ``to=2024-03-04`` excludes punches later on the 4th.
    """
    start = parse_datetime(start_s, "from")
    end = parse_datetime(end_s, "to")
    if end < start:
        raise ValidationError("'to' must not be before 'from'")
    return start, end


def parse_hhmm(value: str) -> time:
    """Parse a wall-clock 'HH:MM' string."""
    try:
        return datetime.strptime(str(value).strip() if value is not None else "", HHMM_FORMAT).time()
    except ValueError:
        raise ValidationError(f"Invalid time {value!r} (expected HH:MM)")


def anchor_hhmm(day: date, value: str) -> datetime:
    return datetime.combine(day, parse_hhmm(value))


def hours_between(start: Optional[datetime], end: Optional[datetime]) -> float:
    """Elapsed decimal hours from start to end, never negative."""
    if start is None or end is None:
        return 0.0
    seconds = (end - start).total_seconds()
    return max(seconds, 0.0) / SECONDS_PER_HOUR
