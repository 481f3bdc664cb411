from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta, timezone

# All engine arithmetic happens on UTC-midnight instants so that adding N days
# never crosses a DST boundary or shifts the calendar day.

_ISO_DATE = re.compile(r"\d{4}-\d{2}-\d{2}", re.ASCII)


def parse_iso_date(value: str | date | datetime | None) -> date | None:
    """Parse a `YYYY-MM-DD` value into a calendar date.

    Returns None for missing or malformed input instead of raising; callers treat
    that as "insufficient data". Datetimes are reduced to their UTC calendar day.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None and value.tzinfo.utcoffset(value) is not None:
            value = value.astimezone(timezone.utc)
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        return None
    s = value.strip()
    if not _ISO_DATE.fullmatch(s):
        return None
    try:
        return date.fromisoformat(s)
    except ValueError:
        return None


def utc_midnight(value: str | date | datetime | None) -> datetime | None:
    """Anchor a date at 00:00 UTC."""
    d = parse_iso_date(value)
    if d is None:
        return None
    return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)


def add_days(anchor: datetime, days: int) -> datetime:
    return anchor + timedelta(days=days)


def sub_days(anchor: datetime, days: int) -> datetime:
    return anchor - timedelta(days=days)


def days_between(start: str | date | datetime, end: str | date | datetime) -> int | None:
    """Whole days from `start` to `end` (negative when `end` is earlier)."""
    s = parse_iso_date(start)
    e = parse_iso_date(end)
    if s is None or e is None:
        return None
    return (e - s).days


@dataclass(frozen=True, slots=True)
class AnimalAge:
    years: int
    months: int
    days: int


def calculate_age(birth_date: str | date | None, today: date) -> AnimalAge | None:
    """Age as completed years, remaining months and total days since birth."""
    birth = parse_iso_date(birth_date)
    if birth is None or birth > today:
        return None
    total_months = (today.year - birth.year) * 12 + (today.month - birth.month)
    if today.day < birth.day:
        total_months -= 1
    return AnimalAge(
        years=total_months // 12,
        months=total_months % 12,
        days=(today - birth).days,
    )


def next_anniversary(d: date, today: date) -> date:
    """Next occurrence of `d`'s month/day on or after `today`.

    February 29 falls on February 28 in common years.
    """

    def _in_year(year: int) -> date:
        try:
            return d.replace(year=year)
        except ValueError:
            return date(year, 2, 28)

    candidate = _in_year(today.year)
    if candidate < today:
        candidate = _in_year(today.year + 1)
    return candidate
