"""Date helpers.

Attendance days are UTC calendar days: `today` is always derived from the UTC
wall clock so every employee shares the same day boundary.
"""
from __future__ import annotations

import re
from datetime import date, datetime, timezone
from typing import Optional

_YEAR_MONTH = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive datetimes (as stored by MySQL DATETIME) as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def iso_day(moment: datetime) -> str:
    """UTC calendar day of `moment` as YYYY-MM-DD."""
    return as_utc(moment).date().isoformat()


def today_iso(now: Optional[datetime] = None) -> str:
    return iso_day(now or now_utc())


def parse_iso_date(value: str) -> date:
    """Parse a zero-padded YYYY-MM-DD string into date."""
    if not isinstance(value, str) or not _ISO_DATE.fullmatch(value):
        raise ValueError(f"not a YYYY-MM-DD date: {value!r}")
    return datetime.strptime(value, "%Y-%m-%d").date()


def is_year_month(value: str) -> bool:
    return isinstance(value, str) and len(value) == 7 and bool(_YEAR_MONTH.match(value))


def month_key(day: date) -> str:
    return f"{day.year:04d}-{day.month:02d}"


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by `delta` calendar months."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def month_label(key: str) -> str:
    """'2024-03' -> 'Mar 2024'."""
    return datetime.strptime(key, "%Y-%m").strftime("%b %Y")


def to_iso_timestamp(value: Optional[datetime]) -> Optional[str]:
    if value is None:
        return None
    return as_utc(value).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def clock_time(value: Optional[datetime]) -> str:
    """HH:MM:SS in UTC, empty string for missing values."""
    if value is None:
        return ""
    return as_utc(value).strftime("%H:%M:%S")
