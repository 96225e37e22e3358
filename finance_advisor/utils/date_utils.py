"""Date manipulation utilities"""

from datetime import date, datetime
from typing import Any, Iterable, Optional, Set


def parse_calendar_date(value: Any) -> Optional[date]:
    """Return the calendar date for a date, datetime or ISO string; None if unparseable"""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()
        try:
            return date.fromisoformat(text)
        except ValueError:
            pass
        # Full ISO timestamps; fromisoformat only learned "Z" in 3.11
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text).date()
        except ValueError:
            return None
    return None


def month_key(day: date) -> str:
    """Year-month bucket key, e.g. "2024-03" (sorts chronologically as a string)"""
    return f"{day.year:04d}-{day.month:02d}"


def distinct_months(days: Iterable[date]) -> Set[str]:
    return {month_key(day) for day in days}
