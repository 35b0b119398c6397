from __future__ import annotations

import datetime as _dt
import sys
from collections.abc import Iterable
from typing import Optional, TextIO

from ..data.holiday_cache import Holiday

DEFAULT_LIMIT = 5


def _parse_date(value: str) -> Optional[_dt.date]:
    try:
        return _dt.datetime.strptime(value, "%Y-%m-%d").date()
    except (TypeError, ValueError):
        return None


def upcoming_holidays(
    holidays: Iterable[Holiday],
    today: _dt.date,
    limit: int = DEFAULT_LIMIT,
) -> list[Holiday]:
    """Holidays strictly after ``today``, input order kept, at most ``limit``."""
    out: list[Holiday] = []
    if limit <= 0:
        return out
    for holiday in holidays:
        d = _parse_date(holiday.date)
        if d is None or d <= today:
            continue
        out.append(holiday)
        if len(out) >= limit:
            break
    return out


def format_holiday(holiday: Holiday) -> str:
    counties = "National" if holiday.is_national else ", ".join(holiday.counties or [])
    if len(holiday.types) == 1:
        types = holiday.types[0]
    else:
        types = ", ".join(holiday.types)
    return f"Date: {holiday.date}, Name: {holiday.name}, Counties: {counties}, Types: {types}"


def print_holidays(
    holidays: Iterable[Holiday],
    today: _dt.date,
    *,
    limit: int = DEFAULT_LIMIT,
    out: TextIO | None = None,
) -> list[Holiday]:
    stream = out or sys.stdout
    shown = upcoming_holidays(holidays, today, limit)
    for holiday in shown:
        print(format_holiday(holiday), file=stream)
    return shown


__all__ = ["DEFAULT_LIMIT", "upcoming_holidays", "format_holiday", "print_holidays"]
