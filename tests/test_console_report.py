from __future__ import annotations

import datetime as dt
import io

from phl.data.holiday_cache import Holiday
from phl.report.console import format_holiday, print_holidays, upcoming_holidays

TODAY = dt.date(2025, 6, 1)


def _h(date: str, name: str = "Holiday", counties=None, types=None) -> Holiday:
    return Holiday(date=date, name=name, counties=counties, types=types or ["Public"])


def _sample() -> list[Holiday]:
    return [
        _h("2025-01-01", "New Year's Day"),
        _h("2025-04-18", "Good Friday"),
        _h("2025-04-21", "Easter Monday"),
        _h("2025-05-05", "Early May Bank Holiday"),
        _h("2025-05-26", "Spring Bank Holiday"),
        _h("2025-08-25", "Summer Bank Holiday"),
        _h("2025-12-25", "Christmas Day"),
        _h("2025-12-26", "Boxing Day"),
    ]


def test_prints_only_holidays_after_today(capsys):
    shown = print_holidays(_sample(), TODAY)

    assert [h.name for h in shown] == ["Summer Bank Holiday", "Christmas Day", "Boxing Day"]
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Date: 2025-08-25, Name: Summer Bank Holiday, Counties: National, Types: Public",
        "Date: 2025-12-25, Name: Christmas Day, Counties: National, Types: Public",
        "Date: 2025-12-26, Name: Boxing Day, Counties: National, Types: Public",
    ]


def test_today_is_excluded():
    shown = upcoming_holidays([_h("2025-06-01"), _h("2025-06-02")], TODAY)
    assert [h.date for h in shown] == ["2025-06-02"]


def test_at_most_limit_and_input_order_kept():
    holidays = [_h(f"2025-07-{day:02d}", name=str(day)) for day in (20, 3, 15, 9, 1, 30, 11)]
    shown = upcoming_holidays(holidays, TODAY)
    assert [h.name for h in shown] == ["20", "3", "15", "9", "1"]
    assert all(dt.date.fromisoformat(h.date) > TODAY for h in shown)

    assert len(upcoming_holidays(holidays, TODAY, limit=2)) == 2
    assert upcoming_holidays(holidays, TODAY, limit=0) == []


def test_unparseable_dates_are_excluded():
    shown = upcoming_holidays([_h("not-a-date"), _h("2025/07/01"), _h("2025-07-01")], TODAY)
    assert [h.date for h in shown] == ["2025-07-01"]


def test_format_joins_counties_and_types():
    line = format_holiday(
        _h("2025-07-12", "Battle of the Boyne", counties=["GB-NIR", "GB-SCT"], types=["Public", "Bank"])
    )
    assert line == (
        "Date: 2025-07-12, Name: Battle of the Boyne, Counties: GB-NIR, GB-SCT, Types: Public, Bank"
    )


def test_print_to_explicit_stream():
    buf = io.StringIO()
    print_holidays([_h("2025-12-25", "Christmas Day")], TODAY, out=buf)
    assert buf.getvalue().startswith("Date: 2025-12-25, Name: Christmas Day")
